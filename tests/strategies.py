# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Hypothesis strategies generating random phases, Paulis and operators."""
from hypothesis import strategies as st

from pauligroup import DenseOperator, Pauli, Phase, SparseOperator

paulis = st.sampled_from(list(Pauli))
non_trivial_paulis = st.sampled_from([Pauli.X, Pauli.Y, Pauli.Z])
phases = st.sampled_from(list(Phase))


@st.composite
def sparse_operators(draw, length=None, max_length: int = 50) -> SparseOperator:
    """Generate a sparse operator, of a random length unless ``length`` is given."""
    if length is None:
        length = draw(st.integers(min_value=0, max_value=max_length))
    positions = draw(
        st.lists(
            st.integers(min_value=0, max_value=max(length - 1, 0)),
            unique=True,
            max_size=length,
        )
    )
    values = draw(
        st.lists(non_trivial_paulis, min_size=len(positions), max_size=len(positions))
    )
    return SparseOperator(length, positions, values)


@st.composite
def equal_length_sparse_operators(
    draw, count: int = 2, max_length: int = 50
) -> tuple[SparseOperator, ...]:
    """Generate ``count`` sparse operators sharing the same length."""
    length = draw(st.integers(min_value=0, max_value=max_length))
    return tuple(draw(sparse_operators(length=length)) for _ in range(count))


@st.composite
def dense_operators(draw, length=None, max_length: int = 30) -> DenseOperator:
    """Generate a dense operator with a random phase."""
    if length is None:
        length = draw(st.integers(min_value=0, max_value=max_length))
    factors = draw(st.lists(paulis, min_size=length, max_size=length))
    return DenseOperator(factors, draw(phases))


@st.composite
def equal_length_dense_operators(
    draw, count: int = 2, max_length: int = 30
) -> tuple[DenseOperator, ...]:
    """Generate ``count`` dense operators sharing the same length."""
    length = draw(st.integers(min_value=0, max_value=max_length))
    return tuple(draw(dense_operators(length=length)) for _ in range(count))
