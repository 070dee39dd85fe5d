# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Random Pauli operators.

All functions draw from :attr:`pauligroup.rng`. Replace it **before** calling them if
you need reproducible results:

>>> import numpy as np
>>> import pauligroup
>>> default_rng = pauligroup.rng
>>> pauligroup.rng = np.random.default_rng(seed=1234)
>>> random_sparse_operator(1000, 3).weight()
3

Remember to put the previous generator back once you are done, if other code relies
on it:

>>> pauligroup.rng = default_rng
"""
import pauligroup
from pauligroup.operators import DenseOperator, SparseOperator
from pauligroup.pauli import Pauli
from pauligroup.phase import Phase

_PAULIS = (Pauli.I, Pauli.X, Pauli.Y, Pauli.Z)
_PHASES = (Phase.ONE, Phase.I, Phase.MINUS_ONE, Phase.MINUS_I)


def random_pauli(non_trivial: bool = False) -> Pauli:
    """Draw a single-qubit Pauli uniformly at random.

    Args:
        non_trivial: if ``True``, the identity is never returned.
    """
    return _PAULIS[pauligroup.rng.integers(int(non_trivial), 4)]


def random_phase() -> Phase:
    """Draw one of the four phases uniformly at random."""
    return _PHASES[pauligroup.rng.integers(4)]


def random_sparse_operator(length: int, weight: int) -> SparseOperator:
    """Draw an operator of the given length acting non-trivially on ``weight`` qubits.

    The support is chosen uniformly among all subsets of ``weight`` qubits, and each of
    its factors uniformly among X, Y and Z.

    Raises:
        ValueError: if ``weight`` is negative or larger than ``length``.
    """
    if not 0 <= weight <= length:
        raise ValueError(f"Weight must be between 0 and {length}, got {weight}")
    positions = sorted(
        int(p) for p in pauligroup.rng.choice(length, size=weight, replace=False)
    )
    factors = pauligroup.rng.integers(1, 4, size=weight)
    return SparseOperator._from_canonical(
        length, positions, [_PAULIS[f] for f in factors]
    )


def random_dense_operator(length: int, with_phase: bool = False) -> DenseOperator:
    """Draw an operator whose factors are independent, uniformly random Paulis.

    Args:
        length: number of qubits.
        with_phase: if ``True``, the phase is drawn uniformly as well, otherwise it
            is :math:`1`.
    """
    factors = pauligroup.rng.integers(0, 4, size=length)
    phase = random_phase() if with_phase else Phase.ONE
    return DenseOperator._from_parts(tuple(_PAULIS[f] for f in factors), phase)
