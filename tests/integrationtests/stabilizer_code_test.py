# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Check the operator algebra against well-known stabilizer codes."""
import itertools

import numpy as np
import pytest as pt

from pauligroup import DenseOperator, Phase, SparseOperator
from pauligroup.tableau import commutation_matrix, string_to_operator, string_to_sparse

#: Stabilisers of the [[5, 1, 3]] code
FIVE_QUBIT_CODE = ["XZZXI", "IXZZX", "XIXZZ", "ZXIXZ"]
#: Stabilisers of the Steane [[7, 1, 3]] code
STEANE_CODE = ["IIIXXXX", "IXXIIXX", "XIXIXIX", "IIIZZZZ", "IZZIIZZ", "ZIZIZIZ"]


def repetition_code(size: int) -> list[SparseOperator]:
    return [string_to_sparse(f"Z{i} Z{i + 1}", size) for i in range(size - 1)]


@pt.mark.parametrize(
    "stabilisers,logicals",
    [
        (FIVE_QUBIT_CODE, ["XXXXX", "ZZZZZ"]),
        (STEANE_CODE, ["XXXXXXX", "ZZZZZZZ"]),
    ],
)
def test_code_structure(stabilisers, logicals):
    stabilisers = [string_to_sparse(s) for s in stabilisers]
    logical_x, logical_z = (string_to_sparse(s) for s in logicals)

    for a, b in itertools.combinations(stabilisers, 2):
        assert a.commutes_with(b)
    for stabiliser in stabilisers:
        assert stabiliser.commutes_with(logical_x)
        assert stabiliser.commutes_with(logical_z)
    assert logical_x.anticommutes_with(logical_z)
    assert not np.any(commutation_matrix(stabilisers))


def test_products_of_stabilisers_are_stabilisers():
    stabilisers = [string_to_sparse(s) for s in STEANE_CODE]
    for a, b in itertools.combinations(stabilisers, 2):
        product = a * b
        assert all(product.commutes_with(s) for s in stabilisers)


def test_syndrome_of_single_qubit_errors_in_large_code():
    """Single-qubit errors can be told apart by their syndrome."""
    size = 300
    checks = repetition_code(size)
    errors = [SparseOperator(size, [q], ["X"]) for q in range(size)]
    syndromes = commutation_matrix(checks, errors).T
    assert syndromes.shape == (size, size - 1)
    assert len({tuple(np.flatnonzero(s)) for s in syndromes}) == size
    # error on the first qubit only flips the first check
    assert list(np.flatnonzero(syndromes[0])) == [0]
    assert errors[0].anticommutes_with(checks[0])
    assert errors[0].commutes_with(checks[1])


def test_stabiliser_phases_in_five_qubit_code():
    """The product of all four generators is, up to sign, the remaining cyclic shift."""
    generators = [string_to_operator(s) for s in FIVE_QUBIT_CODE]
    product = generators[0]
    for generator in generators[1:]:
        product = product * generator
    assert product.paulis == string_to_operator("ZZXIX").paulis
    assert product.phase in (Phase.one(), Phase.minus_one())


def test_dense_and_sparse_agree_on_codes():
    for a, b in itertools.product(STEANE_CODE, repeat=2):
        dense_a, dense_b = string_to_operator(a), string_to_operator(b)
        sparse_a, sparse_b = string_to_sparse(a), string_to_sparse(b)
        assert dense_a.commutes_with(dense_b) == sparse_a.commutes_with(sparse_b)
        assert (dense_a * dense_b).to_sparse() == sparse_a * sparse_b
        assert isinstance(dense_a * dense_b, DenseOperator)
