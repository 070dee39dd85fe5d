# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
import pytest as pt
from hypothesis import given
from strategies import (
    dense_operators,
    equal_length_dense_operators,
    non_trivial_paulis,
    paulis,
    phases,
)

from pauligroup import (
    DenseOperator,
    I,
    LengthMismatchError,
    Phase,
    SparseOperator,
    X,
    Y,
    Z,
)


class TestConstruction:
    def test_phase_defaults_to_one(self):
        assert DenseOperator([X, Y, Z]).phase is Phase.one()

    def test_with_phase(self):
        operator = DenseOperator([X, Y, Z], Phase.minus_i())
        assert operator.phase is Phase.minus_i()
        assert operator.paulis == (X, Y, Z)

    def test_named_constructors(self):
        assert DenseOperator.with_paulis([X, I]) == DenseOperator([X, I])
        assert DenseOperator.with_phase_and_paulis(Phase.i(), [X, I]) == DenseOperator(
            [X, I], Phase.i()
        )

    def test_letters_are_accepted(self):
        assert DenseOperator("XIZ") == DenseOperator([X, I, Z])

    def test_invalid_phase(self):
        with pt.raises(TypeError):
            DenseOperator([X], 1j)

    def test_empty(self):
        assert DenseOperator().is_empty()
        assert len(DenseOperator()) == 0
        assert not DenseOperator([I]).is_empty()

    def test_identity(self):
        assert DenseOperator.identity(3) == DenseOperator([I, I, I])


class TestAccessors:
    def test_non_trivial_positions(self):
        operator = DenseOperator([X, I, Y, I, Z, I])
        assert list(operator.non_trivial_positions()) == [0, 2, 4]
        # iterators can be requested again
        assert list(operator.non_trivial_positions()) == [0, 2, 4]

    def test_non_trivial_paulis(self):
        operator = DenseOperator([X, I, Y, I, Z, I])
        assert list(operator.non_trivial_paulis()) == [(0, X), (2, Y), (4, Z)]
        assert operator.weight() == 3

    def test_indexing(self):
        operator = DenseOperator([X, I, Y])
        assert operator[2] is Y
        with pt.raises(IndexError):
            operator[3]
        # positions are qubit indices, they do not count from the end
        with pt.raises(IndexError):
            operator[-1]

    def test_equality_includes_phase(self):
        assert DenseOperator([X], Phase.i()) != DenseOperator([X], Phase.minus_i())
        assert DenseOperator([X], Phase.i()) == DenseOperator([X], Phase.i())
        assert DenseOperator([X]) != SparseOperator(1, [0], [X])

    def test_string_representations(self):
        assert str(DenseOperator("XIZ")) == "+XIZ"
        assert str(DenseOperator("XIZ", Phase.minus_i())) == "-iXIZ"
        assert repr(DenseOperator("XY", Phase.i())) == "DenseOperator('XY', Phase.I)"


class TestCommutation:
    def test_commutations(self):
        first = DenseOperator([X, Y, Z])
        second = DenseOperator([Y, Y, Y])
        third = DenseOperator([I, X, I])
        assert first.commutes_with(second)
        assert not first.commutes_with(third)
        assert not second.commutes_with(third)
        assert not first.anticommutes_with(second)
        assert first.anticommutes_with(third)
        assert second.anticommutes_with(third)

    def test_phase_is_irrelevant(self):
        assert DenseOperator([X], Phase.i()).commutes_with(DenseOperator([X]))

    @pt.mark.parametrize("method", ["commutes_with", "anticommutes_with"])
    def test_different_lengths(self, method):
        with pt.raises(LengthMismatchError):
            getattr(DenseOperator([X, Y]), method)(DenseOperator([X, Y, Z]))

    @given(equal_length_dense_operators())
    def test_commutation_is_symmetric(self, operators):
        a, b = operators
        assert a.commutes_with(b) == b.commutes_with(a)
        assert a.commutes_with(b) != a.anticommutes_with(b)

    @given(equal_length_dense_operators())
    def test_commuting_operators_have_equal_products(self, operators):
        a, b = operators
        if a.commutes_with(b):
            assert a * b == b * a
        else:
            assert a * b == -(b * a)


class TestMultiplication:
    def test_operator_operator_multiplication(self):
        first = DenseOperator([I, X, Y, Z], Phase.i())
        second = DenseOperator([X, Z, X, Z], Phase.one())
        product = DenseOperator([X, Y, Z, I], Phase.minus_i())
        assert first * second == product
        assert second * first == product
        assert first.multiply(second) == product

    def test_operator_phase_multiplication(self):
        operator = DenseOperator([X, Z, I, Y], Phase.minus_one())
        product = DenseOperator([X, Z, I, Y], Phase.minus_i())
        assert operator * Phase.i() == product
        assert Phase.i() * operator == product

    def test_operator_pauli_multiplication(self):
        operator = DenseOperator([Y, X, Z, I], Phase.minus_one())
        product = DenseOperator([X, Y, I, Z], Phase.minus_one())
        assert operator * Z == product
        assert Z * operator == product

    def test_pauli_applied_to_all_qubits(self):
        assert Y * DenseOperator([X, X, X]) == DenseOperator([Z, Z, Z], Phase.minus_i())

    def test_negation(self):
        assert -DenseOperator([X], Phase.i()) == DenseOperator([X], Phase.minus_i())

    def test_different_lengths(self):
        with pt.raises(LengthMismatchError) as excinfo:
            DenseOperator([X, Y]) * DenseOperator([X, Y, Z])
        assert (excinfo.value.first, excinfo.value.second) == (2, 3)

    def test_unsupported_operand(self):
        with pt.raises(TypeError):
            DenseOperator([X]).multiply(2)
        with pt.raises(TypeError):
            DenseOperator([X]) * SparseOperator(1, [0], [X])

    @given(equal_length_dense_operators())
    def test_phase_closure(self, operators):
        a, b = operators
        product = a * b
        assert product.phase in list(Phase)
        assert len(product) == len(a)

    @given(equal_length_dense_operators(count=3))
    def test_associative(self, operators):
        a, b, c = operators
        assert (a * b) * c == a * (b * c)

    @given(dense_operators())
    def test_square_is_plus_or_minus_identity(self, operator):
        square = operator * operator
        assert square.weight() == 0
        assert square.phase is operator.phase * operator.phase

    @given(dense_operators(), phases)
    def test_phase_multiplication_keeps_paulis(self, operator, phase):
        product = operator * phase
        assert product.paulis == operator.paulis
        assert product.phase is operator.phase * phase
        assert phase * operator == product

    @given(dense_operators(), paulis)
    def test_pauli_multiplication_matches_operator_product(self, operator, pauli):
        repeated = DenseOperator([pauli] * len(operator))
        assert operator * pauli == operator * repeated

    @given(dense_operators(), non_trivial_paulis)
    def test_pauli_multiplication_is_involution(self, operator, pauli):
        assert (operator * pauli) * pauli == operator

    @given(dense_operators())
    def test_to_sparse_drops_phase(self, operator):
        sparse = operator.to_sparse()
        assert len(sparse) == len(operator)
        assert sparse.non_trivial_positions() == tuple(operator.non_trivial_positions())
