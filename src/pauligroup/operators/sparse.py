# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Pauli operators optimised for sparse operations.

A Pauli operator is a string of Paulis such as ``IXIX`` or ``XIYIZ``. In
error-correction codes with thousands of qubits, most stabilizers and errors act
non-trivially on a handful of qubits only, so we only care about the non-identity
positions and refer to the previous operators as :math:`X_1 X_3` and
:math:`X_0 Y_2 Z_4`.

A :class:`SparseOperator` stores its length together with the sorted, unique
positions of its non-identity factors and their values. The global phase is **not**
tracked: see :class:`~pauligroup.operators.dense.DenseOperator` if you need it.

Notes:
    All binary operations are implemented as a single merge pass over the sorted
    positions of both operands, so their cost is linear in the *weight* of the
    operators and not in their length.

Examples:
    >>> op1 = SparseOperator(5, [1, 2, 3], [X, Y, Z])
    >>> op2 = SparseOperator(5, [2, 3, 4], [X, X, X])
    >>> op3 = SparseOperator(5, [0, 1], [Z, Z])
    >>> op1.commutes_with(op2), op1.commutes_with(op3)
    (True, False)
    >>> print(op1 * op2)
    [(1, X), (2, Z), (3, Y), (4, X)]
"""
from __future__ import annotations

import bisect
import warnings
from collections.abc import Iterable, Iterator, Sequence
from operator import index
from typing import Optional

from pauligroup.exceptions import LengthMismatchError, OutOfBoundError
from pauligroup.operators.dense import DenseOperator
from pauligroup.pauli import Pauli, X, Y, Z  # noqa: F401
from pauligroup.phase import Phase


class SparseOperator:
    """A multi-qubit Pauli operator storing only its non-identity factors.

    Instances are immutable and hashable. Two operators are equal if they have the
    same length and the same non-trivial factors.

    .. automethod:: __init__
    """

    __slots__ = ("_length", "_positions", "_paulis")

    def __init__(
        self,
        length: int,
        positions: Sequence[int],
        paulis: Sequence[Pauli | str],
    ):
        """Build a new operator.

        To build an operator, we specify its length, the positions of the
        non-identity factors and their values.

        Args:
            length: the number of qubits the operator acts on.
            positions: the 0-based qubit indices of the non-trivial factors. They don't
                need to be sorted.
            paulis: the single-qubit operator at each of ``positions``. Letters
                such as ``"X"`` are accepted as well.

        Raises:
            LengthMismatchError: if the number of positions and Paulis differ.
            OutOfBoundError: if a position is not within ``[0, length)``.
            TypeError: if a position is not an integer.

        Notes:
            Identities in ``paulis`` are discarded. If the same position appears more
            than once, its factors are multiplied together (ignoring the phase) and a
            warning is issued.

        Examples:
            This creates the ``XIYIZ`` operator.

            >>> SparseOperator(5, [0, 2, 4], [X, Y, Z])
            SparseOperator(5, [0, 2, 4], 'XYZ')
        """
        if len(positions) != len(paulis):
            raise LengthMismatchError(len(positions), len(paulis))
        positions = [index(pos) for pos in positions]
        _check_positions(positions, length)

        factors: dict[int, Pauli] = {}
        for pos, pauli in zip(positions, paulis):
            pauli = Pauli(pauli)
            if pos in factors:
                warnings.warn(
                    f"Position {pos} given more than once, its Paulis are multiplied",
                    stacklevel=2,
                )
                pauli = factors[pos] * pauli
            factors[pos] = pauli

        self._length = length
        self._positions: tuple[int, ...] = ()
        self._paulis: tuple[Pauli, ...] = ()
        non_trivial = sorted((p, f) for p, f in factors.items() if f is not Pauli.I)
        if non_trivial:
            self._positions, self._paulis = map(tuple, zip(*non_trivial))

    @classmethod
    def _from_canonical(
        cls, length: int, positions: Sequence[int], paulis: Sequence[Pauli]
    ) -> SparseOperator:
        # positions must be sorted and unique, and no Pauli can be the identity
        operator = cls.__new__(cls)
        operator._length = length
        operator._positions = tuple(positions)
        operator._paulis = tuple(paulis)
        return operator

    @classmethod
    def empty(cls) -> SparseOperator:
        """Create an operator of zero length."""
        return cls._from_canonical(0, (), ())

    @classmethod
    def identity(cls, length: int) -> SparseOperator:
        """Create the identity operator acting on ``length`` qubits."""
        return cls._from_canonical(length, (), ())

    @classmethod
    def from_dense(cls, operator: DenseOperator) -> SparseOperator:
        """Build the sparse counterpart of a dense operator, discarding its phase.

        Examples:
            >>> SparseOperator.from_dense(DenseOperator("XIYZ", Phase.minus_one()))
            SparseOperator(4, [0, 2, 3], 'XYZ')
        """
        positions, paulis = [], []
        for pos, pauli in operator.non_trivial_paulis():
            positions.append(pos)
            paulis.append(pauli)
        return cls._from_canonical(len(operator), positions, paulis)

    def get(self, position: int) -> Optional[Pauli]:
        """Return the Pauli at the given position.

        Returns:
            the stored Pauli, the identity if nothing is stored at ``position``, or
            ``None`` if the position is out of bound.

        Examples:
            >>> operator = SparseOperator(5, [0, 2, 4], [X, Y, Z])
            >>> [str(operator.get(i)) for i in range(6)]
            ['X', 'I', 'Y', 'I', 'Z', 'None']
        """
        if not 0 <= position < self._length:
            return None
        index = bisect.bisect_left(self._positions, position)
        if index < len(self._positions) and self._positions[index] == position:
            return self._paulis[index]
        return Pauli.I

    def weight(self) -> int:
        """Return the number of non-identity factors."""
        return len(self._positions)

    def non_trivial_positions(self) -> tuple[int, ...]:
        """Return the positions of the non-identity factors, in ascending order.

        Examples:
            >>> SparseOperator(5, [4, 0, 2], [Z, X, Y]).non_trivial_positions()
            (0, 2, 4)
        """
        return self._positions

    def non_trivial_paulis(self) -> tuple[Pauli, ...]:
        """Return the non-identity factors, ordered by position."""
        return self._paulis

    def items(self) -> Iterator[tuple[int, Pauli]]:
        """Iterate over ``(position, pauli)`` pairs of the non-identity factors."""
        return zip(self._positions, self._paulis)

    def _overlaps(
        self, other: SparseOperator
    ) -> Iterator[tuple[int, Optional[Pauli], Optional[Pauli]]]:
        """Merge the factors of both operators by position.

        Yields ``(position, left, right)`` for each position stored in at least one of
        the operators, where the side not storing anything at that position is
        ``None``.
        """
        i = j = 0
        left_positions, right_positions = self._positions, other._positions
        while i < len(left_positions) and j < len(right_positions):
            left, right = left_positions[i], right_positions[j]
            if left == right:
                yield left, self._paulis[i], other._paulis[j]
                i += 1
                j += 1
            elif left < right:
                yield left, self._paulis[i], None
                i += 1
            else:
                yield right, None, other._paulis[j]
                j += 1
        for k in range(i, len(left_positions)):
            yield left_positions[k], self._paulis[k], None
        for k in range(j, len(right_positions)):
            yield right_positions[k], None, other._paulis[k]

    def commutes_with(self, other: SparseOperator) -> bool:
        """Check if two operators commute.

        The operators can have different lengths: only positions where both act
        non-trivially can anti-commute, so the shorter one is effectively padded with
        identities.

        Examples:
            >>> long = SparseOperator(10, [0, 2, 7, 9], [X, X, X, X])
            >>> short = SparseOperator(4, [0, 1, 2], [Z, Z, Z])
            >>> long.commutes_with(short)
            True
        """
        anticommuting = 0
        for _, left, right in self._overlaps(other):
            if left is not None and right is not None and left.anticommutes_with(right):
                anticommuting += 1
        return anticommuting % 2 == 0

    def anticommutes_with(self, other: SparseOperator) -> bool:
        """Check if two operators anti-commute.

        See :meth:`commutes_with` for operators of different lengths.
        """
        return not self.commutes_with(other)

    def multiply(self, other: SparseOperator) -> SparseOperator:
        """Return the element-wise product of two operators, ignoring the phase.

        Raises:
            LengthMismatchError: if the operators have different lengths.

        Examples:
            >>> op1 = SparseOperator(5, [1, 2, 3], [X, Y, Z])
            >>> op2 = SparseOperator(5, [2, 3, 4], [Y, X, Z])
            >>> op1.multiply(op2) == SparseOperator(5, [1, 3, 4], [X, Y, Z])
            True
        """
        if self._length != other._length:
            raise LengthMismatchError(self._length, other._length)
        positions, paulis = [], []
        for pos, left, right in self._overlaps(other):
            if left is None:
                product = right
            elif right is None:
                product = left
            else:
                product = left * right
            if product is not Pauli.I:
                positions.append(pos)
                paulis.append(product)
        return SparseOperator._from_canonical(self._length, positions, paulis)

    def _projection(self, kept: Pauli, dropped: Pauli) -> SparseOperator:
        positions = [pos for pos, pauli in self.items() if pauli is not dropped]
        return SparseOperator._from_canonical(
            self._length, positions, [kept] * len(positions)
        )

    def x_part(self) -> SparseOperator:
        """Return the X part of the operator.

        Every factor other than Z becomes an X, and Zs are dropped.

        Examples:
            >>> SparseOperator(5, [0, 2, 4], [X, Y, Z]).x_part()
            SparseOperator(5, [0, 2], 'XX')
        """
        return self._projection(X, Z)

    def z_part(self) -> SparseOperator:
        """Return the Z part of the operator.

        Every factor other than X becomes a Z, and Xs are dropped.

        Examples:
            >>> SparseOperator(5, [0, 2, 4], [X, Y, Z]).z_part()
            SparseOperator(5, [2, 4], 'ZZ')
        """
        return self._projection(Z, X)

    def partition_x_and_z(self) -> tuple[SparseOperator, SparseOperator]:
        """Split the operator into an X-only and a Z-only operator.

        The product of the two is the original operator, up to a phase.
        """
        return self.x_part(), self.z_part()

    def raw_positions(self) -> list[int]:
        """Return a new list with the positions of the non-trivial factors."""
        return list(self._positions)

    def raw_paulis(self) -> list[Pauli]:
        """Return a new list with the non-trivial factors."""
        return list(self._paulis)

    def raw(self) -> tuple[list[int], list[Pauli]]:
        """Return new lists with positions and Paulis of the non-trivial factors.

        Examples:
            >>> positions, paulis = SparseOperator(5, [1, 2, 3], "XYZ").raw()
            >>> positions, [str(p) for p in paulis]
            ([1, 2, 3], ['X', 'Y', 'Z'])
        """
        return self.raw_positions(), self.raw_paulis()

    def to_dense(self, phase: Phase = Phase.ONE) -> DenseOperator:
        """Convert to a :class:`~pauligroup.operators.dense.DenseOperator`.

        Args:
            phase: the global phase to give to the dense operator.
        """
        paulis = [Pauli.I] * self._length
        for pos, pauli in self.items():
            paulis[pos] = pauli
        return DenseOperator(paulis, phase)

    def __mul__(self, other):
        if isinstance(other, SparseOperator):
            return self.multiply(other)
        return NotImplemented

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, position: int) -> Pauli:
        """Return the Pauli at ``position``, which must be within ``[0, len(self))``.

        Negative positions are qubit indices like any other, so they raise
        :class:`IndexError` instead of counting from the end.
        """
        pauli = self.get(position)
        if pauli is None:
            raise IndexError(
                f"position {position} is out of bound for length {self._length}"
            )
        return pauli

    def __eq__(self, other):
        if not isinstance(other, SparseOperator):
            return NotImplemented
        return (
            self._length == other._length
            and self._positions == other._positions
            and self._paulis == other._paulis
        )

    def __hash__(self):
        return hash((self._length, self._positions, self._paulis))

    def __str__(self) -> str:
        return "[" + ", ".join(f"({pos}, {pauli})" for pos, pauli in self.items()) + "]"

    def __repr__(self) -> str:
        paulis = "".join(p.value for p in self._paulis)
        return f"SparseOperator({self._length}, {list(self._positions)}, {paulis!r})"


def _check_positions(positions: Iterable[int], length: int):
    for pos in positions:
        if not 0 <= pos < length:
            raise OutOfBoundError(pos, length)
