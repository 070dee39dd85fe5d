# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Pauli operators stored as a full list of single-qubit Paulis and a global phase.

Contrary to :class:`~pauligroup.operators.sparse.SparseOperator`, a
:class:`DenseOperator` keeps track of its global phase exactly, which makes it the
right choice for composing sequences of physical operations.

Examples:
    Instantiate an operator with global phase :math:`i` and X, Y and Z acting on the
    first, second and third qubit respectively:

    >>> operator = DenseOperator([X, Y, Z], phase=Phase.i())
    >>> print(operator)
    +iXYZ

    The phase defaults to :math:`1`, and can be changed afterwards by multiplying:

    >>> other = DenseOperator([X, X, X])
    >>> Phase.minus_i() * other == DenseOperator([X, X, X], Phase.minus_i())
    True

    The same Pauli can be applied to all qubits at once:

    >>> print(Y * other)
    -iZZZ

    Commutation and products between operators are available as well:

    >>> operator.commutes_with(other)
    True
    >>> print(operator * other)
    +iIZY
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

from pauligroup.exceptions import LengthMismatchError
from pauligroup.pauli import Pauli, X, Y, Z  # noqa: F401
from pauligroup.phase import Phase


class DenseOperator:
    """A global phase and a fixed-length list of single-qubit Paulis.

    Instances are immutable; every operation returns a new operator.

    .. automethod:: __init__
    """

    __slots__ = ("_paulis", "_phase")

    def __init__(self, paulis: Iterable[Pauli | str] = (), phase: Phase = Phase.ONE):
        """Create a new operator.

        Args:
            paulis: the single-qubit operators, one for each qubit. Letters such as
                ``"X"`` are accepted as well.
            phase: the global phase. Defaults to :math:`1`.

        Raises:
            TypeError: if ``phase`` is not a :class:`~pauligroup.phase.Phase`.
        """
        if not isinstance(phase, Phase):
            raise TypeError(f"`phase` must be a Phase, not '{type(phase).__name__}'")
        self._paulis: tuple[Pauli, ...] = tuple(Pauli(p) for p in paulis)
        self._phase = phase

    @classmethod
    def with_paulis(cls, paulis: Iterable[Pauli | str]) -> DenseOperator:
        """Create an operator from the given Paulis with a phase of 1."""
        return cls(paulis)

    @classmethod
    def with_phase_and_paulis(
        cls, phase: Phase, paulis: Iterable[Pauli | str]
    ) -> DenseOperator:
        """Create an operator from the given phase and Paulis."""
        return cls(paulis, phase)

    @classmethod
    def identity(cls, length: int) -> DenseOperator:
        """Create the identity operator acting on ``length`` qubits."""
        return cls._from_parts((Pauli.I,) * length, Phase.ONE)

    @classmethod
    def _from_parts(cls, paulis: tuple[Pauli, ...], phase: Phase) -> DenseOperator:
        # skips normalisation, ``paulis`` must already be a tuple of Pauli members
        operator = cls.__new__(cls)
        operator._paulis = paulis
        operator._phase = phase
        return operator

    @property
    def paulis(self) -> tuple[Pauli, ...]:
        """The single-qubit operators, identities included."""
        return self._paulis

    @property
    def phase(self) -> Phase:
        """The global phase of the operator."""
        return self._phase

    def is_empty(self) -> bool:
        """Check whether the operator acts on no qubit at all."""
        return len(self._paulis) == 0

    def weight(self) -> int:
        """Return the number of non-identity single-qubit operators."""
        return sum(1 for _ in self.non_trivial_positions())

    def non_trivial_positions(self) -> Iterator[int]:
        """Iterate over the positions where the operator is not the identity.

        Examples:
            >>> list(DenseOperator("XIYIZI").non_trivial_positions())
            [0, 2, 4]
        """
        return (pos for pos, pauli in enumerate(self._paulis) if pauli is not Pauli.I)

    def non_trivial_paulis(self) -> Iterator[tuple[int, Pauli]]:
        """Iterate over ``(position, pauli)`` pairs where the Pauli is not identity.

        Examples:
            >>> operator = DenseOperator("XIYIZI")
            >>> [(pos, str(p)) for pos, p in operator.non_trivial_paulis()]
            [(0, 'X'), (2, 'Y'), (4, 'Z')]
        """
        return (
            (pos, pauli)
            for pos, pauli in enumerate(self._paulis)
            if pauli is not Pauli.I
        )

    def _anticommuting_pairs(self, other: DenseOperator) -> int:
        _assert_same_length(self, other)
        return sum(
            1 for p, q in zip(self._paulis, other._paulis) if p.anticommutes_with(q)
        )

    def commutes_with(self, other: DenseOperator) -> bool:
        """Check if two operators commute.

        Raises:
            LengthMismatchError: if the operators have different lengths. No
                implicit padding with identities takes place.

        Examples:
            >>> first = DenseOperator("XYZ")
            >>> first.commutes_with(DenseOperator("YYY"))
            True
            >>> first.commutes_with(DenseOperator("IXI"))
            False
        """
        return self._anticommuting_pairs(other) % 2 == 0

    def anticommutes_with(self, other: DenseOperator) -> bool:
        """Check if two operators anti-commute.

        Raises:
            LengthMismatchError: if the operators have different lengths.
        """
        return self._anticommuting_pairs(other) % 2 == 1

    def multiply(self, other: Union[DenseOperator, Phase, Pauli]) -> DenseOperator:
        """Multiply the operator, on the right, by ``other``.

        Args:
            other: either

                * another operator of the same length, in which case the Paulis are
                  multiplied position by position and all the phases are collected;
                * a phase, which is multiplied into the global phase;
                * a single Pauli, which is multiplied onto every qubit.

        Raises:
            LengthMismatchError: if ``other`` is an operator of a different length.
            TypeError: if ``other`` is none of the supported types.

        Examples:
            >>> first = DenseOperator("IXYZ", Phase.i())
            >>> print(first.multiply(DenseOperator("XZXZ")))
            -iXYZI
            >>> print(DenseOperator("YXZI", Phase.minus_one()).multiply(Z))
            -XYIZ
        """
        if isinstance(other, DenseOperator):
            _assert_same_length(self, other)
            phase = self._phase * other._phase
            products = []
            for p, q in zip(self._paulis, other._paulis):
                factor, product = p.multiply_with_phase(q)
                phase *= factor
                products.append(product)
            return DenseOperator._from_parts(tuple(products), phase)
        if isinstance(other, Phase):
            return DenseOperator._from_parts(self._paulis, self._phase * other)
        if isinstance(other, Pauli):
            phase = self._phase
            products = []
            for p in self._paulis:
                factor, product = p.multiply_with_phase(other)
                phase *= factor
                products.append(product)
            return DenseOperator._from_parts(tuple(products), phase)
        raise TypeError(f"Cannot multiply a DenseOperator by '{type(other).__name__}'")

    def to_sparse(self):
        """Convert to a :class:`~pauligroup.operators.sparse.SparseOperator`.

        .. important:: The phase of the operator is discarded.
        """
        from pauligroup.operators.sparse import SparseOperator

        return SparseOperator.from_dense(self)

    def __mul__(self, other):
        if isinstance(other, (DenseOperator, Phase, Pauli)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        # phases and Paulis act the same from either side
        if isinstance(other, (Phase, Pauli)):
            return self.multiply(other)
        return NotImplemented

    def __neg__(self) -> DenseOperator:
        return self.multiply(Phase.MINUS_ONE)

    def __len__(self) -> int:
        return len(self._paulis)

    def __getitem__(self, position: int) -> Pauli:
        """Return the Pauli at ``position``, which must be within ``[0, len(self))``.

        As for :class:`~pauligroup.operators.sparse.SparseOperator`, negative
        positions raise :class:`IndexError` instead of counting from the end.
        """
        if not 0 <= position < len(self._paulis):
            raise IndexError(
                f"position {position} is out of bound for length {len(self._paulis)}"
            )
        return self._paulis[position]

    def __eq__(self, other):
        if not isinstance(other, DenseOperator):
            return NotImplemented
        return self._phase is other._phase and self._paulis == other._paulis

    def __hash__(self):
        return hash((self._phase, self._paulis))

    def __str__(self) -> str:
        return _PREFIXES[self._phase] + "".join(p.value for p in self._paulis)

    def __repr__(self) -> str:
        paulis = "".join(p.value for p in self._paulis)
        return f"DenseOperator({paulis!r}, Phase.{self._phase.name})"


def _assert_same_length(first: DenseOperator, second: DenseOperator):
    if len(first) != len(second):
        raise LengthMismatchError(len(first), len(second))


_PREFIXES = {
    Phase.ONE: "+",
    Phase.MINUS_ONE: "-",
    Phase.I: "+i",
    Phase.MINUS_I: "-i",
}
