# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Single-qubit Pauli operators.

The four operators :math:`I, X, Y, Z` form, up to a global phase, a group under
multiplication where :math:`I` is the identity and every other element is its own
inverse. Two flavours of multiplication are available:

* :meth:`Pauli.multiply` (also available as ``*``) drops the phase entirely, which is
  what error-correction algorithms usually need;
* :meth:`Pauli.multiply_with_phase` returns the :class:`~pauligroup.phase.Phase`
  picked up by the product alongside the resulting operator.

Examples:
    >>> X * Y
    <Pauli.Z: 'Z'>
    >>> X.multiply_with_phase(Y)
    (<Phase.I: (0, 1)>, <Pauli.Z: 'Z'>)
    >>> X.commutes_with(I), Y.anticommutes_with(Z)
    (True, True)
"""
from __future__ import annotations

import enum

from pauligroup.phase import Phase


class Pauli(enum.Enum):
    """Single-qubit Pauli operator (I, X, Y, Z) without a phase.

    This is an enum. Calling the class with a letter, e.g. ``Pauli("Y")``, returns the
    corresponding member.
    """

    #: Identity
    I = "I"  # noqa: E741
    #: Pauli X
    X = "X"
    #: Pauli Y
    Y = "Y"
    #: Pauli Z
    Z = "Z"

    @classmethod
    def from_bits(cls, x: int, z: int) -> Pauli:
        """Build the operator from its binary symplectic representation.

        Args:
            x: whether the operator has an X component.
            z: whether the operator has a Z component.

        Examples:
            >>> Pauli.from_bits(1, 1)
            <Pauli.Y: 'Y'>
        """
        return _FROM_BITS[int(x) & 1, int(z) & 1]

    @property
    def x(self) -> int:
        """X bit of the binary symplectic representation."""
        return int(self in (Pauli.X, Pauli.Y))

    @property
    def z(self) -> int:
        """Z bit of the binary symplectic representation."""
        return int(self in (Pauli.Z, Pauli.Y))

    def is_trivial(self) -> bool:
        """Check if the operator is the identity."""
        return self is Pauli.I

    def is_non_trivial(self) -> bool:
        """Check if the operator is not the identity."""
        return self is not Pauli.I

    def commutes_with(self, other: Pauli) -> bool:
        """Check if the operator commutes with ``other``.

        Examples:
            >>> I.commutes_with(X), Y.commutes_with(Y), Z.commutes_with(I)
            (True, True, True)
        """
        return self is Pauli.I or other is Pauli.I or self is other

    def anticommutes_with(self, other: Pauli) -> bool:
        """Check if the operator anti-commutes with ``other``.

        Examples:
            >>> X.anticommutes_with(Y), Y.anticommutes_with(Z), Z.anticommutes_with(X)
            (True, True, True)
        """
        return not self.commutes_with(other)

    def multiply(self, other: Pauli) -> Pauli:
        """Multiply two operators discarding the phase.

        Without a phase the product is commutative, so only the cyclic products
        :math:`XY = Z`, :math:`YZ = X` and :math:`ZX = Y` are listed and the reversed
        pairs are computed by swapping the factors.
        """
        if self is Pauli.I:
            return other
        if self is other:
            return Pauli.I
        product = _CYCLIC_PRODUCTS.get((self, other))
        if product is None:
            return other.multiply(self)
        return product

    def multiply_with_phase(self, other: Pauli) -> tuple[Phase, Pauli]:
        """Multiply two operators keeping track of the phase.

        Returns:
            a ``(phase, pauli)`` pair such that ``self`` times ``other`` equals
            ``phase`` times ``pauli``.

        Examples:
            >>> Y.multiply_with_phase(X)
            (<Phase.MINUS_I: (0, -1)>, <Pauli.Z: 'Z'>)
            >>> Z.multiply_with_phase(Z)
            (<Phase.ONE: (1, 0)>, <Pauli.I: 'I'>)
        """
        return _PHASED_PRODUCTS[self, other]

    def __mul__(self, other):
        if isinstance(other, Pauli):
            return self.multiply(other)
        return NotImplemented

    def __str__(self) -> str:
        return self.value


#: Alias for :attr:`Pauli.I`
I = Pauli.I  # noqa: E741
#: Alias for :attr:`Pauli.X`
X = Pauli.X
#: Alias for :attr:`Pauli.Y`
Y = Pauli.Y
#: Alias for :attr:`Pauli.Z`
Z = Pauli.Z

_FROM_BITS = {(0, 0): I, (1, 0): X, (1, 1): Y, (0, 1): Z}

_CYCLIC_PRODUCTS = {(X, Y): Z, (Y, Z): X, (Z, X): Y}

_PHASED_PRODUCTS: dict[tuple[Pauli, Pauli], tuple[Phase, Pauli]] = {
    (I, I): (Phase.ONE, I),
    (I, X): (Phase.ONE, X),
    (I, Y): (Phase.ONE, Y),
    (I, Z): (Phase.ONE, Z),
    (X, I): (Phase.ONE, X),
    (X, X): (Phase.ONE, I),
    (X, Y): (Phase.I, Z),
    (X, Z): (Phase.MINUS_I, Y),
    (Y, I): (Phase.ONE, Y),
    (Y, X): (Phase.MINUS_I, Z),
    (Y, Y): (Phase.ONE, I),
    (Y, Z): (Phase.I, X),
    (Z, I): (Phase.ONE, Z),
    (Z, X): (Phase.I, Y),
    (Z, Y): (Phase.MINUS_I, X),
    (Z, Z): (Phase.ONE, I),
}
