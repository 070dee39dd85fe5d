# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Global phases of Pauli operators.

Products of Pauli operators only ever pick up a factor among :math:`1`,
:math:`-1`, :math:`i` and :math:`-i`. These four units of the Gaussian integers form
the cyclic group of order 4 generated by :math:`i`, and :class:`Phase` implements
exactly that group.

Notes:
    Phases are **never** stored as floating point complex numbers. Each member holds
    its real and imaginary part as a pair of small integers and multiplication is
    carried out on those integers. The product is then looked up among the members of
    the enumeration, which means that a value outside of the group cannot be created.

Examples:
    >>> Phase.minus_one() * Phase.i() == Phase.minus_i()
    True
    >>> Phase.i() * Phase.minus_i() == Phase.one()
    True
    >>> str(Phase.i() * Phase.i())
    '-1'
"""
from __future__ import annotations

import enum


class Phase(enum.Enum):
    """Global phase of a Pauli operator.

    This is an enum, each value being the ``(real, imaginary)`` pair of the phase.
    """

    #: Phase :math:`1`
    ONE = (1, 0)
    #: Phase :math:`-1`
    MINUS_ONE = (-1, 0)
    #: Phase :math:`i`
    I = (0, 1)  # noqa: E741
    #: Phase :math:`-i`
    MINUS_I = (0, -1)

    @classmethod
    def one(cls) -> Phase:
        """Return the phase :math:`1`."""
        return cls.ONE

    @classmethod
    def minus_one(cls) -> Phase:
        """Return the phase :math:`-1`."""
        return cls.MINUS_ONE

    @classmethod
    def i(cls) -> Phase:
        """Return the phase :math:`i`."""
        return cls.I

    @classmethod
    def minus_i(cls) -> Phase:
        """Return the phase :math:`-i`."""
        return cls.MINUS_I

    @classmethod
    def from_string(cls, text: str) -> Phase:
        """Parse one of ``"1"``, ``"-1"``, ``"i"`` or ``"-i"``.

        A leading ``+`` is accepted and the empty string stands for :math:`1`, so that
        the sign prefix of an operator string can be fed to this function directly.

        Raises:
            ValueError: if ``text`` is not the representation of a phase.

        Examples:
            >>> Phase.from_string("-i")
            <Phase.MINUS_I: (0, -1)>
            >>> Phase.from_string("+")
            <Phase.ONE: (1, 0)>
        """
        try:
            return _PARSED[text.strip()]
        except KeyError:
            raise ValueError(f"'{text}' is not one of 1, -1, i or -i") from None

    @property
    def real(self) -> int:
        """Real part of the phase."""
        return self.value[0]

    @property
    def imag(self) -> int:
        """Imaginary part of the phase."""
        return self.value[1]

    def is_real(self) -> bool:
        """Check whether the phase is :math:`\\pm 1`."""
        return self.imag == 0

    def multiply(self, other: Phase) -> Phase:
        """Multiply two phases together.

        This is a plain complex multiplication restricted to the four units.

        Examples:
            >>> Phase.i().multiply(Phase.minus_one())
            <Phase.MINUS_I: (0, -1)>
        """
        re1, im1 = self.value
        re2, im2 = other.value
        return Phase((re1 * re2 - im1 * im2, re1 * im2 + im1 * re2))

    def conjugate(self) -> Phase:
        """Return the complex conjugate, which is also the inverse in the group."""
        return Phase((self.real, -self.imag))

    def __mul__(self, other):
        if isinstance(other, Phase):
            return self.multiply(other)
        return NotImplemented

    def __neg__(self) -> Phase:
        return self.multiply(Phase.MINUS_ONE)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Phase.ONE: "1",
    Phase.MINUS_ONE: "-1",
    Phase.I: "i",
    Phase.MINUS_I: "-i",
}

_PARSED = {symbol: phase for phase, symbol in _SYMBOLS.items()}
_PARSED.update({"": Phase.ONE, "+": Phase.ONE, "-": Phase.MINUS_ONE})
_PARSED.update({"+1": Phase.ONE, "+i": Phase.I})
