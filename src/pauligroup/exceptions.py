# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Errors raised when operators are built from, or combined with, invalid data."""


class PauliError(ValueError):
    """Base class of all errors related to invalid Pauli operator data."""


class LengthMismatchError(PauliError):
    """Two lengths which must agree are different.

    This happens when building a sparse operator from a different number of positions
    and Paulis, or when multiplying/comparing operators acting on a different number
    of qubits.

    .. automethod:: __init__
    """

    def __init__(self, first: int, second: int):
        """Create a new instance of the error."""
        super().__init__(first, second)
        self.first = first
        self.second = second

    def __str__(self):  # noqa: D105
        return f"incompatible lengths {self.first} and {self.second}"


class OutOfBoundError(PauliError):
    """A qubit position is not within the length of the operator.

    .. automethod:: __init__
    """

    def __init__(self, position: int, length: int):
        """Create a new instance of the error."""
        super().__init__(position, length)
        self.position = position
        self.length = length

    def __str__(self):  # noqa: D105
        return f"position {self.position} is out of bound for length {self.length}"
