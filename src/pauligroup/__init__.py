# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Exact algebra of Pauli operators for quantum error-correction tooling.

``pauligroup`` provides the building blocks needed to manipulate Pauli operators in
stabilizer codes: the single-qubit operators :class:`Pauli`, the global phases
:class:`Phase`, and two multi-qubit representations.
:class:`~pauligroup.operators.SparseOperator` only stores non-identity factors and
ignores phases, which makes it the right choice for large codes whose stabilizers have
low weight. :class:`~pauligroup.operators.DenseOperator` stores all factors and keeps
track of the global phase exactly.

Conversions to strings and to the binary symplectic form used by most stabilizer
tools live in :mod:`pauligroup.tableau`, and random operators can be drawn with
:mod:`pauligroup.sampling`.
"""

import sys

import numpy as np

from pauligroup.exceptions import (  # noqa: F401
    LengthMismatchError,
    OutOfBoundError,
    PauliError,
)
from pauligroup.operators import DenseOperator, SparseOperator  # noqa: F401
from pauligroup.pauli import I, Pauli, X, Y, Z  # noqa: F401
from pauligroup.phase import Phase  # noqa: F401

__version__ = "0.1.0"

#: Random number generator (specifically :func:`numpy.random.Generator.default_rng`)
#:
#: To use your own, or to make your sampling deterministic (by using a fixed
#: seed), you can replace this module variable **before** calling any function in
#: :mod:`pauligroup.sampling`.
rng = np.random.default_rng()

# Avoid surprises
assert sys.version_info >= (3, 10), "Please upgrade Python to at least 3.10"
