# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Conversions between operators, strings and their binary symplectic form.

Many stabilizer-code tools, simulators included, describe a Pauli operator on
:math:`n` qubits by :math:`2n+1` bits: the :math:`n` "X" bits, the :math:`n` "Z" bits
and one sign bit. A Y factor has both bits set. This module converts
:class:`~pauligroup.operators.SparseOperator` and
:class:`~pauligroup.operators.DenseOperator` to and from this form, stored as
``numpy`` arrays of ``uint8``, and uses it to compute the commutation relations of many
operators at once with a few matrix products.

It also parses operators from strings, in one of two forms:

* a **canonical** form lists all factors, identities included, e.g. ``"-iXIYZ"``;
* a **short** form lists only the non-identity factors followed by their 0-based
  qubit index, e.g. ``"X0 Y2 Z3"``.

Examples:
    >>> op = string_to_operator("-XIZ")
    >>> operator_to_tableau(op)
    array([1, 0, 0, 0, 0, 1, 1], dtype=uint8)
    >>> print(tableau_to_dense(operator_to_tableau(op)))
    -XIZ
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Optional, TypeAlias, Union

import numpy as np

from pauligroup.exceptions import LengthMismatchError, OutOfBoundError
from pauligroup.operators import DenseOperator, SparseOperator
from pauligroup.pauli import Pauli
from pauligroup.phase import Phase

Tableau: TypeAlias = np.ndarray[Any, np.dtype[np.uint8]]
Operator = Union[SparseOperator, DenseOperator]

_PREFIX_RE = re.compile(r"([+-]?i?)(.*)")
_SHORT_FORM_RE = re.compile(r"(?:[IXYZ]\d+)+")
_SHORT_FACTOR_RE = re.compile(r"([IXYZ])(\d+)")
_CANONICAL_FORM_RE = re.compile(r"[IXYZ]*")


def unpack_tableau(operator: Tableau) -> tuple[Tableau, Tableau, Tableau]:
    """Split one or more operators into their X/Z/sign components.

    Args:
        operator: a single operator (1D array) or one operator per row (2D array).

    Raises:
        ValueError: if the array is not 1D or 2D, or if its last axis has an even
            number of elements.
    """
    if operator.ndim > 2 or operator.ndim == 0:
        raise ValueError("Only 1D or 2D arrays are allowed")
    if operator.shape[-1] % 2 == 0:
        # We are expecting an operator WITH sign bit
        raise ValueError("Argument has wrong shape (are you missing the sign column?)")
    qubits = operator.shape[-1] // 2
    return (
        operator[..., :qubits],
        operator[..., qubits : 2 * qubits],
        operator[..., -1],
    )


def _fill_row(row: Tableau, operator: Operator, qubits: int, with_sign: bool = True):
    if isinstance(operator, DenseOperator):
        if len(operator) != qubits:
            raise LengthMismatchError(len(operator), qubits)
        if with_sign:
            if not operator.phase.is_real():
                raise ValueError(
                    f"Phase {operator.phase} can't be stored in a sign bit "
                    "(only 1 and -1)"
                )
            row[-1] = int(operator.phase is Phase.MINUS_ONE)
        factors = operator.non_trivial_paulis()
    elif isinstance(operator, SparseOperator):
        # sparse operators are padded with identities
        if len(operator) > qubits:
            raise LengthMismatchError(len(operator), qubits)
        factors = operator.items()
    else:
        raise TypeError(f"Cannot convert '{type(operator).__name__}' to binary form")
    for pos, pauli in factors:
        row[pos] = pauli.x
        row[pos + qubits] = pauli.z


def operator_to_tableau(operator: Operator, qubits: Optional[int] = None) -> Tableau:
    """Convert an operator into its binary symplectic form.

    Args:
        operator: the operator to convert.
        qubits: the total number of qubits. Sparse operators are padded with
            identities up to this number. Defaults to the length of ``operator``.

    Returns:
        a 1D array of ``2 * qubits + 1`` bits. The sign bit of sparse operators is
        always 0.

    Raises:
        ValueError: if a dense operator has an imaginary phase.
        LengthMismatchError: if the operator is longer than ``qubits``, or if it is a
            dense operator whose length is not ``qubits``.
    """
    if qubits is None:
        qubits = len(operator)
    row = np.zeros(2 * qubits + 1, dtype="u1")
    _fill_row(row, operator, qubits)
    return row


def operators_to_tableau(
    operators: Sequence[Operator], qubits: Optional[int] = None
) -> Tableau:
    """Stack the binary forms of many operators, one per row.

    Args:
        operators: the operators to convert.
        qubits: the total number of qubits. Defaults to the length of the longest
            operator.

    See Also:
        :func:`operator_to_tableau` for the conversion of each row.
    """
    if qubits is None:
        qubits = max((len(op) for op in operators), default=0)
    return _stack(operators, qubits, with_sign=True)


def _stack(operators: Sequence[Operator], qubits: int, with_sign: bool) -> Tableau:
    rows = np.zeros((len(operators), 2 * qubits + 1), dtype="u1")
    for row, operator in zip(rows, operators):
        _fill_row(row, operator, qubits, with_sign)
    return rows


def tableau_to_dense(operator: Tableau) -> DenseOperator:
    """Build a dense operator from its binary symplectic form.

    The phase is :math:`-1` if the sign bit is set, :math:`1` otherwise.
    """
    if operator.ndim != 1:
        raise ValueError("Only single operators (1D arrays) can be converted")
    xs, zs, sign = unpack_tableau(operator)
    phase = Phase.MINUS_ONE if sign else Phase.ONE
    return DenseOperator._from_parts(
        tuple(Pauli.from_bits(x, z) for x, z in zip(xs, zs)), phase
    )


def tableau_to_sparse(operator: Tableau) -> SparseOperator:
    """Build a sparse operator from its binary symplectic form, ignoring the sign."""
    if operator.ndim != 1:
        raise ValueError("Only single operators (1D arrays) can be converted")
    xs, zs, _ = unpack_tableau(operator)
    positions = np.flatnonzero(xs | zs)
    return SparseOperator._from_canonical(
        len(xs),
        [int(pos) for pos in positions],
        [Pauli.from_bits(xs[pos], zs[pos]) for pos in positions],
    )


def commutation_matrix(
    a: Sequence[Operator], b: Optional[Sequence[Operator]] = None
) -> np.ndarray[Any, np.dtype[np.uint8]]:
    r"""Check which pairs of operators anti-commute.

    The operators are converted to binary form on a common number of qubits (the
    length of the longest one), so sparse operators of different lengths are
    allowed, while dense operators must all have the same length. Phases play no
    role in commutation, so dense operators with an imaginary phase are accepted.

    Args:
        a: first list of operators.
        b: second list of operators. If ``None`` (default), ``a`` is used.

    Returns:
        a matrix :math:`M` of shape ``(len(a), len(b))`` where
        :math:`m_{ij} = 0` if ``a[i]`` and ``b[j]`` commute and :math:`1` otherwise.

    Examples:
        >>> stabilisers = [string_to_sparse("X0X1"), string_to_sparse("Z0Z1")]
        >>> errors = [string_to_sparse("Z0", 2), string_to_sparse("Y1", 2)]
        >>> commutation_matrix(stabilisers, errors)
        array([[1, 1],
               [0, 1]], dtype=uint8)
    """
    if b is None:
        b = a
    qubits = max((len(op) for op in [*a, *b]), default=0)
    ax, az, _ = unpack_tableau(_stack(a, qubits, with_sign=False))
    bx, bz, _ = unpack_tableau(_stack(b, qubits, with_sign=False))
    # integer products, so that the parity is computed without overflowing uint8
    ax, az = ax.astype(np.int64), az.astype(np.int64)
    bx, bz = bx.astype(np.int64), bz.astype(np.int64)
    return ((ax @ bz.T + az @ bx.T) % 2).astype("u1")


def _parse(op_str: str, qubits: Optional[int]) -> tuple[Phase, SparseOperator]:
    # Remove visual separators
    op_str = op_str.replace(" ", "").replace("_", "")
    match = _PREFIX_RE.fullmatch(op_str)
    # the regex matches any string, the prefix being possibly empty
    assert match is not None
    prefix, body = match.groups()
    phase = Phase.from_string(prefix)

    if any(c.isdigit() for c in body):
        if not _SHORT_FORM_RE.fullmatch(body):
            raise ValueError(
                f"'{op_str}' is not a valid operator in short form "
                "(canonical and short form can't be mixed)"
            )
        factors = [(int(i), o) for o, i in _SHORT_FACTOR_RE.findall(body)]
        needed = max(pos for pos, _ in factors) + 1
    else:
        if not _CANONICAL_FORM_RE.fullmatch(body):
            raise ValueError(
                f"'{op_str}' contains characters other than [+-iIXYZ0-9 _]"
            )
        factors = [(pos, o) for pos, o in enumerate(body) if o != "I"]
        needed = len(body)

    if qubits is None:
        qubits = needed
    elif qubits < needed:
        raise OutOfBoundError(needed - 1, qubits)
    positions = [pos for pos, _ in factors]
    paulis = [o for _, o in factors]
    return phase, SparseOperator(qubits, positions, paulis)


def string_to_operator(op_str: str, qubits: Optional[int] = None) -> DenseOperator:
    """Transform a string such as ``"-iXYZI"`` into a dense operator.

    The string is an optional phase prefix (``+``, ``-``, ``i``, ``+i`` or ``-i``)
    followed by the operator in canonical or short form. Spaces and underscores can be
    inserted anywhere to group parts of the operator visually, they are removed before
    parsing.

    .. important:: Canonical and short form **can't be mixed**.

    Args:
        op_str: the string description of the operator.
        qubits: optionally, the total number of qubits. If ``None`` (default) it is
            the length of the canonical form or the highest index of the short form
            plus one.

    Raises:
        ValueError: when giving a string containing unrecognised characters or
            mixing the two forms.
        OutOfBoundError: when ``qubits`` is less than the number of qubits the
            string describes.

    Examples:
        >>> print(string_to_operator("-i X0 Y2", 4))
        -iXIYI
        >>> string_to_operator("XIIY") == string_to_operator("X0Y3")
        True
    """
    phase, operator = _parse(op_str, qubits)
    return operator.to_dense(phase)


def string_to_sparse(op_str: str, qubits: Optional[int] = None) -> SparseOperator:
    """Transform a string into a sparse operator, discarding its phase.

    Prefer the short form for operators acting on many qubits. See
    :func:`string_to_operator` for the accepted syntax.

    Examples:
        >>> string_to_sparse("Z3 X1000", 2000)
        SparseOperator(2000, [3, 1000], 'ZX')
    """
    return _parse(op_str, qubits)[1]


def operator_to_string(operator: Operator, show_identities: bool = True) -> str:
    """Convert an operator to a string :func:`string_to_operator` understands.

    Args:
        operator: the operator to convert.
        show_identities: format output as e.g. ``'+XIX'`` if true, else as
            ``'+ X0 X2'``. Sparse operators have no phase prefix.

    .. important:: The short form does not record trailing identities. Pass
        ``qubits=len(operator)`` to :func:`string_to_operator` or
        :func:`string_to_sparse` to get back an operator of the same length.

    Examples:
        >>> operator_to_string(string_to_operator("-XIY"), show_identities=False)
        '- X0 Y2'
        >>> operator_to_string(string_to_sparse("X1Z2"))
        'IXZ'
    """
    if isinstance(operator, DenseOperator):
        text = str(operator)
        prefix = text[: len(text) - len(operator)]
        dense, factors = operator, operator.non_trivial_paulis()
    else:
        prefix = ""
        dense, factors = operator.to_dense(), operator.items()
    if show_identities:
        return prefix + "".join(p.value for p in dense.paulis)
    return (prefix + "".join(f" {pauli}{pos}" for pos, pauli in factors)).strip()
