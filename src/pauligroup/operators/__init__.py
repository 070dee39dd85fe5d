# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
"""Multi-qubit Pauli operators.

Two representations are available, and they are meant to be used independently:

* :class:`SparseOperator` stores only the non-identity factors and ignores the global
  phase. Use it for stabilizer-code algorithms, where codes are large but stabilizers
  and errors have low weight, and where commutation is all that matters.
* :class:`DenseOperator` stores every single-qubit factor and an exact global phase.
  Use it when phases must be tracked, e.g. when composing physical operations.

Both can be converted into each other with :meth:`SparseOperator.to_dense` and
:meth:`DenseOperator.to_sparse`.
"""
from pauligroup.operators.dense import DenseOperator
from pauligroup.operators.sparse import SparseOperator

__all__ = ["DenseOperator", "SparseOperator"]
