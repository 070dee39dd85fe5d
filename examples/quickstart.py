# %% Import necessary objects and functions   # noqa: D100
import numpy as np

import pauligroup
from pauligroup import DenseOperator, Phase, SparseOperator, X, Y, Z
from pauligroup.sampling import random_sparse_operator
from pauligroup.tableau import commutation_matrix, string_to_sparse

# %% Set fixed RNG seed, so we always get the same results
pauligroup.rng = np.random.default_rng(seed=1234567890)

# %% Sparse operators only store the qubits they act on, which makes them
# well suited for large codes with low-weight stabilisers.
size = 1000
checks = [string_to_sparse(f"Z{i} Z{i + 1}", size) for i in range(size - 1)]
error = SparseOperator(size, [10, 11, 500], [X, Y, Z])

# %% The syndrome of an error is the list of checks it anti-commutes with
syndrome = [i for i, check in enumerate(checks) if check.anticommutes_with(error)]
print(f"Syndrome of {error}: {syndrome}")

# %% The same can be computed for many errors at once in binary form
errors = [random_sparse_operator(size, 2) for _ in range(20)]
syndromes = commutation_matrix(checks, errors)
print(f"Errors detected: {int(syndromes.any(axis=0).sum())} out of {len(errors)}")

# %% Dense operators keep track of the global phase exactly
first = DenseOperator([X, Y, Z], Phase.i())
second = DenseOperator([Z, Z, Z])
print(f"({first}) * ({second}) = {first * second}")
print(f"Y * ({second}) = {Y * second}")
