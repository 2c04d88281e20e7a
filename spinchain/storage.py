# Copyright 2019 PIQuIL - All Rights Reserved.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import numpy as np
import scipy.sparse as sp

from .errors import AssemblyError, InvalidParameter

STORAGE_POLICIES = ("dense", "sparse")


def check_storage(storage):
    if storage not in STORAGE_POLICIES:
        raise InvalidParameter(
            f"Unknown storage policy {storage!r}; must be one of {STORAGE_POLICIES}."
        )
    return storage


def check_dtype(dtype):
    """Accepts real floating and complex floating scalar types only."""
    try:
        dtype = np.dtype(dtype)
    except TypeError:
        raise InvalidParameter(f"{dtype!r} is not a numpy scalar type.")
    if not (
        np.issubdtype(dtype, np.floating) or np.issubdtype(dtype, np.complexfloating)
    ):
        raise InvalidParameter(
            f"Hamiltonian entries must be real or complex floats, got {dtype}."
        )
    return dtype


class TripletBuffer:
    """Preallocated (row, col, value) storage for one matrix assembly.

    The capacity is fixed up front from a bound on the number of entries per
    row, so filling the buffer never reallocates.

    :param dim: The dimension of the (square) matrix.
    :type dim: int
    :param capacity: The maximum number of entries that will be written.
    :type capacity: int
    :param dtype: The scalar type of the values.
    :type dtype: numpy.dtype
    """

    def __init__(self, dim, capacity, dtype=np.float64):
        self.dim = dim
        self.rows = np.empty(capacity, dtype=np.int64)
        self.cols = np.empty(capacity, dtype=np.int64)
        self.data = np.empty(capacity, dtype=dtype)
        self.size = 0

    @property
    def capacity(self):
        return len(self.data)

    def append(self, rows, cols, values):
        n = len(rows)
        end = self.size + n
        if end > self.capacity:
            raise AssemblyError(
                f"Assembly produced more than the {self.capacity} preallocated entries."
            )
        self.rows[self.size : end] = rows
        self.cols[self.size : end] = cols
        self.data[self.size : end] = values
        self.size = end

    def append_symmetric(self, rows, cols, values):
        """Writes each `(i, j, v)` together with its mirror `(j, i, conj(v))`."""
        self.append(rows, cols, values)
        self.append(cols, rows, np.conj(values))

    def triplets(self):
        return (
            self.rows[: self.size],
            self.cols[: self.size],
            self.data[: self.size],
        )

    def check_duplicates(self):
        """Every matrix element must be contributed at most once."""
        rows, cols, _ = self.triplets()
        keys = rows * self.dim + cols
        unique, counts = np.unique(keys, return_counts=True)
        repeated = unique[counts > 1]
        if len(repeated) > 0:
            i, j = divmod(int(repeated[0]), self.dim)
            raise AssemblyError(
                f"Matrix element ({i}, {j}) was contributed {int(counts.max())} times; "
                f"{len(repeated)} element(s) in total were written more than once."
            )

    def to_dense(self):
        rows, cols, data = self.triplets()
        matrix = np.zeros((self.dim, self.dim), dtype=self.data.dtype)
        matrix[rows, cols] = data
        return matrix

    def to_sparse(self):
        rows, cols, data = self.triplets()
        matrix = sp.coo_matrix((data, (rows, cols)), shape=(self.dim, self.dim))
        matrix = matrix.tocsr()
        matrix.sort_indices()
        return matrix

    def assemble(self, storage):
        """Validates the triplets and builds the matrix in the requested storage."""
        check_storage(storage)
        self.check_duplicates()
        matrix = self.to_dense() if storage == "dense" else self.to_sparse()
        return make_read_only(matrix)


def make_read_only(matrix):
    """Flags the buffers of `matrix` as non-writeable and returns it."""
    if sp.issparse(matrix):
        for buf in (matrix.data, matrix.indices, matrix.indptr):
            buf.setflags(write=False)
    else:
        matrix.setflags(write=False)
    return matrix


def is_hermitian(matrix, atol=0.0):
    """Checks :math:`H_{ij} = \\overline{H_{ji}}` for every element.

    :param atol: Absolute tolerance; the default demands exact equality.
    :type atol: float
    """
    if matrix.shape[0] != matrix.shape[1]:
        return False
    if sp.issparse(matrix):
        diff = (matrix - matrix.conj().T).tocoo()
        return bool(np.all(np.abs(diff.data) <= atol))
    return bool(np.all(np.abs(matrix - matrix.conj().T) <= atol))
