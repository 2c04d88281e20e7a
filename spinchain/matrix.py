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


from types import MappingProxyType

import numpy as np
import scipy.sparse as sp

from .errors import InvalidIndex
from .storage import is_hermitian


class HamiltonianMatrix:
    """An assembled Hamiltonian together with the data it was built from.

    Instances are produced by :class:`spinchain.hamiltonians.HamiltonianBuilder`
    and are not meant to be modified: the matrix buffers are flagged
    read-only and the parameters are exposed through a read-only mapping.

    :param matrix: The assembled matrix.
    :type matrix: numpy.ndarray or scipy.sparse.csr_matrix
    :param num_sites: The number of lattice sites.
    :type num_sites: int
    :param basis: The basis the matrix is written in.
    :type basis: torch.Tensor
    :param kind: The model kind, "ising" or "xxz".
    :type kind: str
    :param params: The coupling constants.
    :type params: dict
    """

    def __init__(self, matrix, num_sites, basis, kind, params):
        self._matrix = matrix
        self._num_sites = num_sites
        self._basis = basis
        self._kind = kind
        self._params = MappingProxyType(dict(params))

    def __repr__(self):
        params = ", ".join(f"{k}={v}" for k, v in self._params.items())
        return (
            f"HamiltonianMatrix(kind={self._kind}, num_sites={self._num_sites}, "
            f"{params}, storage={self.storage}, dtype={self.dtype})"
        )

    @property
    def matrix(self):
        """The matrix itself; returned without copying."""
        return self._matrix

    @property
    def num_sites(self):
        return self._num_sites

    @property
    def basis(self):
        """A copy of the basis the matrix is written in."""
        return self._basis.clone()

    @property
    def kind(self):
        return self._kind

    @property
    def params(self):
        return self._params

    @property
    def dtype(self):
        return self._matrix.dtype

    @property
    def shape(self):
        return self._matrix.shape

    @property
    def storage(self):
        return "sparse" if self.is_sparse() else "dense"

    @property
    def nnz(self):
        """The number of stored entries (non-zero entries for dense storage)."""
        if self.is_sparse():
            return self._matrix.nnz
        return int(np.count_nonzero(self._matrix))

    def size(self):
        r"""The dimension :math:`2^L` of the matrix."""
        return self._matrix.shape[0]

    def is_sparse(self):
        return sp.issparse(self._matrix)

    def is_hermitian(self, atol=0.0):
        return is_hermitian(self._matrix, atol=atol)

    def element(self, i, j):
        """The matrix element :math:`H_{ij}`."""
        dim = self.size()
        for idx in (i, j):
            if not 0 <= idx < dim:
                raise InvalidIndex(f"Matrix index {idx} is outside of [0, {dim}).")
        return self._matrix[i, j]

    def toarray(self):
        """A dense copy of the matrix."""
        if self.is_sparse():
            return self._matrix.toarray()
        return np.array(self._matrix)
