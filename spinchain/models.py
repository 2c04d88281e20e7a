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


import abc

import numpy as np

from . import spectrum
from .hamiltonians import build_heisenberg, build_ising, build_xxz, build_xy


class SpinChainModel(abc.ABC):
    """Interface shared by the spin-chain models.

    A model is built once, at construction, and holds its
    :class:`spinchain.matrix.HamiltonianMatrix`; everything else is a query
    on that matrix. Eigen-decompositions are delegated to
    :mod:`spinchain.spectrum`.
    """

    _hamiltonian = None

    def __repr__(self):
        params = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return (
            f"{self.__class__.__name__}(num_sites={self.num_sites}, {params}, "
            f"storage={self.hamiltonian.storage!r})"
        )

    @property
    @abc.abstractmethod
    def params(self):
        """The coupling constants defining the model."""

    @property
    def hamiltonian(self):
        return self._hamiltonian

    @property
    def num_sites(self):
        return self._hamiltonian.num_sites

    @property
    def basis(self):
        return self._hamiltonian.basis

    @property
    def matrix(self):
        return self._hamiltonian.matrix

    def size(self):
        return self._hamiltonian.size()

    def is_sparse(self):
        return self._hamiltonian.is_sparse()

    def is_hermitian(self):
        return self._hamiltonian.is_hermitian()

    def eigh(self, k=None, which="SA"):
        return spectrum.eigh(self._hamiltonian, k=k, which=which)

    def eigenvalues(self, k=None, which="SA"):
        return spectrum.eigenvalues(self._hamiltonian, k=k, which=which)

    def ground_state(self):
        return spectrum.ground_state(self._hamiltonian)

    def gap(self):
        return spectrum.spectral_gap(self._hamiltonian)


class TransverseFieldIsing(SpinChainModel):
    r"""Transverse-field Ising chain with open boundaries,

    .. math::

        H = -\sum_{i=0}^{L-2} \left(J \delta_{s_i s_{i+1}} + h \sigma^x_i\right)

    The field acts on the first site of every bond, so the last spin keeps
    its :math:`\sigma^z` and every level comes in a degenerate pair.

    :param num_sites: The number of lattice sites.
    :type num_sites: int
    :param h: The strength of the transverse field.
    :type h: float
    :param J: The strength of the bond coupling.
    :type J: float
    :param storage: "dense" or "sparse".
    :type storage: str
    :param dtype: The scalar type of the matrix.
    :type dtype: numpy.dtype
    :param \**kwargs: Passed on to :func:`spinchain.hamiltonians.build_hamiltonian`
                      (`chunk_size`, `progbar`, `callbacks`, `time`).
    """

    def __init__(self, num_sites, h, J=1.0, storage="dense", dtype=np.float64, **kwargs):
        self._hamiltonian = build_ising(
            num_sites, h, J=J, storage=storage, dtype=dtype, **kwargs
        )

    @property
    def params(self):
        return self._hamiltonian.params

    @property
    def h(self):
        return self._hamiltonian.params["h"]

    @property
    def J(self):
        return self._hamiltonian.params["J"]


class XXZ(SpinChainModel):
    r"""XXZ chain with open boundaries,

    .. math::

        H = -J \sum_{i=0}^{L-2} \left(\sigma^x_i \sigma^x_{i+1}
            + \sigma^y_i \sigma^y_{i+1} + \Delta \sigma^z_i \sigma^z_{i+1}\right)

    :param num_sites: The number of lattice sites.
    :type num_sites: int
    :param delta: The anisotropy :math:`\Delta`.
    :type delta: float
    :param J: The strength of the bond coupling. Negative values give the
              antiferromagnetic chain.
    :type J: float
    :param storage: "dense" or "sparse".
    :type storage: str
    :param dtype: The scalar type of the matrix.
    :type dtype: numpy.dtype
    :param \**kwargs: Passed on to :func:`spinchain.hamiltonians.build_hamiltonian`.
    """

    def __init__(
        self, num_sites, delta, J=1.0, storage="dense", dtype=np.float64, **kwargs
    ):
        self._hamiltonian = build_xxz(
            num_sites, delta, J=J, storage=storage, dtype=dtype, **kwargs
        )

    @property
    def params(self):
        return self._hamiltonian.params

    @property
    def delta(self):
        return self._hamiltonian.params["delta"]

    @property
    def J(self):
        return self._hamiltonian.params["J"]


class XY(SpinChainModel):
    """XY chain: the :class:`XXZ` chain with :math:`\\Delta = 0`."""

    def __init__(self, num_sites, J=1.0, storage="dense", dtype=np.float64, **kwargs):
        self._hamiltonian = build_xy(
            num_sites, J=J, storage=storage, dtype=dtype, **kwargs
        )

    @property
    def params(self):
        return {"J": self._hamiltonian.params["J"]}

    @property
    def J(self):
        return self._hamiltonian.params["J"]


class Heisenberg(SpinChainModel):
    """Heisenberg chain: the :class:`XXZ` chain with :math:`\\Delta = 1`."""

    def __init__(self, num_sites, J=1.0, storage="dense", dtype=np.float64, **kwargs):
        self._hamiltonian = build_heisenberg(
            num_sites, J=J, storage=storage, dtype=dtype, **kwargs
        )

    @property
    def params(self):
        return {"J": self._hamiltonian.params["J"]}

    @property
    def J(self):
        return self._hamiltonian.params["J"]
