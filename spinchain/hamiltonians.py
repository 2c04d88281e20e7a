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


import math
import numbers
import warnings

import numpy as np
from tqdm import tqdm
from tqdm.notebook import tqdm as tqdm_notebook

from .basis import basis_dimension, check_num_sites, generate_basis
from .bonds import (
    aligned_states,
    bond_mask,
    bond_sites,
    check_kind,
    max_nnz_per_row,
    off_diagonal_coefficient,
    site_mask,
)
from .callbacks import CallbackList, Timer
from .errors import InvalidParameter
from .matrix import HamiltonianMatrix
from .storage import TripletBuffer, check_dtype, check_storage

DEFAULT_CHUNK_SIZE = 4096
DENSE_WARNING_SITES = 14

# couplings each model kind requires, besides J
_REQUIRED_COUPLINGS = {"ising": ("h",), "xxz": ("delta",)}


def _check_coupling(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}.")
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}.")
    return float(value)


class HamiltonianBuilder:
    """Assembles the Hamiltonian of an open spin-1/2 chain in the
    computational basis.

    Rows are processed in contiguous chunks of basis indices. For every chunk
    the diagonal is accumulated bond by bond, and every flip that applies to
    a row :math:`i` and leads to a larger index :math:`j` writes both
    :math:`H_{ij}` and :math:`H_{ji}`. Each connected pair of configurations
    is thus written exactly once, symmetrically, whatever the processing
    order. All contributions go to a :class:`spinchain.storage.TripletBuffer`
    sized from the number of flips a row can have, and are checked for
    duplicates before the matrix is assembled.

    :param num_sites: The number of lattice sites.
    :type num_sites: int
    :param kind: The model kind, "ising" or "xxz".
    :type kind: str
    :param storage: "dense" for a numpy array, "sparse" for a CSR matrix.
    :type storage: str
    :param dtype: The scalar type of the matrix; real or complex floating.
    :type dtype: numpy.dtype
    :param chunk_size: The number of rows processed at a time.
    :type chunk_size: int
    :param J: The bond coupling.
    :type J: float
    :param h: The transverse field. Required for the Ising chain.
    :type h: float
    :param delta: The anisotropy. Required for the XXZ chain.
    :type delta: float
    """

    def __init__(
        self,
        num_sites,
        kind,
        storage="dense",
        dtype=np.float64,
        chunk_size=DEFAULT_CHUNK_SIZE,
        J=1.0,
        h=None,
        delta=None,
    ):
        self.num_sites = check_num_sites(num_sites)
        self.kind = check_kind(kind)
        self.storage = check_storage(storage)
        self.dtype = check_dtype(dtype)
        self.params = self._check_params(J=J, h=h, delta=delta)

        if (
            isinstance(chunk_size, bool)
            or not isinstance(chunk_size, numbers.Integral)
            or chunk_size < 1
        ):
            raise InvalidParameter(
                f"chunk_size must be a positive integer, got {chunk_size!r}."
            )

        self.dim = basis_dimension(self.num_sites)
        self.chunk_size = min(int(chunk_size), self.dim)
        self.num_chunks = -(-self.dim // self.chunk_size)
        self._buffer = None

    def _check_params(self, **couplings):
        required = _REQUIRED_COUPLINGS[self.kind]
        params = {"J": _check_coupling("J", couplings.pop("J"))}
        for name, value in couplings.items():
            if name in required:
                if value is None:
                    raise InvalidParameter(
                        f"The {self.kind} chain requires a value for {name}."
                    )
                params[name] = _check_coupling(name, value)
            elif value is not None:
                raise InvalidParameter(
                    f"{name} is not a parameter of the {self.kind} chain."
                )
        return params

    @property
    def num_entries(self):
        """The number of matrix entries written so far."""
        return 0 if self._buffer is None else self._buffer.size

    @property
    def capacity(self):
        """The number of entries preallocated for the whole matrix."""
        return self.dim * max_nnz_per_row(self.num_sites, self.kind)

    def diagonal(self, states):
        """Diagonal matrix elements of the given basis indices.

        :param states: Basis indices.
        :type states: numpy.ndarray
        :rtype: numpy.ndarray
        """
        J = self.params["J"]
        diagonal = np.zeros(len(states), dtype=np.float64)
        for site in bond_sites(self.num_sites):
            aligned = aligned_states(states, self.num_sites, site)
            if self.kind == "ising":
                diagonal -= J * aligned
            else:
                diagonal -= J * self.params["delta"] * np.where(aligned, 1.0, -1.0)
        return diagonal

    def flips(self, states):
        """Yields `(mask, applicable)` for every flip operator of the model.

        XOR-ing a basis index with `mask` gives the flipped configuration;
        `applicable` tells for which of `states` the flip has a non-zero
        amplitude.
        """
        L = self.num_sites
        if self.kind == "ising":
            everywhere = np.ones(len(states), dtype=bool)
            for site in bond_sites(L):
                yield site_mask(L, site), everywhere
        else:
            for site in bond_sites(L):
                yield bond_mask(L, site), ~aligned_states(states, L, site)

    def _assemble_rows(self, buffer, start, stop):
        states = np.arange(start, stop, dtype=np.int64)

        diagonal = self.diagonal(states)
        nonzero = diagonal != 0
        buffer.append(states[nonzero], states[nonzero], diagonal[nonzero])

        coefficient = off_diagonal_coefficient(
            self.kind, h=self.params.get("h", 0.0), J=self.params["J"]
        )
        if coefficient == 0:
            return

        for mask, applicable in self.flips(states):
            targets = states ^ mask
            keep = applicable & (states < targets)
            values = np.full(np.count_nonzero(keep), coefficient, dtype=self.dtype)
            buffer.append_symmetric(states[keep], targets[keep], values)

    def build(self, progbar=False, callbacks=None, time=False):
        """Assembles the Hamiltonian.

        :param progbar: Whether or not to display a progress bar. If "notebook"
                        is passed, will use a Jupyter notebook compatible
                        progress bar.
        :type progbar: bool or str
        :param callbacks: Callbacks to run while assembling.
        :type callbacks: list[spinchain.callbacks.CallbackBase]
        :param time: Whether to time the assembly.
        :type time: bool

        :returns: The assembled Hamiltonian.
        :rtype: spinchain.matrix.HamiltonianMatrix
        """
        disable_progbar = progbar is False
        progress_bar = tqdm_notebook if progbar == "notebook" else tqdm

        callbacks = CallbackList(callbacks if callbacks else [])
        if time:
            callbacks.append(Timer())

        if self.storage == "dense" and self.num_sites > DENSE_WARNING_SITES:
            warnings.warn(
                f"Dense storage of a {self.num_sites}-site Hamiltonian needs "
                f"{self.dim ** 2 * self.dtype.itemsize / 2 ** 30:.1f} GiB; "
                "consider storage='sparse'.",
                ResourceWarning,
            )

        basis = generate_basis(self.num_sites)
        self._buffer = TripletBuffer(self.dim, self.capacity, dtype=self.dtype)

        callbacks.on_build_start(self)
        for chunk in progress_bar(
            range(self.num_chunks), desc="Chunks ", disable=disable_progbar
        ):
            callbacks.on_chunk_start(self, chunk)
            start = chunk * self.chunk_size
            stop = min(start + self.chunk_size, self.dim)
            self._assemble_rows(self._buffer, start, stop)
            callbacks.on_chunk_end(self, chunk)

        matrix = self._buffer.assemble(self.storage)
        hamiltonian = HamiltonianMatrix(
            matrix,
            self.num_sites,
            basis,
            self.kind,
            self.params,
        )
        callbacks.on_build_end(self)
        return hamiltonian


def build_hamiltonian(
    num_sites,
    kind,
    storage="dense",
    dtype=np.float64,
    chunk_size=DEFAULT_CHUNK_SIZE,
    progbar=False,
    callbacks=None,
    time=False,
    **couplings,
):
    """Builds the Hamiltonian of the given model kind.

    See :class:`HamiltonianBuilder` for the parameters.

    :rtype: spinchain.matrix.HamiltonianMatrix
    """
    builder = HamiltonianBuilder(
        num_sites,
        kind,
        storage=storage,
        dtype=dtype,
        chunk_size=chunk_size,
        **couplings,
    )
    return builder.build(progbar=progbar, callbacks=callbacks, time=time)


def build_ising(num_sites, h, J=1.0, **kwargs):
    r"""Transverse-field Ising chain,
    :math:`H = -\sum_i (J\delta_{s_i s_{i+1}} + h\sigma^x_i)`, summed over the
    bonds :math:`(i, i + 1)`."""
    return build_hamiltonian(num_sites, "ising", J=J, h=h, **kwargs)


def build_xxz(num_sites, delta, J=1.0, **kwargs):
    r"""XXZ chain,
    :math:`H = -J\sum_i (\sigma^x_i\sigma^x_{i+1} + \sigma^y_i\sigma^y_{i+1}
    + \Delta\sigma^z_i\sigma^z_{i+1})`."""
    return build_hamiltonian(num_sites, "xxz", J=J, delta=delta, **kwargs)


def build_xy(num_sites, J=1.0, **kwargs):
    """XY chain: the XXZ chain at :math:`\\Delta = 0`."""
    return build_xxz(num_sites, 0.0, J=J, **kwargs)


def build_heisenberg(num_sites, J=1.0, **kwargs):
    """Heisenberg chain: the XXZ chain at :math:`\\Delta = 1`."""
    return build_xxz(num_sites, 1.0, J=J, **kwargs)
