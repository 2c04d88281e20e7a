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


import numbers
import warnings

import numpy as np
import scipy.sparse.linalg as spla
from tqdm import tqdm
from tqdm.notebook import tqdm as tqdm_notebook

from .errors import InvalidParameter
from .matrix import HamiltonianMatrix


def as_hamiltonian(obj):
    """Returns the :class:`HamiltonianMatrix` held by `obj`.

    :param obj: A HamiltonianMatrix or anything with a `hamiltonian` attribute,
                like the models of :mod:`spinchain.models`.
    """
    if isinstance(obj, HamiltonianMatrix):
        return obj
    hamiltonian = getattr(obj, "hamiltonian", None)
    if isinstance(hamiltonian, HamiltonianMatrix):
        return hamiltonian
    raise TypeError(f"{obj!r} does not hold a HamiltonianMatrix.")


def _check_k(k, dim):
    if k is None:
        return dim
    if (
        isinstance(k, bool)
        or not isinstance(k, numbers.Integral)
        or not 1 <= k <= dim
    ):
        raise InvalidParameter(f"k must be an integer in [1, {dim}], got {k!r}.")
    return int(k)


def eigh(hamiltonian, k=None, which="SA", return_eigenvectors=True):
    """Diagonalizes a Hamiltonian.

    Dense matrices go through :func:`numpy.linalg.eigh`. Sparse matrices go
    through :func:`scipy.sparse.linalg.eigsh` when fewer than :math:`N - 1`
    eigenpairs are requested, and are densified otherwise.

    :param hamiltonian: The Hamiltonian, or a model holding one.
    :param k: The number of eigenpairs to return. Defaults to all of them.
    :type k: int
    :param which: Which eigenvalues `eigsh` should look for; "SA" for the
                  lowest, "LA" for the highest. Dense paths always return the
                  lowest `k`, or the highest `k` when `which` is "LA".
    :type which: str
    :param return_eigenvectors: Whether to return the eigenvectors too.
    :type return_eigenvectors: bool

    :returns: The eigenvalues in ascending order, and if requested the
              eigenvectors as the columns of a matrix.
    :rtype: numpy.ndarray or tuple(numpy.ndarray, numpy.ndarray)
    """
    hamiltonian = as_hamiltonian(hamiltonian)
    dim = hamiltonian.size()
    k = _check_k(k, dim)

    if hamiltonian.is_sparse() and hamiltonian.nnz == 0:
        # ARPACK cannot start on the zero matrix; every basis state is an
        # eigenvector of it
        vals = np.zeros(k)
        vecs = None
        if return_eigenvectors:
            vecs = np.eye(dim, k, dtype=hamiltonian.dtype)
    elif hamiltonian.is_sparse() and k < dim - 1:
        result = spla.eigsh(
            hamiltonian.matrix,
            k=k,
            which=which,
            return_eigenvectors=return_eigenvectors,
        )
        vals, vecs = result if return_eigenvectors else (result, None)
        order = np.argsort(vals)
        vals = vals[order]
        vecs = vecs[:, order] if vecs is not None else None
    else:
        if hamiltonian.is_sparse():
            warnings.warn(
                f"Requested {k} of {dim} eigenpairs; falling back to a dense solver.",
                ResourceWarning,
            )
        matrix = hamiltonian.toarray()
        if return_eigenvectors:
            vals, vecs = np.linalg.eigh(matrix)
        else:
            vals, vecs = np.linalg.eigvalsh(matrix), None
        window = slice(dim - k, dim) if which == "LA" else slice(0, k)
        vals = vals[window]
        vecs = vecs[:, window] if vecs is not None else None

    if return_eigenvectors:
        return vals, vecs
    return vals


def eigenvalues(hamiltonian, k=None, which="SA"):
    """The (lowest `k`) eigenvalues of a Hamiltonian, in ascending order."""
    return eigh(hamiltonian, k=k, which=which, return_eigenvectors=False)


def ground_state(hamiltonian):
    """The ground-state energy and a normalized ground-state vector.

    :rtype: tuple(float, numpy.ndarray)
    """
    vals, vecs = eigh(hamiltonian, k=1)
    return float(vals[0]), vecs[:, 0]


def spectral_gap(hamiltonian):
    """Difference between the two lowest eigenvalues."""
    if as_hamiltonian(hamiltonian).size() < 2:
        raise InvalidParameter("A gap needs at least two eigenvalues.")
    vals = eigenvalues(hamiltonian, k=2)
    return float(vals[1] - vals[0])


def expectation(hamiltonian, psi):
    r"""The energy :math:`\langle\psi|H|\psi\rangle / \langle\psi|\psi\rangle`."""
    matrix = as_hamiltonian(hamiltonian).matrix
    psi = np.asarray(psi)
    return float(np.real(np.vdot(psi, matrix @ psi) / np.vdot(psi, psi)))


def scan(factory, values, k=2, progbar=False):
    """Builds one model per parameter value and records its low-lying spectrum.

    Useful to locate phase transitions, e.g. the level crossings of the XXZ
    chain at :math:`\Delta = \pm 1`::

        scan(lambda delta: XXZ(8, delta), np.linspace(-2, 2, 21))

    :param factory: Called with each value; must return a Hamiltonian or a
                    model holding one.
    :type factory: callable
    :param values: The parameter values to scan.
    :type values: Iterable[float]
    :param k: The number of lowest eigenvalues to record.
    :type k: int
    :param progbar: Whether or not to display a progress bar. If "notebook"
                    is passed, will use a Jupyter notebook compatible
                    progress bar.
    :type progbar: bool or str

    :returns: A dictionary with the scanned values (key: "values"), the `k`
              lowest energies of every model (key: "energies") and the gap
              between the two lowest ones (key: "gap"; only when `k >= 2`).
    :rtype: dict(str, numpy.ndarray)
    """
    disable_progbar = progbar is False
    progress_bar = tqdm_notebook if progbar == "notebook" else tqdm

    values = np.asarray(list(values), dtype=float)
    energies = []
    for value in progress_bar(values, desc="Scan ", disable=disable_progbar):
        energies.append(eigenvalues(factory(value), k=k))

    energies = np.array(energies).reshape(len(values), k)
    result = {"values": values, "energies": energies}
    if k >= 2:
        result["gap"] = energies[:, 1] - energies[:, 0]
    return result
