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


from functools import reduce

import numpy as np
import pytest

from spinchain.basis import generate_basis
from spinchain.errors import InvalidSite
from spinchain.observables import to_pm1
from spinchain.utils import pauli, reference

single_site_paulis = [
    pytest.param(pauli.X, id="X"),
    pytest.param(pauli.Y, id="Y"),
    pytest.param(pauli.Z, id="Z"),
]


@pytest.mark.parametrize("op", single_site_paulis)
def test_paulis_square_to_identity(op):
    np.testing.assert_array_equal(op @ op, pauli.I)


def test_pauli_algebra():
    np.testing.assert_array_equal(pauli.X @ pauli.Y - pauli.Y @ pauli.X, 2j * pauli.Z)
    np.testing.assert_array_equal(pauli.SIGMA_PLUS, (pauli.X + 1j * pauli.Y) / 2)
    np.testing.assert_array_equal(pauli.SIGMA_MINUS, (pauli.X - 1j * pauli.Y) / 2)


def test_site_operator_is_a_kronecker_product():
    expected = reduce(np.kron, [pauli.I, pauli.X, pauli.I])
    np.testing.assert_array_equal(pauli.sigma_x(3, 1), expected)

    expected = reduce(np.kron, [pauli.Z, pauli.Z, pauli.I, pauli.I])
    np.testing.assert_array_equal(pauli.sigma_z_sigma_z(4, 0), expected)


@pytest.mark.parametrize("L", [1, 2, 4])
def test_sigma_z_diagonal_follows_basis_order(L):
    spins = to_pm1(generate_basis(L)).numpy()
    for site in range(L):
        np.testing.assert_array_equal(np.diag(pauli.sigma_z(L, site)), spins[:, site])


def test_exchange_is_half_the_planar_coupling():
    L = 3
    for bond in range(L - 1):
        planar = pauli.sigma_x_sigma_x(L, bond) + pauli.sigma_y_sigma_y(L, bond)
        np.testing.assert_allclose(2 * pauli.exchange(L, bond), planar)


def test_invalid_sites():
    with pytest.raises(InvalidSite):
        pauli.sigma_x(3, 3)
    with pytest.raises(InvalidSite):
        pauli.sigma_z_sigma_z(3, 2)
    with pytest.raises(InvalidSite):
        pauli.exchange(1, 0)


def test_reference_hamiltonians_are_real_and_symmetric():
    for H in (
        reference.transverse_field_ising(3, 0.4),
        reference.xxz(3, 0.7),
        reference.xy(3),
        reference.heisenberg(3),
    ):
        assert H.shape == (8, 8)
        assert np.isrealobj(H)
        np.testing.assert_allclose(H, H.T)


def test_reference_dimer_spectrum():
    vals = np.linalg.eigvalsh(reference.heisenberg(2, J=-1.0))
    np.testing.assert_allclose(vals, [-3.0, 1.0, 1.0, 1.0], atol=1e-12)
