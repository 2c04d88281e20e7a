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
import pytest
import torch

from spinchain import Heisenberg, TransverseFieldIsing, build_heisenberg, build_ising
from spinchain.errors import InvalidLength
from spinchain.observables import (
    NeighbourInteraction,
    SigmaX,
    SigmaY,
    SigmaZ,
    System,
    to_01,
    to_pm1,
)
from spinchain.utils import pauli

SEED = 1234


def basis_state(dim, index):
    psi = np.zeros(dim)
    psi[index] = 1.0
    return psi


def random_state(dim, complex_valued=False):
    rng = np.random.default_rng(SEED)
    psi = rng.normal(size=dim)
    if complex_valued:
        psi = psi + 1j * rng.normal(size=dim)
    return psi / np.linalg.norm(psi)


def kron_average(op, num_sites, psi):
    total = sum(np.vdot(psi, op(num_sites, i) @ psi) for i in range(num_sites))
    return float(np.real(total)) / num_sites


def test_spin_conversions():
    bits = torch.tensor([[0, 1, 1, 0]], dtype=torch.bool)
    spins = to_pm1(bits)
    expected = torch.tensor([[1.0, -1.0, -1.0, 1.0]], dtype=torch.double)
    torch.testing.assert_close(spins, expected)
    torch.testing.assert_close(to_01(spins), bits.to(dtype=torch.double))


def test_sigma_z_on_basis_states():
    H = build_ising(3, 1.0)
    assert SigmaZ().apply(H, basis_state(8, 0)) == pytest.approx(1.0)
    assert SigmaZ().apply(H, basis_state(8, 7)) == pytest.approx(-1.0)
    assert SigmaZ(absolute=True).apply(H, basis_state(8, 7)) == pytest.approx(1.0)
    # 0b011: one spin up, two down
    assert SigmaZ().apply(H, basis_state(8, 3)) == pytest.approx(-1 / 3)


@pytest.mark.parametrize("L", [1, 3, 5])
def test_sigma_x_matches_kronecker_products(L):
    H = build_ising(L, 1.0)
    psi = random_state(2 ** L, complex_valued=True)
    expected = kron_average(pauli.sigma_x, L, psi)
    assert SigmaX().apply(H, psi) == pytest.approx(expected)


@pytest.mark.parametrize("L", [1, 3, 5])
def test_sigma_y_matches_kronecker_products(L):
    H = build_ising(L, 1.0)
    psi = random_state(2 ** L, complex_valued=True)
    expected = kron_average(pauli.sigma_y, L, psi)
    assert SigmaY().apply(H, psi) == pytest.approx(expected)


def test_sigma_y_eigenstate():
    H = build_ising(1, 1.0)
    psi = np.array([1.0, 1j]) / np.sqrt(2)
    assert SigmaY().apply(H, psi) == pytest.approx(1.0)
    assert SigmaY().apply(H, psi.conj()) == pytest.approx(-1.0)
    assert SigmaY(absolute=True).apply(H, psi.conj()) == pytest.approx(1.0)


def test_sigma_y_vanishes_on_real_states():
    model = TransverseFieldIsing(4, 0.8)
    _, psi = model.ground_state()
    assert SigmaY().apply(model, psi) == pytest.approx(0.0, abs=1e-12)


def test_uniform_superposition_is_polarized_along_x():
    model = TransverseFieldIsing(4, 1.0)
    psi = np.ones(16)
    assert SigmaX().apply(model, psi) == pytest.approx(1.0)
    assert SigmaZ().apply(model, psi) == pytest.approx(0.0, abs=1e-12)


def test_field_polarizes_the_first_spin():
    # without coupling, the ground states are |+> on site 0 and anything on site 1
    model = TransverseFieldIsing(2, 1.0, J=0.0)
    _, psi = model.ground_state()
    spin = torch.as_tensor(psi).reshape(2, 2)
    first_site_x = 2 * (spin[0] * spin[1]).sum().item()
    assert first_site_x == pytest.approx(1.0)


def test_neighbour_interaction_in_singlet():
    H = build_heisenberg(2, J=-1.0)
    _, psi = np.linalg.eigh(H.toarray())
    singlet = psi[:, 0]

    assert NeighbourInteraction().apply(H, singlet) == pytest.approx(-0.5)
    assert NeighbourInteraction(periodic_bcs=True).apply(H, singlet) == pytest.approx(
        -1.0
    )


def test_neighbour_interaction_on_polarized_state():
    H = build_ising(4, 0.0)
    up = basis_state(16, 0)
    # three bonds averaged over four sites
    assert NeighbourInteraction().apply(H, up) == pytest.approx(0.75)
    assert NeighbourInteraction(periodic_bcs=True).apply(H, up) == pytest.approx(1.0)
    assert NeighbourInteraction(c=2).apply(H, up) == pytest.approx(0.5)


def test_states_are_normalized():
    H = build_ising(2, 1.0)
    assert SigmaZ().apply(H, 3 * basis_state(4, 0)) == pytest.approx(1.0)
    assert SigmaZ().apply(H, torch.tensor([0.0, 0.0, 0.0, 2.0])) == pytest.approx(-1.0)


def test_wrong_state_length():
    H = build_ising(3, 1.0)
    with pytest.raises(InvalidLength):
        SigmaZ().apply(H, np.ones(4))


def test_observable_arithmetic():
    H = build_ising(2, 1.0)
    up = basis_state(4, 0)

    assert (SigmaZ() + 1).apply(H, up) == pytest.approx(2.0)
    assert (1 - SigmaZ()).apply(H, up) == pytest.approx(0.0)
    assert (3 * SigmaZ()).apply(H, up) == pytest.approx(3.0)
    assert (SigmaZ() - SigmaZ()).apply(H, up) == pytest.approx(0.0)

    neg = -SigmaZ()
    assert neg.name == "-SigmaZ"
    assert str(neg) == "-Z"
    assert neg.apply(H, up) == pytest.approx(-1.0)

    with pytest.raises(ValueError):
        SigmaZ() * SigmaX()
    with pytest.raises(TypeError):
        SigmaZ() + "Z"


def test_system():
    model = Heisenberg(2, J=-1.0)
    system = System(SigmaX(), SigmaZ(), NeighbourInteraction())
    assert set(system.observables) == {
        "SigmaX",
        "SigmaZ",
        "NeighbourInteraction(periodic_bcs=False, c=1)",
    }

    # the singlet
    result = system.ground_state_expectations(model)
    assert result["SigmaX"] == pytest.approx(0.0, abs=1e-12)
    assert result["SigmaZ"] == pytest.approx(0.0, abs=1e-12)
    assert result["NeighbourInteraction(periodic_bcs=False, c=1)"] == pytest.approx(
        -0.5
    )

    up = basis_state(4, 0)
    assert system.expectations(model, up)["SigmaZ"] == pytest.approx(1.0)
