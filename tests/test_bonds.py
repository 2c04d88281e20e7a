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

from spinchain import bonds
from spinchain.basis import configuration_to_index, generate_basis
from spinchain.errors import InvalidLength, InvalidParameter, InvalidSite


def config(*bits):
    return torch.tensor(bits, dtype=torch.bool)


def test_is_aligned():
    c = config(False, False, True, False)
    assert bonds.is_aligned(c, 0)
    assert not bonds.is_aligned(c, 1)
    assert not bonds.is_aligned(c, 2)


def test_flip_pair_returns_new_configuration():
    c = config(False, True, True)
    flipped = bonds.flip_pair(c, 0)

    assert torch.equal(flipped, config(True, False, True))
    assert torch.equal(c, config(False, True, True)), "Input was modified!"


def test_flip_site():
    c = config(False, True, True)
    assert torch.equal(bonds.flip_site(c, 2), config(False, True, False))
    assert torch.equal(bonds.flip_site(bonds.flip_site(c, 1), 1), c)


@pytest.mark.parametrize(
    "bits, expected",
    [((False, False), -1.5), ((False, True), 0.0), ((True, True), -1.5)],
)
def test_ising_diagonal_term(bits, expected):
    assert bonds.diagonal_term(config(*bits), 0, kind="ising", J=1.5) == expected


@pytest.mark.parametrize(
    "bits, expected",
    [((False, False), -0.5), ((True, False), 0.5), ((True, True), -0.5)],
)
def test_xxz_diagonal_term(bits, expected):
    assert bonds.diagonal_term(config(*bits), 0, kind="xxz", delta=0.5) == expected


def test_off_diagonal_coefficients():
    assert bonds.off_diagonal_coefficient("ising", h=0.3) == -0.3
    assert bonds.off_diagonal_coefficient("xxz", J=1.0) == -2.0
    assert bonds.off_diagonal_coefficient("xxz", J=-0.5) == 1.0


def test_bond_transitions():
    (target, coeff), = bonds.bond_transitions(config(False, False), 0, "ising", h=2.0)
    assert torch.equal(target, config(True, False))
    assert coeff == -2.0

    assert bonds.bond_transitions(config(True, True), 0, "xxz") == []

    (target, coeff), = bonds.bond_transitions(config(True, False, False), 0, "xxz")
    assert torch.equal(target, config(False, True, False))
    assert coeff == -2.0


@pytest.mark.parametrize("site", [-1, 2, 5, 0.0])
def test_invalid_bond(site):
    with pytest.raises(InvalidSite):
        bonds.is_aligned(config(False, True, False), site)
    with pytest.raises(InvalidSite):
        bonds.flip_pair(config(False, True, False), site)


def test_flip_site_reaches_last_site():
    c = config(False, True, False)
    bonds.flip_site(c, 2)
    with pytest.raises(InvalidSite):
        bonds.flip_site(c, 3)


def test_single_site_has_no_bonds():
    with pytest.raises(InvalidSite):
        bonds.diagonal_term(config(True), 0)
    np.testing.assert_array_equal(bonds.bond_sites(1), [])


def test_unknown_kind():
    with pytest.raises(InvalidParameter):
        bonds.diagonal_term(config(True, True), 0, kind="kitaev")
    with pytest.raises(InvalidParameter):
        bonds.max_nnz_per_row(3, "hubbard")


def test_bad_configuration():
    with pytest.raises(InvalidLength):
        bonds.is_aligned([], 0)
    with pytest.raises(InvalidLength):
        bonds.is_aligned([[True, False]], 0)


@pytest.mark.parametrize("L", [2, 3, 6])
def test_vectorized_kernels_match_configuration_functions(L):
    space = generate_basis(L)
    states = np.arange(2 ** L)
    for site in bonds.bond_sites(L):
        site = int(site)
        aligned = bonds.aligned_states(states, L, site)
        flipped = states ^ bonds.bond_mask(L, site)
        for i in range(2 ** L):
            assert aligned[i] == bonds.is_aligned(space[i], site)
            assert flipped[i] == configuration_to_index(bonds.flip_pair(space[i], site))

    for site in range(L):
        flipped = states ^ bonds.site_mask(L, site)
        for i in range(2 ** L):
            assert flipped[i] == configuration_to_index(bonds.flip_site(space[i], site))


def test_max_nnz_per_row():
    assert bonds.max_nnz_per_row(4, "ising") == 4
    assert bonds.max_nnz_per_row(1, "ising") == 1
    assert bonds.max_nnz_per_row(4, "xxz") == 4
    assert bonds.max_nnz_per_row(1, "xxz") == 1
