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

"""Single-site Pauli matrices and their embedding in an :math:`L`-site chain.

Operators are built with Kronecker products, site 0 being the leftmost
factor, so that they are written in the same basis ordering as
:func:`spinchain.basis.generate_basis`. Their cost is :math:`O(4^L)`; they
are meant for checking the bit-level builder on small chains.
"""

from functools import reduce

import numpy as np

from spinchain.bonds import check_bond, check_site

###########################################################
# 1-SITE OPERATORS

# Identity Matrix
I = np.asarray([[1.0, 0.0], [0.0, 1.0]])  # noqa: E741

# Pauli X Matrix
X = np.asarray([[0.0, 1.0], [1.0, 0.0]])

# Pauli Y Matrix
Y = np.asarray([[0.0, -1j], [1j, 0.0]])

# Pauli Z Matrix
Z = np.asarray([[1.0, 0.0], [0.0, -1.0]])

# Raising operator, (X + iY) / 2
SIGMA_PLUS = np.asarray([[0.0, 1.0], [0.0, 0.0]])

# Lowering operator, (X - iY) / 2
SIGMA_MINUS = np.asarray([[0.0, 0.0], [1.0, 0.0]])


###########################################################
# N-SITE OPERATORS


def site_operator(num_sites, op, i):
    """Return the many-body operator
    I x I x .. x op x I x .. x I
    with op acting on site i"""
    check_site(num_sites, i)
    op_list = [op if k == i else I for k in range(num_sites)]
    return reduce(np.kron, op_list)


def bond_operator(num_sites, op_i, op_j, i):
    """Return the many-body operator
    I x .. x op_i x op_j x .. x I
    with op_i acting on site i and op_j on site i + 1"""
    check_bond(num_sites, i)
    op_list = [I] * num_sites
    op_list[i] = op_i
    op_list[i + 1] = op_j
    return reduce(np.kron, op_list)


def sigma_x(num_sites, i):
    return site_operator(num_sites, X, i)


def sigma_y(num_sites, i):
    return site_operator(num_sites, Y, i)


def sigma_z(num_sites, i):
    return site_operator(num_sites, Z, i)


def sigma_x_sigma_x(num_sites, i):
    return bond_operator(num_sites, X, X, i)


def sigma_y_sigma_y(num_sites, i):
    return bond_operator(num_sites, Y, Y, i)


def sigma_z_sigma_z(num_sites, i):
    return bond_operator(num_sites, Z, Z, i)


def exchange(num_sites, i):
    r"""The ladder-operator exchange
    :math:`\sigma^+_i\sigma^-_{i+1} + \sigma^-_i\sigma^+_{i+1}`."""
    return bond_operator(num_sites, SIGMA_PLUS, SIGMA_MINUS, i) + bond_operator(
        num_sites, SIGMA_MINUS, SIGMA_PLUS, i
    )
