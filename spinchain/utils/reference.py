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

"""Dense Hamiltonians built from Kronecker products of Pauli matrices.

These are the textbook constructions, with :math:`O(4^L)` memory and time.
They serve as an independent reference for the bit-level builder of
:mod:`spinchain.hamiltonians`, which must reproduce them exactly.
"""

import numpy as np

from spinchain.basis import basis_dimension

from .pauli import (
    sigma_x,
    sigma_x_sigma_x,
    sigma_y_sigma_y,
    sigma_z_sigma_z,
)


def transverse_field_ising(num_sites, h, J=1.0):
    r"""Return the full Hamiltonian
    :math:`-\sum_i (J(1 + \sigma^z_i\sigma^z_{i+1})/2 + h\sigma^x_i)`
    over the bonds."""
    D = basis_dimension(num_sites)  # dimension of Hilbert space
    H = np.zeros((D, D))
    for i in range(num_sites - 1):
        H += -J * 0.5 * (np.eye(D) + sigma_z_sigma_z(num_sites, i))
        H += -h * sigma_x(num_sites, i)
    return H


def xxz(num_sites, delta, J=1.0):
    r"""Return the full Hamiltonian
    :math:`-J\sum_i (\sigma^x\sigma^x + \sigma^y\sigma^y + \Delta\sigma^z\sigma^z)`.

    Built from the complex :math:`\sigma^y`; the imaginary parts cancel and
    the real part is returned.
    """
    D = basis_dimension(num_sites)  # dimension of Hilbert space
    H = np.zeros((D, D), dtype=complex)
    for i in range(num_sites - 1):
        H += -J * sigma_x_sigma_x(num_sites, i)
        H += -J * sigma_y_sigma_y(num_sites, i)
        H += -J * delta * sigma_z_sigma_z(num_sites, i)
    return H.real


def xy(num_sites, J=1.0):
    return xxz(num_sites, 0.0, J=J)


def heisenberg(num_sites, J=1.0):
    return xxz(num_sites, 1.0, J=J)
