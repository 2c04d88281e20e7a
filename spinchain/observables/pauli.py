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


import torch

from .observable import ObservableBase
from .utils import probabilities, state_tensors, to_pm1


def flip_masks(num_sites):
    """The bit of every site in a basis index, site 0 first."""
    return [1 << (num_sites - 1 - k) for k in range(num_sites)]


class SigmaX(ObservableBase):
    r"""The :math:`\sigma_x` observable

    Computes the average magnetization in the X direction of a spin chain.

    :param absolute: Specifies whether to return the absolute magnetization.
    :type absolute: bool
    """

    def __init__(self, absolute=False):
        self.name = "SigmaX"
        self.symbol = "X"
        self.absolute = absolute

    def apply(self, model, psi):
        r"""Computes :math:`\frac{1}{L}\sum_k \langle\sigma^x_k\rangle`.

        Each :math:`\sigma^x_k` maps basis index :math:`i` to
        :math:`i \oplus 2^{L-1-k}`, so its expectation value is an overlap
        of `psi` with a permutation of itself.
        """
        basis, psi = state_tensors(model, psi)
        num_sites = basis.shape[-1]
        indices = torch.arange(basis.shape[0])

        total = 0.0
        for mask in flip_masks(num_sites):
            flipped = torch.bitwise_xor(indices, mask)
            total += (psi[flipped].conj() * psi).sum().real.item()

        res = total / num_sites
        return abs(res) if self.absolute else res


class SigmaY(ObservableBase):
    r"""The :math:`\sigma_y` observable

    Computes the average magnetization in the Y direction of a spin chain.
    Vanishes for every real state, such as the eigenvectors of the real
    Hamiltonians built by this package.

    :param absolute: Specifies whether to return the absolute magnetization.
    :type absolute: bool
    """

    def __init__(self, absolute=False):
        self.name = "SigmaY"
        self.symbol = "Y"
        self.absolute = absolute

    def apply(self, model, psi):
        basis, psi = state_tensors(model, psi)
        psi = psi.to(dtype=torch.cdouble)
        num_sites = basis.shape[-1]
        indices = torch.arange(basis.shape[0])

        total = 0.0
        for k, mask in enumerate(flip_masks(num_sites)):
            flipped = torch.bitwise_xor(indices, mask)
            # sigma_y |0> = i|1>, sigma_y |1> = -i|0>
            phase = torch.full(psi.shape, 1j, dtype=torch.cdouble)
            phase[basis[:, k]] = -1j
            total += (psi[flipped].conj() * phase * psi).sum().real.item()

        res = total / num_sites
        return abs(res) if self.absolute else res


class SigmaZ(ObservableBase):
    r"""The :math:`\sigma_z` observable

    Computes the average magnetization in the Z direction of a spin chain.

    :param absolute: Specifies whether to estimate the absolute magnetization.
    :type absolute: bool
    """

    def __init__(self, absolute=False):
        self.name = "SigmaZ"
        self.symbol = "Z"
        self.absolute = absolute

    def apply(self, model, psi):
        r"""Computes :math:`\sum_\sigma |\psi(\sigma)|^2 m(\sigma)` where
        :math:`m(\sigma)` is the (absolute, if requested) magnetization of
        the basis state :math:`\sigma`.
        """
        basis, psi = state_tensors(model, psi)
        magnetization = to_pm1(basis).mean(1)
        if self.absolute:
            magnetization = magnetization.abs()
        return (probabilities(psi) * magnetization).sum().item()
