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
import torch

from spinchain.errors import InvalidLength
from spinchain.spectrum import as_hamiltonian


def to_pm1(configs):
    r"""Converts a tensor of spins from the :math:`\sigma_i = 0, 1` bit
    convention to :math:`\sigma^z` eigenvalues, bit 0 being spin up (+1)
    and bit 1 spin down (-1).

    :param configs: A tensor of spins to convert.
    :type configs: torch.Tensor
    """
    return configs.to(dtype=torch.double).mul(-2.0).add(1.0)


def to_01(configs):
    r"""Inverse of :func:`to_pm1`: maps :math:`\sigma^z = +1` to 0 and
    :math:`\sigma^z = -1` to 1.

    :param configs: A tensor of spins to convert.
    :type configs: torch.Tensor
    """
    return configs.to(dtype=torch.double).sub(1.0).div(-2.0)


def state_tensors(model, psi):
    """Collects what an exact expectation value needs.

    :param model: A Hamiltonian or a model holding one.
    :param psi: A state vector written in the model's basis.
    :type psi: numpy.ndarray or torch.Tensor

    :returns: The basis of the model and `psi` as a normalized tensor.
    :rtype: tuple(torch.Tensor, torch.Tensor)
    """
    basis = as_hamiltonian(model).basis
    if not isinstance(psi, torch.Tensor):
        psi = torch.as_tensor(np.asarray(psi))
    if not (psi.is_complex() or psi.is_floating_point()):
        psi = psi.to(dtype=torch.double)
    if psi.dim() != 1 or psi.shape[0] != basis.shape[0]:
        raise InvalidLength(
            f"State has shape {tuple(psi.shape)}, expected ({basis.shape[0]},)."
        )
    return basis, psi / torch.linalg.norm(psi)


def probabilities(psi):
    return psi.abs().pow(2).to(dtype=torch.double)
