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

import numpy as np
import torch

from .errors import InvalidIndex, InvalidLength, InvalidParameter

MAX_SITES = 30


def check_num_sites(num_sites):
    """Validates a chain length and returns it as a python int.

    :param num_sites: The number of lattice sites.
    :type num_sites: int

    :raises InvalidParameter: If `num_sites` is not an integer between 1
                              and `MAX_SITES`.
    """
    if isinstance(num_sites, bool) or not isinstance(num_sites, numbers.Integral):
        raise InvalidParameter(
            f"Number of sites must be an integer, got {num_sites!r}."
        )
    if num_sites < 1:
        raise InvalidParameter(f"Number of sites must be positive, got {num_sites}.")
    if num_sites > MAX_SITES:
        raise InvalidParameter("Size of the Hilbert space is too large!")
    return int(num_sites)


def basis_dimension(num_sites):
    r"""Dimension :math:`2^L` of the Hilbert space of `num_sites` spins."""
    return 1 << check_num_sites(num_sites)


def site_weights(num_sites):
    """The integer value carried by each site; site 0 is the most significant bit.

    :rtype: numpy.ndarray
    """
    return 1 << np.arange(num_sites - 1, -1, -1, dtype=np.int64)


def generate_basis(num_sites, device=None):
    r"""Generates every configuration of a chain of `num_sites` spins.

    Row :math:`i` of the result is the binary representation of :math:`i`,
    with site 0 as the most significant bit. Row 0 is therefore the all-up
    (all `False`) configuration and row :math:`2^L - 1` the all-down one.

    :param num_sites: The number of lattice sites.
    :type num_sites: int
    :param device: The device to create the basis on. Defaults to the CPU.

    :returns: A tensor of shape :math:`(2^L, L)` holding all basis states.
    :rtype: torch.Tensor
    """
    dim = np.arange(basis_dimension(num_sites), dtype=np.int64)
    space = (dim[:, None] & site_weights(num_sites)) > 0
    return torch.tensor(np.ascontiguousarray(space), dtype=torch.bool, device=device)


def _as_bits(config):
    if isinstance(config, torch.Tensor):
        if config.dim() != 1:
            raise InvalidLength(
                f"Configuration must be one-dimensional, got shape {tuple(config.shape)}."
            )
        return [bool(b) for b in config.tolist()]
    config = np.asarray(config)
    if config.ndim != 1:
        raise InvalidLength(
            f"Configuration must be one-dimensional, got shape {config.shape}."
        )
    return [bool(b) for b in config.tolist()]


def configuration_to_index(config, num_sites=None):
    """Reads a configuration as a base-2 digit string, site 0 first.

    :param config: The spin configuration.
    :type config: torch.Tensor or Sequence[bool]
    :param num_sites: If given, the length the configuration must have.
    :type num_sites: int

    :raises InvalidLength: If the configuration is empty or its length
                           differs from `num_sites`.
    :returns: The basis index of `config`.
    :rtype: int
    """
    bits = _as_bits(config)
    if num_sites is not None and len(bits) != num_sites:
        raise InvalidLength(
            f"Configuration has {len(bits)} sites, expected {num_sites}."
        )
    if not bits:
        raise InvalidLength("Configuration must have at least one site.")

    index = 0
    for bit in bits:
        index = (index << 1) | int(bit)
    return index


def index_to_configuration(index, num_sites, device=None):
    """Inverse of :func:`configuration_to_index`.

    :param index: The basis index.
    :type index: int
    :param num_sites: The number of lattice sites.
    :type num_sites: int
    :param device: The device to create the configuration on.

    :raises InvalidIndex: If `index` is outside of :math:`[0, 2^L)`.
    :rtype: torch.Tensor
    """
    dim = basis_dimension(num_sites)
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise InvalidIndex(f"Basis index must be an integer, got {index!r}.")
    if not 0 <= index < dim:
        raise InvalidIndex(f"Basis index {index} is outside of [0, {dim}).")

    space = (int(index) & site_weights(num_sites)) > 0
    return torch.tensor(space, dtype=torch.bool, device=device)


def configurations_to_indices(configs):
    """Vectorized :func:`configuration_to_index` over a batch of configurations.

    :param configs: A batch of shape :math:`(n, L)`.
    :type configs: torch.Tensor or numpy.ndarray

    :rtype: numpy.ndarray
    """
    if isinstance(configs, torch.Tensor):
        configs = configs.cpu().numpy()
    configs = np.asarray(configs, dtype=bool)
    if configs.ndim != 2 or configs.shape[-1] == 0:
        raise InvalidLength(
            f"Expected a batch of shape (n, L) with L > 0, got {configs.shape}."
        )
    return configs.astype(np.int64) @ site_weights(configs.shape[-1])
