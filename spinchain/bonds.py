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

r"""Nearest-neighbour bond operators of an open spin-1/2 chain.

Two views of the same operators live here. The configuration-level
functions act on a single boolean configuration and are meant for
inspection and testing; the integer-state kernels at the bottom act on
whole arrays of basis indices at once and are what the matrix builder uses.

Conventions: a `False` bit is spin up (:math:`\sigma^z = +1`) and the bonds
are :math:`(i, i + 1)` for :math:`i \in [0, L - 2]`. The XXZ chain is

.. math::

    H = -J \sum_i \left(\sigma^x_i \sigma^x_{i+1} + \sigma^y_i \sigma^y_{i+1}
        + \Delta \sigma^z_i \sigma^z_{i+1}\right)

and since :math:`\sigma^x\sigma^x + \sigma^y\sigma^y =
2(\sigma^+\sigma^- + \sigma^-\sigma^+)`, every anti-aligned bond connects
its configuration to the exchanged one with amplitude :math:`-2J`.
The transverse-field Ising chain counts aligned bonds and attaches one
transverse-field flip to every bond, on its first site,

.. math::

    H = -\sum_{i=0}^{L-2} \left(J \delta_{s_i, s_{i+1}} + h \sigma^x_i\right).
"""

import numbers

import numpy as np
import torch

from .errors import InvalidLength, InvalidParameter, InvalidSite

MODEL_KINDS = ("ising", "xxz")


def check_kind(kind):
    if kind not in MODEL_KINDS:
        raise InvalidParameter(
            f"Unknown model kind {kind!r}; must be one of {MODEL_KINDS}."
        )
    return kind


def as_configuration(config):
    """Converts `config` to a one-dimensional boolean tensor.

    :param config: The spin configuration.
    :type config: torch.Tensor or Sequence[bool]
    :rtype: torch.Tensor
    """
    config = torch.as_tensor(config).to(dtype=torch.bool)
    if config.dim() != 1 or config.shape[0] == 0:
        raise InvalidLength(
            f"Configuration must be a non-empty 1D sequence, got shape {tuple(config.shape)}."
        )
    return config


def _check_index(site, upper, what):
    if isinstance(site, bool) or not isinstance(site, numbers.Integral):
        raise InvalidSite(f"{what} index must be an integer, got {site!r}.")
    if not 0 <= site <= upper:
        raise InvalidSite(f"{what} index {site} is outside of [0, {upper}].")
    return int(site)


def check_bond(num_sites, site):
    """Makes sure `site` starts a bond, i.e. lies in :math:`[0, L - 2]`."""
    return _check_index(site, num_sites - 2, "Bond")


def check_site(num_sites, site):
    """Makes sure `site` lies in :math:`[0, L - 1]`."""
    return _check_index(site, num_sites - 1, "Site")


def is_aligned(config, site):
    """Whether the two spins of bond `(site, site + 1)` point the same way."""
    config = as_configuration(config)
    site = check_bond(len(config), site)
    return bool(config[site] == config[site + 1])


def flip_pair(config, site):
    """Returns a copy of `config` with both spins of bond `site` inverted.

    On an anti-aligned bond this exchanges the two spins, which is the action
    of :math:`\\sigma^+_i\\sigma^-_{i+1} + \\sigma^-_i\\sigma^+_{i+1}`.
    """
    config = as_configuration(config)
    site = check_bond(len(config), site)
    flipped = config.clone()
    flipped[site : site + 2] = ~flipped[site : site + 2]
    return flipped


def flip_site(config, site):
    """Returns a copy of `config` with the spin at `site` inverted."""
    config = as_configuration(config)
    site = check_site(len(config), site)
    flipped = config.clone()
    flipped[site] = ~flipped[site]
    return flipped


def diagonal_term(config, site, kind="ising", delta=1.0, J=1.0):
    """The diagonal energy contributed by bond `(site, site + 1)`.

    :param config: The spin configuration.
    :type config: torch.Tensor or Sequence[bool]
    :param site: The first site of the bond.
    :type site: int
    :param kind: Either "ising" or "xxz".
    :type kind: str
    :param delta: The XXZ anisotropy; ignored for the Ising chain.
    :type delta: float
    :param J: The bond coupling.
    :type J: float

    :returns: :math:`-J` or :math:`0` for the Ising chain,
              :math:`\\mp J\\Delta` for the XXZ chain.
    :rtype: float
    """
    check_kind(kind)
    aligned = is_aligned(config, site)
    if kind == "ising":
        return -J if aligned else 0.0
    return -J * delta * (1.0 if aligned else -1.0)


def off_diagonal_coefficient(kind, h=0.0, J=1.0):
    """The amplitude attached to each flip of the given model kind."""
    check_kind(kind)
    if kind == "ising":
        return -h
    return -2.0 * J


def bond_transitions(config, site, kind="ising", h=0.0, J=1.0):
    """Off-diagonal targets reached from `config` through bond `site`.

    For the Ising chain this is the transverse-field flip of `site`, the
    first spin of the bond.
    For the XXZ chain it is the exchange of the two spins when they differ.

    :returns: A list of `(configuration, coefficient)` pairs.
    :rtype: list[tuple[torch.Tensor, float]]
    """
    check_kind(kind)
    config = as_configuration(config)
    check_bond(len(config), site)

    coefficient = off_diagonal_coefficient(kind, h=h, J=J)
    if kind == "ising":
        return [(flip_site(config, site), coefficient)]
    if is_aligned(config, site):
        return []
    return [(flip_pair(config, site), coefficient)]


# --- integer-state kernels ---------------------------------------------------


def site_mask(num_sites, site):
    """The bit that stores `site` in a basis index."""
    return 1 << (num_sites - 1 - site)


def bond_mask(num_sites, site):
    """The two bits that store bond `(site, site + 1)` in a basis index."""
    return site_mask(num_sites, site) | site_mask(num_sites, site + 1)


def aligned_states(states, num_sites, site):
    """Vectorized :func:`is_aligned` over an array of basis indices.

    :param states: Basis indices.
    :type states: numpy.ndarray
    :rtype: numpy.ndarray
    """
    shift = num_sites - 2 - site
    pair = (states >> shift) & 3
    return (pair == 0) | (pair == 3)


def max_nnz_per_row(num_sites, kind):
    """Upper bound on the stored entries of one Hamiltonian row.

    One diagonal entry, plus one flip per bond: the transverse-field flip
    for the Ising chain, the exchange for the XXZ chain.
    """
    check_kind(kind)
    return 1 + max(num_sites - 1, 0)


def bond_sites(num_sites):
    """The first site of every bond of the open chain."""
    return np.arange(max(num_sites - 1, 0))
