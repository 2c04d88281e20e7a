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


r"""Follows the ground state of the open XXZ chain across the anisotropy
range: energy per site, gap and spin correlations. The level crossings at
:math:`\Delta = \pm 1` separate the planar regime from the two Ising-like
ones.
"""

import numpy as np

from spinchain import XXZ
from spinchain.callbacks import Logger
from spinchain.observables import NeighbourInteraction, SigmaX, SigmaZ, System
from spinchain.spectrum import scan

num_sites = 10
deltas = np.linspace(-2.0, 2.0, 11)


def make_model(delta):
    return XXZ(num_sites, delta, storage="sparse")


def main():
    # one assembly with logging, to see the row chunks go by
    XXZ(
        num_sites,
        1.0,
        storage="sparse",
        chunk_size=256,
        callbacks=[Logger(1)],
        time=True,
    )

    result = scan(make_model, deltas, k=2, progbar=True)

    zz = NeighbourInteraction()
    system = System(SigmaX(), SigmaZ(absolute=True), zz)
    print(f"{'delta':>6} {'E0/L':>10} {'gap':>10} {'<X>':>8} {'<|Z|>':>8} {'<ZZ>':>8}")
    for delta, energies, gap in zip(deltas, result["energies"], result["gap"]):
        obs = system.ground_state_expectations(make_model(delta))
        print(
            f"{delta:6.2f} {energies[0] / num_sites:10.5f} {gap:10.5f} "
            f"{obs['SigmaX']:8.4f} {obs['SigmaZ']:8.4f} {obs[zz.name]:8.4f}"
        )


if __name__ == "__main__":
    main()
