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


from spinchain.spectrum import ground_state


class System:
    r"""A class representing a physical system.

    It keeps track of multiple observables which it can evaluate simultaneously.

    :param \*observables: The Observables to evaluate.
    """

    def __init__(self, *observables):
        self.observables = {obs.name: obs for obs in observables}

    def expectations(self, model, psi):
        """Computes the exact expectation value of every observable in `psi`.

        :param model: The Hamiltonian, or model holding one.
        :param psi: The state to evaluate the observables in.
        :type psi: numpy.ndarray or torch.Tensor

        :returns: A dictionary mapping the names of the observables to their
                  expectation values.
        :rtype: dict(str, float)
        """
        return {name: obs.apply(model, psi) for name, obs in self.observables.items()}

    def ground_state_expectations(self, model):
        """Evaluates every observable in the ground state of `model`."""
        _, psi = ground_state(model)
        return self.expectations(model, psi)
