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

from .__version__ import __version__
from .errors import (
    AssemblyError,
    InvalidIndex,
    InvalidLength,
    InvalidParameter,
    InvalidSite,
    SpinChainError,
)
from .basis import (
    configuration_to_index,
    generate_basis,
    index_to_configuration,
)
from .hamiltonians import (
    HamiltonianBuilder,
    build_hamiltonian,
    build_heisenberg,
    build_ising,
    build_xxz,
    build_xy,
)
from .matrix import HamiltonianMatrix
from .models import XXZ, XY, Heisenberg, SpinChainModel, TransverseFieldIsing
