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


class SpinChainError(Exception):
    """Base class for all errors raised by spinchain."""


class InvalidLength(SpinChainError, ValueError):
    """A configuration does not have the number of sites it should."""


class InvalidIndex(SpinChainError, IndexError):
    """A basis index lies outside of :math:`[0, 2^L)`."""


class InvalidSite(SpinChainError, IndexError):
    """A site or bond index lies outside of the chain."""


class InvalidParameter(SpinChainError, ValueError):
    """A model parameter, storage policy or scalar type is not acceptable."""


class AssemblyError(SpinChainError, RuntimeError):
    """The matrix assembly produced inconsistent contributions.

    Raised when the same matrix element is contributed twice, or when more
    elements are produced than the preallocated bound allows. Either case
    points to a bug in the operator kernels rather than bad user input.
    """
