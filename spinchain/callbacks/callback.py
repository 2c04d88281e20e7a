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


class CallbackBase:
    """Base class for callbacks run while a Hamiltonian is assembled.

    The builder processes the basis in contiguous chunks of rows; callbacks
    are notified at the start and end of the whole build and of every chunk.
    """

    def on_build_start(self, builder):
        """Called before the first chunk is processed.

        :param builder: The builder assembling the Hamiltonian.
        :type builder: spinchain.hamiltonians.HamiltonianBuilder
        """
        pass

    def on_build_end(self, builder):
        """Called once the matrix has been assembled.

        :param builder: The builder assembling the Hamiltonian.
        :type builder: spinchain.hamiltonians.HamiltonianBuilder
        """
        pass

    def on_chunk_start(self, builder, chunk):
        """Called at the start of each chunk of rows.

        :param builder: The builder assembling the Hamiltonian.
        :type builder: spinchain.hamiltonians.HamiltonianBuilder
        :param chunk: The index of the current chunk.
        :type chunk: int
        """
        pass

    def on_chunk_end(self, builder, chunk):
        """Called at the end of each chunk of rows.

        :param builder: The builder assembling the Hamiltonian.
        :type builder: spinchain.hamiltonians.HamiltonianBuilder
        :param chunk: The index of the current chunk.
        :type chunk: int
        """
        pass
