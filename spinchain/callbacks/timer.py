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


import time

from .callback import CallbackBase


class Timer(CallbackBase):
    """Callback which records the time spent assembling a Hamiltonian.

    :param verbose: Whether to print the elapsed time at the end of the build.
    :type verbose: bool
    """

    def __init__(self, verbose=True):
        self.verbose = verbose
        self.start_time = None
        self.build_time = None

    def on_build_start(self, builder):
        self.start_time = time.time()

    def on_build_end(self, builder):
        self.calculate_elapsed_time()

    def calculate_elapsed_time(self):
        self.end_time = time.time()
        self.build_time = self.end_time - self.start_time
        if self.verbose:
            print(
                "Total time elapsed during assembly: {:6.3f} s".format(
                    self.build_time
                )
            )
