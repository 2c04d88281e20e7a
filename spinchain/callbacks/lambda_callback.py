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


from inspect import signature

from .callback import CallbackBase


class LambdaCallback(CallbackBase):
    """Class for creating simple callbacks.

    This callback is constructed using the passed functions that will be called
    at the appropriate time.

    :param on_build_start: A function to be called before assembly starts.
        Must follow the same signature as
        :func:`CallbackBase.on_build_start<CallbackBase.on_build_start>`.
    :type on_build_start: callable or None

    :param on_build_end: A function to be called once the matrix is assembled.
        Must follow the same signature as
        :func:`CallbackBase.on_build_end<CallbackBase.on_build_end>`.
    :type on_build_end: callable or None

    :param on_chunk_start: A function to be called at the start of every chunk.
        Must follow the same signature as
        :func:`CallbackBase.on_chunk_start<CallbackBase.on_chunk_start>`.
    :type on_chunk_start: callable or None

    :param on_chunk_end: A function to be called at the end of every chunk.
        Must follow the same signature as
        :func:`CallbackBase.on_chunk_end<CallbackBase.on_chunk_end>`.
    :type on_chunk_end: callable or None
    """

    @staticmethod
    def _validate_function(fn, num_params, name):
        if callable(fn):
            if len(signature(fn).parameters) == num_params:
                return fn
            else:
                raise ValueError(
                    "Given function for {} must have {} arguments.".format(
                        name, num_params
                    )
                )
        elif fn is None:
            return lambda *args: None
        else:
            raise TypeError(f"{name} must be either None or a function")

    def __init__(
        self,
        on_build_start=None,
        on_build_end=None,
        on_chunk_start=None,
        on_chunk_end=None,
    ):
        super().__init__()
        self.on_build_start = self._validate_function(
            on_build_start, 1, "on_build_start"
        )
        self.on_build_end = self._validate_function(on_build_end, 1, "on_build_end")
        self.on_chunk_start = self._validate_function(
            on_chunk_start, 2, "on_chunk_start"
        )
        self.on_chunk_end = self._validate_function(on_chunk_end, 2, "on_chunk_end")
