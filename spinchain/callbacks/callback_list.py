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


from collections.abc import MutableSequence

from .callback import CallbackBase


class CallbackList(CallbackBase, MutableSequence):
    def __init__(self, callbacks):
        super().__init__()
        self.callbacks = []
        for cb in callbacks:
            self.append(cb)

    def __len__(self):
        return len(self.callbacks)

    def __getitem__(self, key):
        return self.callbacks[key]

    def __setitem__(self, key, value):
        self.callbacks[key] = self._check(value)

    def __delitem__(self, index):
        del self.callbacks[index]

    def __iter__(self):
        return iter(self.callbacks)

    def __add__(self, other):
        return CallbackList(self.callbacks + other.callbacks)

    @staticmethod
    def _check(value):
        if not isinstance(value, CallbackBase):
            raise TypeError(
                "value must be an instance of spinchain.callbacks.CallbackBase"
            )
        return value

    def insert(self, index, value):
        self.callbacks.insert(index, self._check(value))

    def on_build_start(self, builder):
        for cb in self.callbacks:
            cb.on_build_start(builder)

    def on_build_end(self, builder):
        for cb in self.callbacks:
            cb.on_build_end(builder)

    def on_chunk_start(self, builder, chunk):
        for cb in self.callbacks:
            cb.on_chunk_start(builder, chunk)

    def on_chunk_end(self, builder, chunk):
        for cb in self.callbacks:
            cb.on_chunk_end(builder, chunk)
