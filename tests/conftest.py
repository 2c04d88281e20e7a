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


import numpy as np
import pytest

from spinchain import build_ising, build_xxz

TOL = 1e-10

storage_policies = [
    pytest.param("dense", id="dense"),
    pytest.param("sparse", id="sparse"),
]

model_builders = [
    pytest.param(lambda L, **kw: build_ising(L, 0.7, J=1.3, **kw), id="ising"),
    pytest.param(lambda L, **kw: build_xxz(L, 0.4, J=0.9, **kw), id="xxz"),
    pytest.param(lambda L, **kw: build_xxz(L, 0.0, J=-1.0, **kw), id="xy"),
    pytest.param(lambda L, **kw: build_xxz(L, 1.0, J=1.0, **kw), id="heisenberg"),
]


@pytest.fixture(params=storage_policies)
def storage(request):
    return request.param


def assertAlmostEqual(a, b, tol=TOL, msg=None):
    a = a.toarray() if hasattr(a, "toarray") else np.asarray(a)
    b = b.toarray() if hasattr(b, "toarray") else np.asarray(b)
    assert a.shape == b.shape, msg
    assert np.all(np.abs(a - b) <= tol), msg
