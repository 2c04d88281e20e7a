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

from spinchain import XXZ, XY, Heisenberg, SpinChainModel, TransverseFieldIsing
from spinchain.errors import InvalidParameter

from conftest import assertAlmostEqual


def test_model_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SpinChainModel()


def test_ising_model(storage):
    model = TransverseFieldIsing(3, 0.5, J=2.0, storage=storage)

    assert model.h == 0.5
    assert model.J == 2.0
    assert dict(model.params) == {"J": 2.0, "h": 0.5}
    assert model.num_sites == 3
    assert model.size() == 8
    assert model.basis.shape == (8, 3)
    assert model.is_sparse() == (storage == "sparse")
    assert model.is_hermitian()
    assert repr(model).startswith("TransverseFieldIsing(num_sites=3, J=2.0, h=0.5")


def test_xxz_model():
    model = XXZ(4, -0.25, J=0.5, storage="sparse")
    assert model.delta == -0.25
    assert model.J == 0.5
    assert model.hamiltonian.kind == "xxz"
    assert "storage='sparse'" in repr(model)


@pytest.mark.parametrize("J", [1.0, -0.5])
def test_xy_and_heisenberg_are_xxz_presets(J):
    assertAlmostEqual(XY(5, J=J).matrix, XXZ(5, 0.0, J=J).matrix, tol=0)
    assertAlmostEqual(Heisenberg(5, J=J).matrix, XXZ(5, 1.0, J=J).matrix, tol=0)
    assert XY(5, J=J).params == {"J": J}
    assert Heisenberg(5, J=J).params == {"J": J}


def test_model_spectrum():
    model = Heisenberg(2, J=-1.0)
    np.testing.assert_allclose(model.eigenvalues(), [-3.0, 1.0, 1.0, 1.0], atol=1e-12)
    assert model.gap() == pytest.approx(4.0)

    energy, psi = model.ground_state()
    assert energy == pytest.approx(-3.0)
    # the singlet (|01> - |10>) / sqrt(2)
    assert abs(psi[1]) == pytest.approx(1 / np.sqrt(2))
    assert psi[1] == pytest.approx(-psi[2])


def test_model_keywords_are_forwarded():
    model = TransverseFieldIsing(4, 1.0, storage="sparse", chunk_size=3)
    assert model.is_sparse()
    assertAlmostEqual(model.matrix, TransverseFieldIsing(4, 1.0).matrix)


def test_model_validates_parameters():
    with pytest.raises(InvalidParameter):
        TransverseFieldIsing(3, np.nan)
    with pytest.raises(InvalidParameter):
        XXZ(0, 1.0)
