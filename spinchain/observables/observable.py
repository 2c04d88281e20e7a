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


import abc
import numbers


class ObservableBase(abc.ABC):
    """Base class for observables evaluated exactly on state vectors.

    Subclasses set `name` (used as a key by
    :class:`spinchain.observables.System`) and `symbol`, and implement
    :func:`apply`. Observables combine with numbers and with each other
    through `+`, `-` and scalar `*`.
    """

    name = None
    symbol = None

    def __str__(self):
        return self.symbol or self.__class__.__name__

    def __repr__(self):
        return self.name or self.__class__.__name__

    def __neg__(self):
        return ProdObservable(-1, self, name=f"-{self!r}", symbol=f"-{self}")

    def __add__(self, other):
        return SumObservable(self, other)

    def __radd__(self, other):
        return SumObservable(other, self)

    def __sub__(self, other):
        return SumObservable(self, -other)

    def __rsub__(self, other):
        return SumObservable(other, -self)

    def __mul__(self, other):
        return ProdObservable(other, self)

    __rmul__ = __mul__

    @abc.abstractmethod
    def apply(self, model, psi):
        r"""Computes the exact expectation value of the observable :math:`O`
        in the state :math:`\psi`:

        .. math::

            \langle O \rangle = \frac{\sum_{\sigma, \sigma'}
            \overline{\psi(\sigma')} O(\sigma', \sigma) \psi(\sigma)}
            {\sum_\sigma |\psi(\sigma)|^2}

        :param model: The Hamiltonian, or model holding one, whose basis
                      `psi` is written in.
        :type model: spinchain.matrix.HamiltonianMatrix
                     or spinchain.models.SpinChainModel
        :param psi: The state, e.g. a column returned by
                    :func:`spinchain.spectrum.eigh`.
        :type psi: numpy.ndarray or torch.Tensor
        :returns: The expectation value.
        :rtype: float
        """


def _check_term(term):
    if isinstance(term, bool) or not isinstance(
        term, (numbers.Real, ObservableBase)
    ):
        raise TypeError(f"Cannot combine {term!r} with an observable.")
    return term


def _evaluate(term, model, psi):
    if isinstance(term, ObservableBase):
        return term.apply(model, psi)
    return term


class SumObservable(ObservableBase):
    """The sum of two observables, or of an observable and a constant."""

    def __init__(self, left, right, name=None, symbol=None):
        self.left = _check_term(left)
        self.right = _check_term(right)
        self.name = name or f"({left!r} + {right!r})"
        self.symbol = symbol or f"({left} + {right})"

    def apply(self, model, psi):
        return _evaluate(self.left, model, psi) + _evaluate(self.right, model, psi)


class ProdObservable(ObservableBase):
    """An observable scaled by a constant."""

    def __init__(self, scale, observable, name=None, symbol=None):
        if isinstance(scale, ObservableBase):
            scale, observable = observable, scale
        if isinstance(_check_term(scale), ObservableBase) or not isinstance(
            _check_term(observable), ObservableBase
        ):
            raise ValueError("Exactly one factor must be an observable.")

        self.scale = scale
        self.observable = observable
        self.name = name or f"({scale!r} * {observable!r})"
        self.symbol = symbol or f"({scale} * {observable})"

    def apply(self, model, psi):
        return self.scale * self.observable.apply(model, psi)
