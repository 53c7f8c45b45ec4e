# scalar_aad/nn/layer.py
from typing import List, Optional, Sequence, Union

from ..core.var import Var
from .init import Initializer, uniform
from .module import Module
from .neuron import Neuron


class Layer(Module):
    """`nout` independent neurons reading the same `nin` inputs."""

    def __init__(self, nin: int, nout: int, init: Optional[Initializer] = None):
        if nout < 1:
            raise ValueError(f"nout must be >= 1, got {nout}")
        self.nin = nin
        self.nout = nout
        # all neurons draw from one stream
        init = init if init is not None else uniform()
        self.neurons = [Neuron(nin, init=init) for _ in range(nout)]

    def forward(self, x: Sequence[Union[Var, float]]) -> List[Var]:
        return [n(x) for n in self.neurons]

    def parameters(self) -> List[Var]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer(nin={self.nin}, nout={self.nout})"
