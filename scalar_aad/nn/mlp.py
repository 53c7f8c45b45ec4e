# scalar_aad/nn/mlp.py
from typing import List, Optional, Sequence, Union

from ..core.var import Var
from .init import Initializer, uniform
from .layer import Layer
from .module import Module


class MLP(Module):
    """
    Multi-layer perceptron: layers chained so each one's outputs feed the next.

    Args:
        nin: number of network inputs
        nouts: output width of each layer, first to last
        init: weight initializer shared by every neuron
    """

    def __init__(self, nin: int, nouts: Sequence[int], init: Optional[Initializer] = None):
        if not nouts:
            raise ValueError("MLP needs at least one layer")
        init = init if init is not None else uniform()
        sizes = [nin] + list(nouts)
        self.layers = [Layer(sizes[i], sizes[i + 1], init=init) for i in range(len(nouts))]

    def forward(self, x: Sequence[Union[Var, float]]) -> List[Var]:
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self) -> List[Var]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
