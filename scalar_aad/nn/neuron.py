# scalar_aad/nn/neuron.py
from typing import List, Optional, Sequence, Union

from ..core.var import Var
from ..ops import tanh
from .init import Initializer, constant, uniform
from .module import Module


class Neuron(Module):
    """
    Weighted sum of the inputs plus a bias, through tanh:

        out = tanh(b + Σᵢ wᵢ·xᵢ)

    Weights come from `init` (uniform over the configured range by default);
    the bias starts at 0.0 unless `bias_init` says otherwise.
    """

    def __init__(self, nin: int, init: Optional[Initializer] = None,
                 bias_init: Optional[Initializer] = None):
        if nin < 1:
            raise ValueError(f"nin must be >= 1, got {nin}")
        init = init if init is not None else uniform()
        bias_init = bias_init if bias_init is not None else constant(0.0)
        self.nin = nin
        self.w = [Var.leaf(init(), f"w{i}") for i in range(nin)]
        self.b = Var.leaf(bias_init(), "b")

    def forward(self, x: Sequence[Union[Var, float]]) -> Var:
        if len(x) != self.nin:
            raise ValueError(f"Neuron expects {self.nin} inputs, got {len(x)}")
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * xi
        return tanh(act)

    def parameters(self) -> List[Var]:
        return self.w + [self.b]

    def __repr__(self):
        return f"Neuron(nin={self.nin})"
