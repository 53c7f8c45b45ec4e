# scalar_aad/nn/module.py
from abc import ABC, abstractmethod
from typing import List

from ..core.var import Var
from ..core.engine import zero_grad


class Module(ABC):
    """
    Base class for parameter containers built from scalar Vars.

    Subclasses own leaf Vars (their trainable parameters) and compose them with
    the primitive operations in `forward`. Calling the module runs `forward`.
    """

    @abstractmethod
    def forward(self, x):
        pass

    @abstractmethod
    def parameters(self) -> List[Var]:
        """Every trainable leaf Var this module owns, in a stable order."""
        pass

    def zero_grad(self):
        zero_grad(self.parameters())

    def __call__(self, x):
        return self.forward(x)
