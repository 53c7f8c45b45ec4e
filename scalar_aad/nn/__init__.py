"""
Parameter containers built from scalar Vars.

- Neuron: tanh(weighted sum + bias)
- Layer: independent neurons over the same inputs
- MLP: chained layers
"""

from .init import Initializer, uniform, constant
from .module import Module
from .neuron import Neuron
from .layer import Layer
from .mlp import MLP

__all__ = ['Initializer', 'uniform', 'constant',
           'Module', 'Neuron', 'Layer', 'MLP']
