# scalar_aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .config import EngineConfig, get_config, set_config, engine_config
from .core.errors import ScalarAADError, TapeMismatchError, StaleNodeError, GraphCycleError
from .core.var import Var, make_value
from .core.tape import Tape, use_tape, active_tape
from .core.engine import backward, topological_order, zero_grad, zero_adjoints
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import get_graph_stats
from .ops import add, sub, mul, div, neg, pow, exp, tanh, log, sqrt

# Parameter containers
from . import nn
from .nn import Neuron, Layer, MLP

__version__ = "0.1.0"

__all__ = [
    # Config
    'EngineConfig',
    'get_config',
    'set_config',
    'engine_config',
    # Errors
    'ScalarAADError',
    'TapeMismatchError',
    'StaleNodeError',
    'GraphCycleError',
    # Core
    'Var',
    'make_value',
    'Tape',
    'use_tape',
    'active_tape',
    # Engine
    'backward',
    'topological_order',
    'zero_grad',
    'zero_adjoints',
    # Convenience
    'grad',
    'grads',
    'grads_list',
    'value',
    'get_graph_stats',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'exp', 'tanh', 'log', 'sqrt',
    # nn
    'nn',
    'Neuron',
    'Layer',
    'MLP',
]
