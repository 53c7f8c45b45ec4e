# scalar_aad/core/__init__.py

"""
Core public API for the scalar_aad package.

Exports:
    Var            : Handle to one scalar node on a tape.
    make_value     : Create a leaf node on the active tape.
    Tape           : Arena of nodes in creation order.
    active_tape    : The tape new leaves are currently recorded on.
    use_tape       : Context manager to temporarily switch the active tape.
    backward       : Run a single reverse pass to accumulate adjoints.
    topological_order : Ancestors of a node, parents first.
    zero_grad      : Reset the adjoints of given Vars.
    zero_adjoints  : Reset all adjoints on a tape.
    grad, grads, grads_list, value : Convenience wrappers on isolated tapes.
"""

from .errors import ScalarAADError, TapeMismatchError, StaleNodeError, GraphCycleError
from .node import Node, OP_TAGS
from .tape import Tape, use_tape, active_tape
from .var import Var, make_value
from .engine import backward, topological_order, zero_grad, zero_adjoints
from .seeds import grad, grads, grads_list, value
from .graph_utils import get_graph_stats

__all__ = [
    "ScalarAADError", "TapeMismatchError", "StaleNodeError", "GraphCycleError",
    "Node", "OP_TAGS",
    "Tape", "use_tape", "active_tape",
    "Var", "make_value",
    "backward", "topological_order", "zero_grad", "zero_adjoints",
    "grad", "grads", "grads_list", "value",
    "get_graph_stats",
]
