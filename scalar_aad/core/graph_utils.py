"""
Graph inspection helpers.

Read-only statistics over a tape (or one output's ancestor set), handy in tests
and when checking how large a training step's graph grows.
"""

from collections import Counter
from typing import Dict, Optional

from . import tape as tape_mod
from .engine import topological_order
from .tape import Tape
from .var import Var


def get_graph_stats(tape: Optional[Tape] = None, root: Optional[Var] = None) -> Dict:
    """
    Collect graph statistics without printing.

    Args:
        tape: tape to inspect (defaults to the active tape, or root's tape)
        root: if given, only count root and its ancestors

    Returns:
        dict with keys nodes, edges, leaves, max_fan_in, max_fan_out,
        avg_fan_out, operations (op tag -> count)
    """
    if root is not None:
        tape = root.tape
        indices = topological_order(root)
    else:
        tape = tape if tape is not None else tape_mod.global_tape
        indices = range(len(tape.nodes))

    nodes = tape.nodes
    selected = [nodes[i] for i in indices]
    if not selected:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    # edges count distinct parents, so a + a contributes one edge
    fan_ins = [len(node.parents) for node in selected]
    fan_outs = Counter()
    for node in selected:
        for p in node.parents:
            fan_outs[p] += 1

    n_nodes = len(selected)
    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for node in selected if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_outs.values()) if fan_outs else 0,
        'avg_fan_out': sum(fan_outs.values()) / n_nodes,
        'operations': dict(Counter(node.op_tag for node in selected))
    }
