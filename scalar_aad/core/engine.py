# scalar_aad/core/engine.py
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

import numpy as np

from . import tape as tape_mod
from .errors import GraphCycleError
from .node import Node
from .tape import Tape
from .var import Var
from ..config import get_config

logger = logging.getLogger(__name__)


def zero_grad(params: Iterable[Var]):
    """Reset the adjoint of every given Var to zero."""
    for v in params:
        v.zero_grad()


def zero_adjoints(tape: Optional[Tape] = None):
    """
    Set every adjoint on a tape (the active one by default) to zero.
    Use between passes when gradients from the previous pass must not leak in.
    """
    nodes = (tape if tape is not None else tape_mod.global_tape).nodes
    for node in nodes:
        node.grad = 0.0


def topological_order(root: Var) -> List[int]:
    """
    Tape indices of `root` and all its ancestors, every node after its parents.

    Iterative depth-first post-order: a node is emitted once all of its parents
    have been, and the visited set keeps shared sub-expressions (diamonds) from
    being emitted twice.
    """
    nodes = root.tape.nodes
    debug = get_config().debug_checks
    root.node  # raises StaleNodeError for a dropped handle
    start = root.index

    order: List[int] = []
    visited = set()
    emitted = set() if debug else None
    stack = [(start, False)]
    while stack:
        idx, expanded = stack.pop()
        if expanded:
            order.append(idx)
            if debug:
                _check_emitted(nodes, idx, emitted)
                emitted.add(idx)
            continue
        if idx in visited:
            continue
        visited.add(idx)
        stack.append((idx, True))
        for p in nodes[idx].parents:
            if p not in visited:
                stack.append((p, False))
            elif debug and p not in emitted:
                raise GraphCycleError(f"node {p} reached again while still in progress (from {idx})")
    return order


def _check_emitted(nodes: List[Node], idx: int, emitted: set):
    for p in nodes[idx].parents:
        if p not in emitted:
            raise GraphCycleError(f"node {idx} emitted before its parent {p}")


def backward(root: Var):
    """
    Run a single reverse pass from `root`.

    The root's adjoint is seeded with 1.0 (overwriting it), then every node in
    reverse topological order pushes its adjoint into its parents:
        p.grad += node.grad * (∂node/∂p)
    Accumulation is additive, so a Var used several times receives the sum of
    all its uses. Adjoints are not zeroed first; call zero_grad() or
    zero_adjoints() beforehand if a previous pass must not leak in.
    """
    order = topological_order(root)
    nodes = root.tape.nodes
    logger.debug("backward from node %d over %d nodes", root.index, len(order))

    nodes[root.index].grad = 1.0
    for idx in reversed(order):
        _propagate(nodes, nodes[idx])


def _propagate(nodes: List[Node], node: Node):
    """Apply the local-gradient rule recorded on `node` to its operands."""
    tag = node.op_tag
    g = node.grad
    if tag == "leaf":
        return

    if tag == "add":
        a, b = node.operands
        nodes[a].grad += g
        nodes[b].grad += g

    elif tag == "mul":
        a, b = node.operands
        nodes[a].grad += g * nodes[b].value
        nodes[b].grad += g * nodes[a].value

    elif tag == "pow":
        (a,) = node.operands
        n = node.aux
        with np.errstate(all="ignore"):
            local = n * np.power(np.float64(nodes[a].value), n - 1.0)
            nodes[a].grad += float(g * local)

    elif tag == "exp":
        (a,) = node.operands
        nodes[a].grad += g * node.aux

    elif tag == "tanh":
        (a,) = node.operands
        t = node.aux
        nodes[a].grad += g * (1.0 - t * t)

    elif tag == "log":
        (a,) = node.operands
        with np.errstate(all="ignore"):
            nodes[a].grad += float(np.float64(g) / nodes[a].value)

    else:
        raise ValueError(f"Unknown operation tag on tape: {tag!r}")
