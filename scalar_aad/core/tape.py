# scalar_aad/core/tape.py
from __future__ import annotations
import logging
from typing import List, Iterable, Iterator, Optional
from contextlib import contextmanager
from .node import Node, OP_TAGS

logger = logging.getLogger(__name__)


class Tape:
    """
    Arena of Nodes in creation order. A node is addressed by its index; every
    operand index points strictly backwards, so the recorded graph is acyclic.
    """
    def __init__(self):
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"Tape(nodes={len(self.nodes)})"

    def reset(self):
        logger.debug("Resetting tape with %d nodes", len(self.nodes))
        self.nodes.clear()

    def truncate(self, size: int):
        """Drop every node recorded at index >= size."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if size < len(self.nodes):
            logger.debug("Truncating tape from %d to %d nodes", len(self.nodes), size)
            del self.nodes[size:]

    @contextmanager
    def scratch(self) -> Iterator["Tape"]:
        """
        Discard everything recorded inside the block:
            with tape.scratch():
                loss = ...; loss.backward()
        Nodes recorded before entry (e.g. parameters) survive.
        """
        mark = len(self.nodes)
        try:
            yield self
        finally:
            self.truncate(mark)

    def push_leaf(self, value: float, label: str = "") -> int:
        self.nodes.append(Node(op_tag="leaf", value=value, label=label))
        return len(self.nodes) - 1

    def push_node(self, *, op_tag: str, value: float, operands: Iterable[int],
                  aux: Optional[float] = None, label: str = "") -> int:
        """
        Append a derived Node and return its index.
        `operands` must index nodes already on this tape.
        """
        if op_tag not in OP_TAGS or op_tag == "leaf":
            raise ValueError(f"Unknown operation tag: {op_tag!r}")
        operands = tuple(operands)
        n = len(self.nodes)
        for i in operands:
            if not 0 <= i < n:
                raise ValueError(f"Operand index {i} does not refer to a node on this tape (size {n})")
        self.nodes.append(Node(op_tag=op_tag, value=value, operands=operands, aux=aux, label=label))
        return n


# Global default tape; swap it with use_tape()
global_tape = Tape()


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily use a fresh tape:
        with use_tape():
            ... build computation ...
            y.backward()
    """
    global global_tape
    prev = global_tape
    try:
        global_tape = tape if tape is not None else Tape()
        yield global_tape
    finally:
        global_tape = prev


def active_tape() -> Tape:
    """Return the tape new leaves are recorded on."""
    return global_tape
