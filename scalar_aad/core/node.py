# scalar_aad/core/node.py
from dataclasses import dataclass
from typing import Optional, Tuple

# Tags the backward sweep knows how to interpret.
OP_TAGS = ("leaf", "add", "mul", "pow", "exp", "tanh", "log")


@dataclass
class Node:
    """
    One slot on the tape: a forward value, its adjoint, and the operation
    record that produced it.

    Attributes
    ----------
    op_tag : str
        Operation that produced the node ("leaf" for inputs/parameters).
    value : float
        Forward (primal) value.
    operands : Tuple[int, ...]
        Tape indices of the inputs, in the order the operation received them.
        May repeat (``a + a`` records ``(i, i)``); empty for leaves.
    aux : Optional[float]
        Auxiliary scalar for the local rule: the exponent for "pow", the cached
        forward result for "exp" and "tanh".
    grad : float
        Adjoint accumulator, d(output)/d(this node) after a backward pass.
    label : str
        Debug name, no effect on the math.
    """
    op_tag: str
    value: float
    operands: Tuple[int, ...] = ()
    aux: Optional[float] = None
    grad: float = 0.0
    label: str = ""

    @property
    def parents(self) -> Tuple[int, ...]:
        """Operands deduplicated by index, first-seen order."""
        return tuple(dict.fromkeys(self.operands))

    @property
    def is_leaf(self) -> bool:
        return self.op_tag == "leaf"
