# scalar_aad/core/var.py
from __future__ import annotations
import numbers
import warnings
from typing import Tuple

from . import tape as tape_mod  # module access so use_tape() swaps are seen
from .errors import StaleNodeError
from .node import Node
from .tape import Tape


def _check_real(x) -> float:
    # bool is an int subclass but never a sensible node value
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise TypeError(f"Var values must be real numbers, but got {type(x)}")
    return float(x)


class Var:
    """
    Handle to one node on a tape.

    A Var is (tape, index). All state (value, gradient, label, operation
    record) lives in the tape's Node; the handle only reads and writes it.
    Two handles compare equal when they address the same node, so Vars can be
    used as set members and dict keys. Equality is identity, never value.

    Attributes
    ----------
    tape : Tape
        Arena the node lives on.
    index : int
        Position of the node on that tape.
    """

    __slots__ = ("tape", "index", "_node")
    __array_ufunc__ = None  # numpy scalars defer to our reflected operators

    def __init__(self, tape: Tape, index: int):
        self.tape = tape
        self.index = index
        self._node: Node = tape.nodes[index]

    @classmethod
    def leaf(cls, value, label: str = "", *, tape: Tape = None) -> "Var":
        """Record a new leaf (input, constant or parameter) and return its handle."""
        t = tape if tape is not None else tape_mod.global_tape
        return cls(t, t.push_leaf(_check_real(value), label=label))

    # ------------------------------------------------------------------ #
    # Node access
    # ------------------------------------------------------------------ #
    @property
    def node(self) -> Node:
        nodes = self.tape.nodes
        if self.index >= len(nodes) or nodes[self.index] is not self._node:
            raise StaleNodeError(
                f"node {self.index} ({self._node.op_tag}) is no longer on its tape"
            )
        return self._node

    @property
    def value(self) -> float:
        return self.node.value

    @value.setter
    def value(self, v):
        node = self.node
        if not node.is_leaf:
            warnings.warn(
                f"Overwriting the value of a derived '{node.op_tag}' node; "
                f"its children are not recomputed.",
                RuntimeWarning,
                stacklevel=2,
            )
        node.value = _check_real(v)

    @property
    def grad(self) -> float:
        return self.node.grad

    @grad.setter
    def grad(self, g):
        self.node.grad = _check_real(g)

    @property
    def label(self) -> str:
        return self.node.label

    @label.setter
    def label(self, s: str):
        self.node.label = str(s)

    @property
    def op_tag(self) -> str:
        return self.node.op_tag

    @property
    def is_leaf(self) -> bool:
        return self.node.is_leaf

    @property
    def parents(self) -> Tuple["Var", ...]:
        return tuple(Var(self.tape, i) for i in self.node.parents)

    def add_to_grad(self, delta):
        self.node.grad += _check_real(delta)

    def zero_grad(self):
        self.node.grad = 0.0

    def backward(self):
        """Treat this node as the output and populate every ancestor's grad."""
        from .engine import backward
        backward(self)

    # ------------------------------------------------------------------ #
    # Python protocol
    # ------------------------------------------------------------------ #
    def __repr__(self):
        node = self._node
        label = f", label={node.label!r}" if node.label else ""
        return f"Var({node.value!r}, grad={node.grad!r}, op={node.op_tag!r}{label})"

    def __float__(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, Var):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return id(self._node)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other) if _is_operand(other) else NotImplemented

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self) if _is_operand(other) else NotImplemented

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self) if _is_operand(other) else NotImplemented

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self) if _is_operand(other) else NotImplemented

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self) if _is_operand(other) else NotImplemented

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        # pow() itself rejects a Var exponent with TypeError
        return pow(self, other) if _is_operand(other) else NotImplemented


def _is_operand(x) -> bool:
    return isinstance(x, Var) or (isinstance(x, numbers.Real) and not isinstance(x, bool))


def make_value(value, label: str = "") -> Var:
    """Create a leaf node on the active tape."""
    return Var.leaf(value, label)
