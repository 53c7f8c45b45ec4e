# scalar_aad/ops/arithmetic.py
import numbers

import numpy as np

from ..core.var import Var
from ..core.errors import TapeMismatchError
from ..core import tape as tape_mod  # Use module access for use_tape() compatibility


def _tape_for(*xs):
    """The tape shared by every Var operand, or the active tape if there is none."""
    tapes = {id(x.tape): x.tape for x in xs if isinstance(x, Var)}
    if len(tapes) > 1:
        raise TapeMismatchError("Operands were recorded on different tapes")
    if tapes:
        return next(iter(tapes.values()))
    return tape_mod.global_tape


def _as_var(x, tape):
    """Ensure x is a Var; otherwise promote it to a new leaf on `tape`."""
    return x if isinstance(x, Var) else Var.leaf(x, tape=tape)


def _record(tape, op_tag, value, operands, aux=None):
    idx = tape.push_node(op_tag=op_tag, value=float(value),
                         operands=[v.index for v in operands], aux=aux)
    return Var(tape, idx)


def add(x, y):
    """out = x + y;  ∂out/∂x = ∂out/∂y = 1"""
    tape = _tape_for(x, y)
    x, y = _as_var(x, tape), _as_var(y, tape)
    return _record(tape, "add", x.value + y.value, (x, y))


def mul(x, y):
    """out = x * y;  ∂out/∂x = y, ∂out/∂y = x"""
    tape = _tape_for(x, y)
    x, y = _as_var(x, tape), _as_var(y, tape)
    return _record(tape, "mul", x.value * y.value, (x, y))


def pow(x, n):
    """
    Power with a plain real exponent:
      out.val = x.val ** n
      ∂out/∂x = n * x^(n-1)

    `n` is a constant, not a node: a Var exponent raises TypeError. Values
    follow IEEE-754 (0 ** -1 = inf, negative base with a non-integral exponent
    = nan) without raising; the backward rule is equally unguarded.
    """
    if isinstance(n, Var):
        raise TypeError("pow() exponent must be a plain number, not a Var")
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise TypeError(f"pow() exponent must be a real number, but got {type(n)}")
    tape = _tape_for(x)
    x = _as_var(x, tape)
    n = float(n)
    with np.errstate(all="ignore"):
        out = np.power(np.float64(x.value), n)
    return _record(tape, "pow", out, (x,), aux=n)


def neg(x):
    """out = -x, recorded as x * -1."""
    return mul(x, -1.0)


def sub(x, y):
    """out = x - y, recorded as x + (-y)."""
    tape = _tape_for(x, y)
    return add(_as_var(x, tape), neg(_as_var(y, tape)))


def div(x, y):
    """
    out = x / y, recorded as x * y^-1.
    A zero-valued y gives an infinite (or nan) result, never an exception.
    """
    tape = _tape_for(x, y)
    return mul(_as_var(x, tape), pow(_as_var(y, tape), -1.0))
