# scalar_aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Each helper builds its graph on a fresh tape so
# it never touches (or is touched by) the caller's active graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .var import Var
from .tape import use_tape
from .engine import backward, zero_adjoints


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Var) else x


def _run(y: Any, inputs: Iterable[Var]) -> List[float]:
    zero_adjoints()
    if isinstance(y, Var):
        backward(y)
    # a plain-number output does not depend on any input
    return [x.grad for x in inputs]


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Any], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Runs one reverse pass within a fresh, isolated tape.
    """
    with use_tape():
        x = Var.leaf(x0, "x")
        return _run(f(x), [x])[0]


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form), from ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a scalar Var
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    with use_tape():
        vars_ad: Dict[str, Var] = {k: Var.leaf(v, k) for k, v in inputs.items()}
        partials = _run(f(vars_ad), vars_ad.values())
        return dict(zip(vars_ad.keys(), partials))


def grads_list(f: Callable[[List[Var]], Any], x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs = [Var.leaf(v, f"x{i}") for i, v in enumerate(x0_list)]
        return _run(f(xs), xs)
