# scalar_aad/ops/transcendental.py
import numpy as np
from .arithmetic import _as_var, _record, _tape_for, pow


def exp(x):
    tape = _tape_for(x)
    x = _as_var(x, tape)
    with np.errstate(all="ignore"):
        ex = float(np.exp(x.value))
    # local partial e^x is the forward result itself; cache it
    return _record(tape, "exp", ex, (x,), aux=ex)


def tanh(x):
    """
    Hyperbolic tangent, the neuron activation.
    Derivative: 1 - tanh(x)^2, from the cached forward result.
    """
    tape = _tape_for(x)
    x = _as_var(x, tape)
    t = float(np.tanh(x.value))
    return _record(tape, "tanh", t, (x,), aux=t)


def log(x):
    """Natural log; log(0) = -inf and log(x<0) = nan, no exception."""
    tape = _tape_for(x)
    x = _as_var(x, tape)
    with np.errstate(all="ignore"):
        out = np.log(x.value)
    return _record(tape, "log", out, (x,))


def sqrt(x):
    return pow(x, 0.5)
