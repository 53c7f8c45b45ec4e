# scalar_aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_aad.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, tanh, log, sqrt

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "tanh", "log", "sqrt",
]
