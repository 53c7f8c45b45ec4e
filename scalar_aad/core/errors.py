# scalar_aad/core/errors.py
"""
Exceptions raised by the engine.

Numeric trouble (division by zero, overflow, invalid powers) never raises: it
propagates as inf/nan. These cover misuse of the graph API only.
"""


class ScalarAADError(Exception):
    """Base class for all scalar_aad errors."""


class TapeMismatchError(ScalarAADError, ValueError):
    """Operands of one operation were recorded on different tapes."""


class StaleNodeError(ScalarAADError, RuntimeError):
    """A handle refers to a tape slot that was reset or truncated away."""


class GraphCycleError(ScalarAADError, RuntimeError):
    """Raised by debug checks when traversal meets a node still in progress."""
