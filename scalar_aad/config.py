"""
scalar_aad configuration.

Engine switches and parameter-initialization defaults live here so the rest of
the package never hardcodes them.
"""

import os
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for graph traversal and parameter initialization."""

    # Traversal
    debug_checks: bool = False  # cycle/ordering assertions during backward

    # Default uniform initializer for nn parameters
    init_low: float = -1.0
    init_high: float = 1.0
    init_seed: Optional[int] = None

    def __post_init__(self):
        if not self.init_low < self.init_high:
            raise ValueError(
                f"init_low must be < init_high, got [{self.init_low}, {self.init_high}]"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from SCALAR_AAD_DEBUG and SCALAR_AAD_SEED."""
        debug = os.environ.get("SCALAR_AAD_DEBUG", "").strip().lower() in _TRUTHY
        raw = os.environ.get("SCALAR_AAD_SEED", "").strip()
        seed = None
        if raw:
            try:
                seed = int(raw)
            except ValueError:
                warnings.warn(
                    f"Ignoring SCALAR_AAD_SEED={raw!r}: expected an integer.",
                    RuntimeWarning,
                    stacklevel=2,
                )
        return cls(debug_checks=debug, init_seed=seed)


_config = EngineConfig.from_env()


def get_config() -> EngineConfig:
    return _config


def set_config(**changes) -> EngineConfig:
    """Replace fields of the active config; unknown names raise TypeError."""
    global _config
    _config = replace(_config, **changes)
    return _config


@contextmanager
def engine_config(**changes) -> Iterator[EngineConfig]:
    """
    Temporarily override config fields:
        with engine_config(debug_checks=True):
            y.backward()
    """
    global _config
    prev = _config
    try:
        _config = replace(prev, **changes)
        yield _config
    finally:
        _config = prev
