# scalar_aad/nn/init.py
"""
Initial parameter values.

An initializer is any zero-argument callable returning a float; it is called
once per parameter, so the random policy stays pluggable.
"""
from typing import Callable, Optional

import numpy as np

from ..config import get_config

Initializer = Callable[[], float]


def uniform(low: Optional[float] = None, high: Optional[float] = None,
            seed: Optional[int] = None) -> Initializer:
    """
    Draw from U[low, high) using numpy's Generator.
    Unset arguments fall back to EngineConfig.init_low/init_high/init_seed.
    """
    cfg = get_config()
    low = cfg.init_low if low is None else float(low)
    high = cfg.init_high if high is None else float(high)
    if not low < high:
        raise ValueError(f"low must be < high, got [{low}, {high}]")
    rng = np.random.default_rng(cfg.init_seed if seed is None else seed)

    def draw() -> float:
        return float(rng.uniform(low, high))

    return draw


def constant(value: float) -> Initializer:
    value = float(value)

    def draw() -> float:
        return value

    return draw
