"""Global test configuration.

Seeds RNGs for deterministic runs and marks everything under tests/property
with the 'property' marker so it can be selected with `-m property`.
"""

import os
import random
from pathlib import Path

import numpy as np
import pytest


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("SCALAR_AAD_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


def pytest_collection_modifyitems(session, config, items):
    for item in items:
        if "property" in Path(str(item.fspath)).parts:
            item.add_marker(pytest.mark.property)
