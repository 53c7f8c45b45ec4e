import pytest

from scalar_aad import use_tape


@pytest.fixture(autouse=True)
def tape():
    """Give every unit test its own active tape."""
    with use_tape() as t:
        yield t
