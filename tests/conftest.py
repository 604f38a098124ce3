import pytest

from debug import Debug


@pytest.fixture(autouse=True)
def quiet_debug():
    """Restore the tracing switchboard after each test."""
    saved = Debug._components.copy(), Debug._enabled
    yield
    Debug._components.update(saved[0])
    Debug._enabled = saved[1]
