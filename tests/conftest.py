import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.engine import GameEngine
from tests.helpers import FixedRng


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def red_first():
    """Engine where Red (player one) drops the first disk."""
    return GameEngine(FixedRng(0))


@pytest.fixture
def yellow_first():
    """Engine where Yellow (player two) drops the first disk."""
    return GameEngine(FixedRng(1))
