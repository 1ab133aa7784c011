import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from level import level_for  # noqa: E402


class ScriptedRandom:
    """RandomSource that replays fixed values and records every bound it was asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def next(self, bound):
        self.bounds.append(bound)
        if not self.values:
            raise AssertionError(f"unexpected random draw (bound={bound})")
        value = self.values.pop(0)
        assert 0 <= value < bound
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def level1():
    # 100 kolumn: max 2 przeszkody, min odstęp 50, prędkość 2
    return level_for(1, 100)
