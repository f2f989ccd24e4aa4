# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "binary_grid" can be imported without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from binary_grid.puzzle.common import Cell, empty_grid  # noqa: E402

R, B, E = Cell.RED, Cell.BLUE, Cell.EMPTY


@pytest.fixture
def valid_4x4():
    """A complete 4x4 grid that satisfies all three rules."""
    return [
        [R, R, B, B],
        [B, B, R, R],
        [R, B, B, R],
        [B, R, R, B],
    ]


@pytest.fixture
def empty_4x4():
    return empty_grid(4)


@pytest.fixture
def unlocked_4x4():
    return [[False] * 4 for _ in range(4)]


class FakeClock:
    """Manually advanced clock for session timing tests."""

    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
