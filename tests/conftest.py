"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweepers import Board, BoardConfig, Cell, Grid, grid_from_mines


# ============================================================================
# Clock Fixtures
# ============================================================================

class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=100s."""
    return FakeClock()


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def center_mine_grid() -> Grid:
    """5x5 grid with a single mine at (2, 2)."""
    return grid_from_mines(5, [(2, 2)])


@pytest.fixture
def wall_grid() -> Grid:
    """6x6 grid with a column of mines at x=3 splitting the board."""
    return grid_from_mines(6, [(3, y) for y in range(6)])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def center_mine_board(center_mine_grid: Grid, clock: FakeClock) -> Board:
    """5x5 board with a single mine at (2, 2)."""
    return Board.from_grid(center_mine_grid, clock=clock)


@pytest.fixture
def wall_board(wall_grid: Grid, clock: FakeClock) -> Board:
    """6x6 board split by a wall of mines."""
    return Board.from_grid(wall_grid, clock=clock)


@pytest.fixture
def seeded_board(clock: FakeClock) -> Board:
    """Default 10x10 board with 15 mines from a fixed seed."""
    return Board(BoardConfig(), rng=np.random.default_rng(1234), clock=clock)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell.mine()


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a cell with three adjacent mines."""
    return Cell.number(3)
