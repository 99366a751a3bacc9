"""
Board generation for Minesweepers.

Places mines by rejection sampling uniformly random coordinates and
derives the number shown on every other cell.
"""
import logging
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .grid import Grid, NEIGHBOR_OFFSETS


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Draw budget per cell before rejection sampling gives up.
MAX_ATTEMPTS_PER_CELL = 1000


class GenerationError(RuntimeError):
    """Raised when mine placement does not finish within its draw budget."""


# ============================================================================
# Mine Placement (Low-level)
# ============================================================================

def _check_mine_count(size: int, mine_count: int) -> None:
    """Ensure a board of this size can hold the requested mines."""
    if size < 1:
        raise ValueError("Board size must be positive")
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")
    if mine_count >= size * size:
        raise ValueError(
            f"Too many mines (max {size * size - 1} for a {size}x{size} board)"
        )


def place_mines(
    size: int,
    mine_count: int,
    rng: np.random.Generator,
) -> Set[Tuple[int, int]]:
    """
    Pick distinct mine positions by rejection sampling.

    Args:
        size: Board side length.
        mine_count: Number of distinct positions to pick.
        rng: Random source to draw coordinates from.

    Returns:
        Set of (x, y) mine positions.

    Raises:
        GenerationError: If the draw budget runs out first.
    """
    max_attempts = MAX_ATTEMPTS_PER_CELL * size * size
    mines: Set[Tuple[int, int]] = set()
    attempts = 0
    while len(mines) < mine_count:
        if attempts >= max_attempts:
            raise GenerationError(
                f"Placed only {len(mines)}/{mine_count} mines "
                f"after {attempts} draws"
            )
        attempts += 1
        x = int(rng.integers(0, size))
        y = int(rng.integers(0, size))
        mines.add((x, y))
    return mines


def count_adjacent_mines(
    mines: Set[Tuple[int, int]], size: int, x: int, y: int
) -> int:
    """Count mines in the Moore neighborhood of a position."""
    count = 0
    for delta_x, delta_y in NEIGHBOR_OFFSETS:
        new_x = x + delta_x
        new_y = y + delta_y
        if 0 <= new_x < size and 0 <= new_y < size and (new_x, new_y) in mines:
            count += 1
    return count


# ============================================================================
# Grid Construction (High-level)
# ============================================================================

def grid_from_mines(size: int, mines: Iterable[Tuple[int, int]]) -> Grid:
    """
    Build a grid with mines at fixed positions.

    Args:
        size: Board side length.
        mines: (x, y) mine positions.

    Returns:
        Fresh grid with every cell closed and unflagged.
    """
    mine_set = set()
    for x, y in mines:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"Mine position ({x}, {y}) is off the board")
        if (x, y) in mine_set:
            raise ValueError(f"Duplicate mine position ({x}, {y})")
        mine_set.add((x, y))
    _check_mine_count(size, len(mine_set))

    cells: List[List[Cell]] = []
    for y in range(size):
        row = []
        for x in range(size):
            if (x, y) in mine_set:
                row.append(Cell.mine())
            else:
                row.append(
                    Cell.from_count(count_adjacent_mines(mine_set, size, x, y))
                )
        cells.append(row)
    return Grid(cells)


def generate(
    size: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> Grid:
    """
    Generate a random board.

    Args:
        size: Board side length.
        mine_count: Mines to place; must be below size * size.
        rng: Random source. A freshly seeded one is created when omitted,
            so consecutive boards differ.

    Returns:
        Fresh grid with every cell closed and unflagged.
    """
    _check_mine_count(size, mine_count)
    if rng is None:
        rng = np.random.default_rng()
    mines = place_mines(size, mine_count, rng)
    logger.debug("Generated %dx%d board with %d mines", size, size, mine_count)
    return grid_from_mines(size, mines)
