"""
Grid module for Minesweepers.

Holds the square matrix of cell contents together with the parallel
opened/flagged matrices the reveal and flag operations mutate.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Neighbor Offsets
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_x, delta_y)
    for delta_y in (-1, 0, 1)
    for delta_x in (-1, 0, 1)
    if (delta_x, delta_y) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """
    Square grid of cells plus per-cell player state.

    Cells are stored row-major, so ``cells[y][x]`` is the cell in column
    ``x`` of row ``y``; the ``opened`` and ``flagged`` matrices are indexed
    the same way (``opened[y, x]``). Mutators do no validation beyond what
    the caller guarantees.

    Attributes:
        cells: Immutable cell contents, one list per row.
        opened: Boolean matrix, True where the player revealed the cell.
        flagged: Boolean matrix, True where the player placed a flag.
    """

    cells: List[List[Cell]]
    opened: np.ndarray = field(default=None, repr=False, compare=False)
    flagged: np.ndarray = field(default=None, repr=False, compare=False)
    _mines: np.ndarray = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Create the state matrices if they were not supplied."""
        size = len(self.cells)
        if any(len(row) != size for row in self.cells):
            raise ValueError("Grid must be square")
        if self.opened is None:
            self.opened = np.zeros((size, size), dtype=bool)
        if self.flagged is None:
            self.flagged = np.zeros((size, size), dtype=bool)
        self._mines = np.array(
            [[cell.is_mine for cell in row] for row in self.cells], dtype=bool
        ).reshape(size, size)

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self.cells)

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.size and 0 <= y < self.size

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds Moore neighbors of a cell.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            List of (x, y) tuples, without wraparound at the edges.
        """
        result = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.is_valid_position(new_x, new_y):
                result.append((new_x, new_y))
        return result

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Iterate over every (x, y) position, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield x, y

    # ========================================================================
    # Accessors
    # ========================================================================

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def is_opened(self, x: int, y: int) -> bool:
        return bool(self.opened[y, x])

    def is_flagged(self, x: int, y: int) -> bool:
        return bool(self.flagged[y, x])

    def count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flags around position, ignoring opened cells."""
        return sum(
            1 for neighbor_x, neighbor_y in self.neighbors(x, y)
            if self.flagged[neighbor_y, neighbor_x]
            and not self.opened[neighbor_y, neighbor_x]
        )

    @property
    def mine_count(self) -> int:
        """Total number of mines on the grid."""
        return int(self._mines.sum())

    def mine_mask(self) -> np.ndarray:
        """Boolean matrix, True where the cell is a mine."""
        return self._mines.copy()

    def all_safe_cells_opened(self) -> bool:
        """Check that every non-mine cell has been opened."""
        return bool(np.all(self._mines | self.opened))

    # ========================================================================
    # Mutators
    # ========================================================================

    def mark_opened(self, x: int, y: int) -> None:
        self.opened[y, x] = True

    def toggle_flagged(self, x: int, y: int) -> None:
        self.flagged[y, x] = not self.flagged[y, x]
