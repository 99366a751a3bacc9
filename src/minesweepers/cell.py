"""
Cell module for Minesweepers.

Represents the immutable content of a single cell on the game board
(mine, number, or empty) and the visual state a renderer shows for it.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """Possible contents of a cell."""

    MINE = auto()
    NUMBER = auto()
    EMPTY = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Content of a single cell in the Minesweepers grid.

    Cells never change once a board is generated; whether a cell is
    opened or flagged is tracked by the grid, not here.

    Attributes:
        kind: Mine, number, or empty.
        count: Adjacent mine count (1-8 for numbers, 0 otherwise).
    """

    kind: CellKind = CellKind.EMPTY
    count: int = 0

    def __post_init__(self) -> None:
        """Validate kind/count pairing."""
        if self.kind == CellKind.NUMBER and not 1 <= self.count <= 8:
            raise ValueError(f"Number cell count must be 1-8, got {self.count}")
        if self.kind != CellKind.NUMBER and self.count != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a count")

    @classmethod
    def mine(cls) -> "Cell":
        return cls(CellKind.MINE)

    @classmethod
    def number(cls, count: int) -> "Cell":
        return cls(CellKind.NUMBER, count)

    @classmethod
    def empty(cls) -> "Cell":
        return cls(CellKind.EMPTY)

    @classmethod
    def from_count(cls, count: int) -> "Cell":
        """Build a non-mine cell from its adjacent mine count."""
        if count == 0:
            return cls.empty()
        return cls.number(count)

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind == CellKind.MINE

    @property
    def is_number(self) -> bool:
        """Check if cell is a numbered cell."""
        return self.kind == CellKind.NUMBER

    @property
    def is_empty(self) -> bool:
        """Check if cell has no adjacent mines."""
        return self.kind == CellKind.EMPTY

    def to_observation(self, opened: bool, flagged: bool) -> int:
        """
        Convert cell to observation value.

        Args:
            opened: Whether the player has revealed this cell.
            flagged: Whether the player has flagged this cell.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if opened:
            if self.is_mine:
                return MINE_OBSERVATION
            return self.count
        if flagged:
            return FLAGGED_OBSERVATION
        return HIDDEN_OBSERVATION
