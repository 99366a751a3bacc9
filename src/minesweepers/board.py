"""
Board module for Minesweepers.

Implements the board engine: mine placement through the generator,
cascading reveal, chording, flag toggling, and game state management.
"""
import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .generator import generate
from .grid import Grid
from .timer import GameTimer


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 5
MAX_SIZE = 20
DEFAULT_SIZE = 10
DEFAULT_MINES = 15


class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


def mines_for_size(size: int) -> int:
    """Mine count for a board of the given size (about 16.7% density)."""
    return size * size // 6


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweepers board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = DEFAULT_SIZE
    num_mines: int = DEFAULT_MINES

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @classmethod
    def for_size(cls, size: int) -> "BoardConfig":
        """Configuration using the fixed mine density."""
        return cls(size, mines_for_size(size))


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweepers game board.

    Owns the grid, the game state flags and the timer. Every mutating
    operation is refused once the game is won or lost; only ``reset``
    brings the board back into play.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    grid: Optional[Grid] = field(default=None, repr=False)
    _game_over: bool = False
    _game_won: bool = False
    _timer: GameTimer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Generate the grid unless one was supplied."""
        if self.grid is None:
            self.grid = generate(self.config.size, self.config.num_mines, self.rng)
        else:
            self.config = BoardConfig(self.grid.size, self.grid.mine_count)
        self._timer = GameTimer(clock=self.clock)

    @classmethod
    def new(
        cls,
        size: int,
        mine_count: int,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Board":
        """Create a fresh board with the given size and mine count."""
        return cls(BoardConfig(size, mine_count), rng=rng, clock=clock)

    @classmethod
    def from_grid(
        cls, grid: Grid, clock: Callable[[], float] = time.monotonic
    ) -> "Board":
        """Wrap an already built grid, e.g. one with fixed mines."""
        return cls(clock=clock, grid=grid)

    # ========================================================================
    # Reveal Algorithm (Low-level)
    # ========================================================================

    def _open_cell_inner(self, x: int, y: int, check_win: bool = True) -> None:
        """
        Open a cell and cascade through empty neighbors.

        The opened matrix doubles as the visited set, so a cell is only
        ever processed once. Opening a mine loses the game but the
        cascade already under way still completes. Flags inside an
        empty region do not stop the cascade.
        """
        grid = self.grid
        stack = [(x, y)]
        while stack:
            current_x, current_y = stack.pop()
            if grid.is_opened(current_x, current_y):
                continue
            grid.mark_opened(current_x, current_y)

            cell = grid.cell(current_x, current_y)
            if cell.is_mine:
                self._lose(current_x, current_y)
            elif cell.is_empty:
                for neighbor in grid.neighbors(current_x, current_y):
                    if not grid.is_opened(*neighbor):
                        stack.append(neighbor)

        if check_win:
            self.check_win()

    def _chord(self, x: int, y: int) -> None:
        """
        Open the closed, unflagged neighbors of a satisfied number.

        The win check waits until every neighbor is open so that a mine
        opened by a misplaced flag always ends in a loss.
        """
        grid = self.grid
        cell = grid.cell(x, y)
        if grid.count_adjacent_flags(x, y) != cell.count:
            return
        for neighbor_x, neighbor_y in grid.neighbors(x, y):
            if grid.is_flagged(neighbor_x, neighbor_y):
                continue
            if grid.is_opened(neighbor_x, neighbor_y):
                continue
            self._open_cell_inner(neighbor_x, neighbor_y, check_win=False)
        self.check_win()

    # ========================================================================
    # Game State Transitions (Low-level)
    # ========================================================================

    def _lose(self, x: int, y: int) -> None:
        if self._game_over:
            return
        self._game_over = True
        self._timer.freeze()
        logger.info("Mine opened at (%d, %d), game lost", x, y)

    def check_win(self) -> bool:
        """
        Check if every non-mine cell is opened and mark the game won.

        A lost board never turns into a won one.

        Returns:
            True if the game is won.
        """
        if self._game_over:
            return False
        if not self._game_won and self.grid.all_safe_cells_opened():
            self._game_won = True
            self._timer.freeze()
            logger.info(
                "Board cleared in %.1f seconds", self._timer.elapsed_time
            )
        return self._game_won

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open_cell(self, x: int, y: int) -> bool:
        """
        Open a cell in response to a primary click.

        Clicking an opened number whose flagged-neighbor count matches the
        number chords: every closed, unflagged neighbor is opened too. The
        timer starts on the first accepted click, even when a chord is
        refused.

        Args:
            x: Column to open.
            y: Row to open.

        Returns:
            True if the click was accepted, False if the position is off the
            board, flagged, or the game is over.
        """
        if not self._can_act(x, y):
            return False
        if self.grid.is_flagged(x, y):
            return False

        self._timer.start()
        if self.grid.is_opened(x, y) and self.grid.cell(x, y).is_number:
            self._chord(x, y)

        self._open_cell_inner(x, y)
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell in response to a secondary click.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._can_act(x, y):
            return False
        if self.grid.is_opened(x, y):
            return False
        self.grid.toggle_flagged(x, y)
        return True

    def _can_act(self, x: int, y: int) -> bool:
        """Check that the game accepts input at this position."""
        if not self.is_playing:
            return False
        if not self.grid.is_valid_position(x, y):
            logger.debug("Rejected out-of-bounds position (%s, %s)", x, y)
            return False
        return True

    def reset(self) -> None:
        """Discard the board and start a new game at the current size."""
        self.config = BoardConfig.for_size(self.config.size)
        self.grid = generate(self.config.size, self.config.num_mines, self.rng)
        self._game_over = False
        self._game_won = False
        self._timer = GameTimer(clock=self.clock)

    def resize_and_reset(self, new_size: int) -> None:
        """Switch to a new board size and start a new game."""
        self.config = BoardConfig.for_size(new_size)
        self.reset()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def game_over(self) -> bool:
        """True once a mine has been opened."""
        return self._game_over

    @property
    def game_won(self) -> bool:
        """True once every non-mine cell has been opened."""
        return self._game_won

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._game_over:
            return GameState.LOST
        if self._game_won:
            return GameState.WON
        return GameState.IN_PROGRESS

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def start_time(self) -> Optional[float]:
        """Clock reading of the first accepted click, or None."""
        return self._timer.start_time

    @property
    def elapsed_time(self) -> float:
        """Last sampled play time in seconds."""
        return self._timer.elapsed_time

    def update_timer(self) -> float:
        """Sample the timer; it stays frozen once the game is over."""
        return self._timer.sample()

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.grid.is_valid_position(x, y):
            return None
        return self.grid.cell(x, y)

    def cell_view(self, x: int, y: int) -> Tuple[bool, bool, Cell]:
        """
        Get everything a renderer needs for one cell.

        Returns:
            Tuple of (opened, flagged, cell content).
        """
        return (
            self.grid.is_opened(x, y),
            self.grid.is_flagged(x, y),
            self.grid.cell(x, y),
        )

    def cell_state(self, x: int, y: int) -> CellState:
        """Visual state of a cell."""
        opened, flagged, _ = self.cell_view(x, y)
        if opened:
            return CellState.REVEALED
        if flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array indexed [y, x] where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for x, y in self.grid.positions():
            opened, flagged, cell = self.cell_view(x, y)
            obs[y, x] = cell.to_observation(opened, flagged)
        return obs

    def hidden_cells(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be opened.

        Returns:
            List of (x, y) positions neither opened nor flagged.
        """
        return [
            (x, y) for x, y in self.grid.positions()
            if not self.grid.is_opened(x, y) and not self.grid.is_flagged(x, y)
        ]
