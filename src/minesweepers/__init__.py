"""
Minesweepers game module.

Provides the board engine: generation, cascading reveal, chording,
flagging and win/loss detection, plus a terminal front-end.
"""
from .cell import Cell, CellKind, CellState
from .grid import Grid
from .generator import GenerationError, generate, grid_from_mines
from .timer import GameTimer
from .board import (
    Board,
    BoardConfig,
    GameState,
    mines_for_size,
    MIN_SIZE,
    MAX_SIZE,
    DEFAULT_SIZE,
    DEFAULT_MINES,
)

__all__ = [
    "Cell",
    "CellKind",
    "CellState",
    "Grid",
    "GenerationError",
    "generate",
    "grid_from_mines",
    "GameTimer",
    "Board",
    "BoardConfig",
    "GameState",
    "mines_for_size",
    "MIN_SIZE",
    "MAX_SIZE",
    "DEFAULT_SIZE",
    "DEFAULT_MINES",
]
