"""
Text rendering of a board for the terminal front-end.
"""
from .board import Board
from .cell import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION


HIDDEN_SYMBOL = "."
FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"
EMPTY_SYMBOL = " "

GAME_OVER_BANNER = "*** GAME OVER ***"
CLEARED_BANNER = "*** CLEARED! ***"


def _symbol(value: int) -> str:
    if value == HIDDEN_OBSERVATION:
        return HIDDEN_SYMBOL
    if value == FLAGGED_OBSERVATION:
        return FLAG_SYMBOL
    if value == MINE_OBSERVATION:
        return MINE_SYMBOL
    if value == 0:
        return EMPTY_SYMBOL
    return str(value)


def render_board(board: Board) -> str:
    """
    Render board as ASCII string.

    Columns (x) run left to right and rows (y) top to bottom, both
    labelled. Once the game is lost every mine is shown.
    """
    obs = board.get_observation()
    width = len(str(board.size - 1))

    header = " " * (width + 1) + " ".join(
        str(x).rjust(width) for x in range(board.size)
    )
    lines = [header]
    for y in range(board.size):
        symbols = []
        for x in range(board.size):
            value = int(obs[y, x])
            if board.is_lost and board.get_cell(x, y).is_mine:
                value = MINE_OBSERVATION
            symbols.append(_symbol(value).rjust(width))
        lines.append(str(y).rjust(width) + " " + " ".join(symbols))

    return "\n".join(lines)


def render_status(board: Board) -> str:
    """Elapsed time line plus the end-of-game banner, if any."""
    status = f"Time: {board.elapsed_time:.1f} s"
    if board.is_lost:
        status += "\n" + GAME_OVER_BANNER
    elif board.is_won:
        status += "\n" + CLEARED_BANNER
    return status
