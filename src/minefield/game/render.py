"""
Text rendering of a Minefield board.
"""
from .board import Board
from ..observation import HIDDEN_OBSERVATION, MINE_OBSERVATION

HIDDEN_SYMBOL = "H"
MINE_SYMBOL = "X"


def render_board(board: Board) -> str:
    """
    Render board as text, one line per row.

    Hidden cells show ``H``, revealed mines ``X`` and revealed safe
    cells their adjacent mine count.
    """
    lines = []
    obs = board.get_observation()

    for row in range(board.rows):
        symbols = []
        for col in range(board.cols):
            val = obs[row, col]
            if val == HIDDEN_OBSERVATION:
                symbols.append(HIDDEN_SYMBOL)
            elif val == MINE_OBSERVATION:
                symbols.append(MINE_SYMBOL)
            else:
                symbols.append(str(val))
        lines.append(" ".join(symbols))

    return "\n".join(lines)
