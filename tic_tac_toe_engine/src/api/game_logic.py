"""
Game logic functions for Tic Tac Toe (move validation, move making, win/draw detection).
"""

from typing import Sequence, Tuple

from .config import BOARD_SIZE, CELL_COUNT, DRAW, EMPTY
from .errors import CellOccupied, GameAlreadyOver, InvalidInput
from .models import ActiveGame


def _build_lines() -> Tuple[Tuple[int, ...], ...]:
    lines = []
    # rows and columns
    for i in range(BOARD_SIZE):
        lines.append(tuple(i * BOARD_SIZE + j for j in range(BOARD_SIZE)))
        lines.append(tuple(j * BOARD_SIZE + i for j in range(BOARD_SIZE)))
    # diagonals
    lines.append(tuple(i * (BOARD_SIZE + 1) for i in range(BOARD_SIZE)))
    lines.append(tuple((i + 1) * (BOARD_SIZE - 1) for i in range(BOARD_SIZE)))
    return tuple(lines)


WINNING_LINES = _build_lines()


# PUBLIC_INTERFACE
def has_line(board: Sequence[str], symbol: str) -> bool:
    """True if every cell of some winning line holds `symbol`."""
    return any(all(board[i] == symbol for i in line) for line in WINNING_LINES)


# PUBLIC_INTERFACE
def is_full(board: Sequence[str]) -> bool:
    return all(cell != EMPTY for cell in board)


# PUBLIC_INTERFACE
def validate_move(game: ActiveGame, index) -> None:
    """
    Raise the matching MoveRejected subclass if `index` cannot be played.
    Checks run in order: index range, game over, occupied cell.
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELL_COUNT:
        raise InvalidInput(index)
    if game.game_over:
        raise GameAlreadyOver()
    if game.board[index] != EMPTY:
        raise CellOccupied(index)


# PUBLIC_INTERFACE
def make_move(game: ActiveGame, index: int) -> ActiveGame:
    """
    Place the current player's symbol at `index` and settle the outcome.
    Mutates and returns `game`, or raises MoveRejected without touching it.
    """
    validate_move(game, index)

    symbol = game.current_player.value
    game.board[index] = symbol

    if has_line(game.board, symbol):
        game.game_over = True
        game.winner = symbol
    elif is_full(game.board):
        game.game_over = True
        game.winner = DRAW
    else:
        game.current_player = game.current_player.opponent()

    return game
