"""
Models for the Tic Tac Toe engine (FastAPI).
"""

from enum import Enum
from typing import List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .config import CELL_COUNT, EMPTY

Cell = Literal["", "X", "O"]
Outcome = Literal["", "X", "O", "draw"]


class PlayerColor(str, Enum):
    X = "X"
    O = "O"

    def opponent(self) -> "PlayerColor":
        return PlayerColor.O if self is PlayerColor.X else PlayerColor.X


class ActiveGame(BaseModel):
    """In-memory object for the live game. Only the engine holds one."""
    board: List[Cell] = Field(default_factory=lambda: [EMPTY] * CELL_COUNT)
    current_player: PlayerColor = PlayerColor.X
    game_over: bool = False
    winner: Outcome = EMPTY


# PUBLIC_INTERFACE
class GameState(BaseModel):
    """Read-only snapshot of the game after an operation."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    board: Tuple[Cell, ...] = Field(
        ..., min_length=CELL_COUNT, max_length=CELL_COUNT,
        description="9 cells in row-major order, values are 'X', 'O', or ''.",
    )
    current_player: PlayerColor = Field(..., description="Symbol that moves next.")
    game_over: bool = Field(..., description="Whether the game is over.")
    winner: Outcome = Field(EMPTY, description="'X', 'O', 'draw', or '' while the game is running.")

    @classmethod
    def from_game(cls, game: ActiveGame) -> "GameState":
        return cls(
            board=tuple(game.board),
            current_player=game.current_player,
            game_over=game.game_over,
            winner=game.winner,
        )


# PUBLIC_INTERFACE
class MoveRequest(BaseModel):
    """Make a move in the current game."""
    index: int = Field(..., strict=True, description="Cell index (0-8), row-major.")


# PUBLIC_INTERFACE
class ErrorResponse(BaseModel):
    """Body returned for a rejected move."""
    detail: str
    error: str
