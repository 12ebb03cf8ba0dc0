"""
In-memory owner of the single live game.
"""

import logging
import threading

from .errors import MoveRejected
from .game_logic import make_move
from .models import ActiveGame, GameState

logger = logging.getLogger(__name__)


class GameEngine:
    """Holds the one current game; every entry point returns a snapshot."""

    def __init__(self):
        self._game = ActiveGame()
        self._lock = threading.Lock()

    # PUBLIC_INTERFACE
    def new_game(self) -> GameState:
        """Replace the current game with a fresh one, X to move."""
        with self._lock:
            self._game = ActiveGame()
            logger.info("New game started")
            return GameState.from_game(self._game)

    # PUBLIC_INTERFACE
    def reset(self) -> GameState:
        """Same effect as new_game; backs the presentation layer's reset button."""
        return self.new_game()

    # PUBLIC_INTERFACE
    def submit_move(self, index) -> GameState:
        """
        Play the current player's symbol at `index`.
        Raises InvalidInput, GameAlreadyOver or CellOccupied without changing state.
        """
        with self._lock:
            player = self._game.current_player
            try:
                make_move(self._game, index)
            except MoveRejected as e:
                logger.info("Rejected move %r by %s: %s", index, player.value, e.code)
                raise
            logger.debug("%s played cell %d", player.value, index)
            if self._game.game_over:
                logger.info("Game over, winner: %s", self._game.winner)
            return GameState.from_game(self._game)

    # PUBLIC_INTERFACE
    def current_state(self) -> GameState:
        with self._lock:
            return GameState.from_game(self._game)


ENGINE = GameEngine()
