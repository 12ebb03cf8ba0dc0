"""
Errors raised when a move is rejected by the engine.
"""


class MoveRejected(ValueError):
    """Base class for rejected moves. The game state is left untouched."""
    code = "invalid_move"
    status_code = 400


# PUBLIC_INTERFACE
class InvalidInput(MoveRejected):
    """Move index is not an integer in [0, 8]."""
    code = "invalid_input"
    status_code = 400

    def __init__(self, index):
        super().__init__("Invalid move index.")
        self.index = index


# PUBLIC_INTERFACE
class GameAlreadyOver(MoveRejected):
    """Move submitted after a win or draw."""
    code = "game_over"
    status_code = 409

    def __init__(self):
        super().__init__("Game already finished.")


# PUBLIC_INTERFACE
class CellOccupied(MoveRejected):
    """Target cell already holds a symbol."""
    code = "cell_occupied"
    status_code = 409

    def __init__(self, index: int):
        super().__init__("Cell already occupied.")
        self.index = index
