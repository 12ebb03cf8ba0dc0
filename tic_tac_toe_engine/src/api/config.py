"""
Configuration constants for the Tic Tac Toe engine and its API.
"""

import logging
import os

# Board geometry
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Cell and outcome markers
EMPTY = ""
DRAW = "draw"

# API metadata
API_TITLE = "Tic Tac Toe Engine"
API_DESCRIPTION = "Single-game Tic Tac Toe engine. Start a game, submit moves, reset, and query the current state."
API_VERSION = "1.0.0"
CORS_ORIGINS = ["*"]

# Development server
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a basic root handler for the service."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
