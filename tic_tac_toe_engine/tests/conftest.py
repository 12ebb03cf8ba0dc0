import pytest
from fastapi.testclient import TestClient

from src.api.engine import ENGINE, GameEngine
from src.api.main import app


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def client():
    ENGINE.new_game()
    with TestClient(app) as c:
        yield c
    ENGINE.new_game()


@pytest.fixture
def play():
    """Submit moves in order on an engine and return the last snapshot."""
    def _play(engine, moves):
        state = engine.current_state()
        for index in moves:
            state = engine.submit_move(index)
        return state
    return _play
