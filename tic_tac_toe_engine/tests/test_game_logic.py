import pytest
from pydantic import ValidationError

from src.api.errors import CellOccupied, GameAlreadyOver, InvalidInput
from src.api.game_logic import WINNING_LINES, has_line, is_full, make_move, validate_move
from src.api.models import ActiveGame, PlayerColor


def test_winning_lines():
    assert set(WINNING_LINES) == {
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    }


@pytest.mark.parametrize("line", WINNING_LINES)
def test_has_line_only_for_owner(line):
    board = [""] * 9
    for i in line:
        board[i] = "O"
    assert has_line(board, "O")
    assert not has_line(board, "X")


def test_has_line_needs_three():
    board = ["X", "X", "", "O", "O", "", "", "", ""]
    assert not has_line(board, "X")
    assert not has_line(board, "O")


def test_is_full():
    assert not is_full([""] * 9)
    assert not is_full(["X", "O"] * 4 + [""])
    assert is_full(["X", "O", "X", "X", "O", "O", "O", "X", "X"])


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 4.0, None, True])
def test_validate_move_rejects_bad_index(index):
    with pytest.raises(InvalidInput):
        validate_move(ActiveGame(), index)


def test_validate_move_checks_range_before_game_over():
    game = ActiveGame(game_over=True, winner="X")
    with pytest.raises(InvalidInput):
        validate_move(game, 9)
    with pytest.raises(GameAlreadyOver):
        validate_move(game, 0)


def test_validate_move_checks_game_over_before_occupied():
    game = ActiveGame(board=["X"] + [""] * 8, game_over=True, winner="draw")
    with pytest.raises(GameAlreadyOver):
        validate_move(game, 0)


def test_active_game_rejects_unknown_markers():
    with pytest.raises(ValidationError):
        ActiveGame(winner="Y")
    with pytest.raises(ValidationError):
        ActiveGame(board=["Z"] + [""] * 8)


def test_make_move_places_symbol_and_flips_player():
    game = make_move(ActiveGame(), 4)
    assert game.board[4] == "X"
    assert game.current_player is PlayerColor.O
    assert not game.game_over
    assert game.winner == ""


def test_make_move_occupied_leaves_game_untouched():
    game = make_move(ActiveGame(), 2)
    before = game.model_copy(deep=True)
    with pytest.raises(CellOccupied) as exc:
        make_move(game, 2)
    assert exc.value.index == 2
    assert game == before


def test_make_move_win_keeps_mover_as_current_player():
    game = ActiveGame()
    for index in (0, 3, 1, 4, 2):
        make_move(game, index)
    assert game.game_over
    assert game.winner == "X"
    assert game.current_player is PlayerColor.X


def test_make_move_draw():
    game = ActiveGame()
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        make_move(game, index)
    assert game.game_over
    assert game.winner == "draw"
