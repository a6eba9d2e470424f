import pytest

from packed_ttt.board import board_from_cells, deserialize_board
from packed_ttt.rules import (
    WIN_PATTERNS,
    get_piece_counts,
    get_winner,
    is_draw,
    is_valid_state,
    is_winner,
)


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
@pytest.mark.parametrize("player", [1, 2])
def test_each_triple_wins(pattern, player):
    cells = [0] * 9
    for i in pattern:
        cells[i] = player
    b = board_from_cells(cells)
    assert is_winner(b, player)
    assert not is_winner(b, 3 - player)
    assert get_winner(b) == player


def test_two_of_three_is_not_a_win():
    b = deserialize_board("110220000")
    assert not is_winner(b, 1)
    assert not is_winner(b, 2)
    assert get_winner(b) == 0


def test_mixed_line_is_not_a_win():
    b = deserialize_board("121000000")
    assert not is_winner(b, 1)
    assert not is_winner(b, 2)


def test_full_board_without_line_is_draw():
    b = deserialize_board("112221121")
    assert get_winner(b) == 0
    assert is_draw(b)


def test_full_board_with_line_is_win_not_draw():
    b = deserialize_board("111221212")
    assert is_winner(b, 1)
    assert not is_draw(b)


def test_partial_board_is_not_draw():
    assert not is_draw(deserialize_board("000000000"))
    assert not is_draw(deserialize_board("112221120"))


def test_piece_counts_and_validity():
    assert get_piece_counts(deserialize_board("120010000")) == (2, 1)
    assert is_valid_state(deserialize_board("000000000"))
    assert is_valid_state(deserialize_board("120000000"))
    # player B may open
    assert is_valid_state(deserialize_board("200000000"))
    assert not is_valid_state(deserialize_board("110000000"))
    # both players owning a line is unreachable
    assert not is_valid_state(deserialize_board("111222000"))


@pytest.mark.parametrize("raw, valid", [
    ("111220000", True),   # x won on its own move
    ("111220200", True),   # o opened, x won last
    ("222110000", True),
    ("222110100", True),   # x opened, o won last
    ("111220220", False),  # o has moved after x completed the row
    ("222110110", False),  # x has moved after o completed the row
    ("111222000", False),
])
def test_winner_must_have_moved_last(raw: str, valid: bool):
    assert is_valid_state(deserialize_board(raw)) is valid
