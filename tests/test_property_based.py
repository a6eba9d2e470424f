from typing import List, Tuple

from hypothesis import given, strategies as st

from packed_ttt.board import board_from_cells, board_to_cells, get_state, new_board, set_state
from packed_ttt.rules import WIN_PATTERNS, get_winner, is_draw, is_winner

cells_st = st.lists(st.integers(min_value=0, max_value=2), min_size=9, max_size=9)


def _owns_line(board: List[int], p: int) -> bool:
    return any(all(board[i] == p for i in pat) for pat in WIN_PATTERNS)


@given(st.lists(st.tuples(st.integers(min_value=0, max_value=8), st.integers(min_value=1, max_value=2)), max_size=30))
def test_last_write_wins_and_no_interference(writes: List[Tuple[int, int]]):
    b = new_board()
    expected = [0] * 9
    for idx, state in writes:
        set_state(b, idx, state)
        expected[idx] = state
    assert board_to_cells(b) == expected


@given(cells_st, st.integers(min_value=0, max_value=8), st.integers(min_value=0, max_value=2))
def test_set_leaves_other_cells_untouched(cells: List[int], idx: int, state: int):
    b = board_from_cells(cells)
    set_state(b, idx, state)
    assert get_state(b, idx) == state
    for i in range(9):
        if i != idx:
            assert get_state(b, i) == cells[i]


@given(cells_st)
def test_winner_matches_cell_by_cell_check(cells: List[int]):
    b = board_from_cells(cells)
    for p in (1, 2):
        assert is_winner(b, p) == _owns_line(cells, p)
    if get_winner(b) != 0:
        assert _owns_line(cells, get_winner(b))


@given(cells_st)
def test_draw_excludes_wins(cells: List[int]):
    b = board_from_cells(cells)
    if is_winner(b, 1) or is_winner(b, 2):
        assert not is_draw(b)
    assert is_draw(b) == (0 not in cells and not _owns_line(cells, 1) and not _owns_line(cells, 2))
