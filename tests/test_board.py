import pytest

from packed_ttt.board import (
    board_from_cells,
    board_to_cells,
    deserialize_board,
    empty_cells,
    get_state,
    is_full,
    iter_states,
    new_board,
    opponent,
    packed_value,
    serialize_board,
    set_state,
)


def test_new_board_is_three_zero_bytes():
    b = new_board()
    assert isinstance(b, bytearray)
    assert bytes(b) == b"\x00\x00\x00"
    assert all(v == 0 for _, v in iter_states(b))


def test_bit_layout_two_bits_per_cell_four_cells_per_byte():
    b = new_board()
    set_state(b, 0, 2)
    set_state(b, 1, 1)
    set_state(b, 2, 0)
    assert b[0] == 0b00000110
    set_state(b, 7, 1)  # byte 1, offset 6
    assert b[1] == 0b01000000
    set_state(b, 8, 2)  # byte 2, offset 0
    assert b[2] == 0b00000010
    assert packed_value(b) == 2 | (1 << 2) | (1 << 14) | (2 << 16)


def test_overwrite_only_touches_own_slot():
    b = board_from_cells([1, 2, 1, 2, 0, 2, 1, 2, 1])
    set_state(b, 4, 1)
    set_state(b, 4, 2)
    assert get_state(b, 4) == 2
    set_state(b, 4, 0)
    assert board_to_cells(b) == [1, 2, 1, 2, 0, 2, 1, 2, 1]


@pytest.mark.parametrize("idx", [-1, 9, 11, 12])
def test_out_of_range_index_is_rejected(idx: int):
    b = new_board()
    with pytest.raises(IndexError):
        set_state(b, idx, 1)
    with pytest.raises(IndexError):
        get_state(b, idx)


def test_iter_states_in_index_order():
    b = deserialize_board("120000002")
    assert list(iter_states(b)) == [(0, 1), (1, 2), (2, 0), (3, 0), (4, 0), (5, 0), (6, 0), (7, 0), (8, 2)]


def test_empty_cells_and_full():
    b = deserialize_board("120000002")
    assert empty_cells(b) == [2, 3, 4, 5, 6, 7]
    assert not is_full(b)
    assert is_full(deserialize_board("112221121"))


def test_serialize_roundtrip_and_errors():
    assert serialize_board(deserialize_board("100020200")) == "100020200"
    for bad in ["abc", "01234567", "0123456789", "12345678x", "000000003"]:
        with pytest.raises(ValueError):
            deserialize_board(bad)


def test_opponent():
    assert opponent(1) == 2
    assert opponent(2) == 1
