"""
Packed board storage: 9 cells, 2 bits each, 4 cells per byte.
Notes:
- Cell states: 0=empty, 1=player A ("x"), 2=player B ("o"). Player A always opens.
- Cell i lives in byte i // 4 at bit offset (i % 4) * 2; 9 cells fit in 3 bytes.
- Read little-endian, the 3 bytes form one integer with cell i at bit 2 * i.
"""
from typing import Iterable, Iterator, List, Tuple

EMPTY = 0
PLAYER_A = 1
PLAYER_B = 2

CELLS = 9
CELLS_PER_UNIT = 4
UNITS = 3
CELL_MASK = 0b11


def new_board() -> bytearray:
    return bytearray(UNITS)


def _locate(index: int) -> Tuple[int, int]:
    if not 0 <= index < CELLS:
        raise IndexError(f"cell index out of range: {index}")
    return index // CELLS_PER_UNIT, (index % CELLS_PER_UNIT) * 2


def set_state(board: bytearray, index: int, state: int) -> None:
    unit, offset = _locate(index)
    # clear the 2-bit slot, then write the new state into it
    board[unit] &= ~(CELL_MASK << offset) & 0xFF
    board[unit] |= (state & CELL_MASK) << offset


def get_state(board: bytearray, index: int) -> int:
    unit, offset = _locate(index)
    return (board[unit] >> offset) & CELL_MASK


def iter_states(board: bytearray) -> Iterator[Tuple[int, int]]:
    for index in range(CELLS):
        yield index, get_state(board, index)


def empty_cells(board: bytearray) -> List[int]:
    return [i for i, v in iter_states(board) if v == EMPTY]


def is_full(board: bytearray) -> bool:
    return not empty_cells(board)


def packed_value(board: bytearray) -> int:
    return int.from_bytes(board, "little")


def opponent(mark: int) -> int:
    return PLAYER_B if mark == PLAYER_A else PLAYER_A


def board_from_cells(cells: Iterable[int]) -> bytearray:
    board = new_board()
    for index, state in enumerate(cells):
        set_state(board, index, state)
    return board


def board_to_cells(board: bytearray) -> List[int]:
    return [v for _, v in iter_states(board)]


def serialize_board(board: bytearray) -> str:
    return ''.join(str(v) for v in board_to_cells(board))


def deserialize_board(board_str: str) -> bytearray:
    raw = board_str.strip()
    if len(raw) != CELLS or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return board_from_cells(int(c) for c in raw)
