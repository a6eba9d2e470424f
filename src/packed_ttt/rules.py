"""
Rules: winner/draw checks and state validity over the packed board.
Notes:
- A line is owned by a player when its three 2-bit fields all equal that player's mark.
- Each line is checked with one mask and one compare on the packed integer.
- Draw means full board with no line owned; a full board with a line is a win.
"""
from __future__ import annotations

from typing import List, Tuple

from .board import CELL_MASK, CELLS, PLAYER_A, PLAYER_B, is_full, packed_value

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6]
]


def _line_masks(pattern: List[int]) -> Tuple[int, int]:
    mask = 0
    ones = 0
    for i in pattern:
        mask |= CELL_MASK << (2 * i)
        ones |= 1 << (2 * i)
    return mask, ones


# (mask, ones) per line; a line is owned by p when value & mask == p * ones
LINE_MASKS = [_line_masks(p) for p in WIN_PATTERNS]


def is_winner(board: bytearray, player: int) -> bool:
    value = packed_value(board)
    return any(value & mask == player * ones for mask, ones in LINE_MASKS)


def get_winner(board: bytearray) -> int:
    for player in (PLAYER_A, PLAYER_B):
        if is_winner(board, player):
            return player
    return 0


def is_draw(board: bytearray) -> bool:
    if is_winner(board, PLAYER_A) or is_winner(board, PLAYER_B):
        return False
    return is_full(board)


def get_piece_counts(board: bytearray) -> Tuple[int, int]:
    a = b = 0
    value = packed_value(board)
    for i in range(CELLS):
        v = (value >> (2 * i)) & CELL_MASK
        if v == PLAYER_A:
            a += 1
        elif v == PLAYER_B:
            b += 1
    return a, b


def is_valid_state(board: bytearray) -> bool:
    """Check that a board could come from alternating play.

    Either side may open, so counts may differ by one in either direction.
    At most one player can own a line, and the owner must have moved last,
    so its count is not behind the other side's.
    """
    a, b = get_piece_counts(board)
    if abs(a - b) > 1:
        return False
    a_wins = is_winner(board, PLAYER_A)
    b_wins = is_winner(board, PLAYER_B)
    if a_wins and b_wins:
        return False
    if a_wins and a < b:
        return False
    if b_wins and b < a:
        return False
    return True

