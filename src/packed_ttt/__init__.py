"""packed_ttt package.

Packed 2-bit board storage, win/draw rules, full-depth minimax, and a small
terminal game and CLI built on them.

Convenience imports are exposed for common workflows.
"""

from .board import get_state, new_board, set_state
from .rules import is_draw, is_winner
from .solver import find_best_move, minimax

__all__ = [
    "new_board",
    "set_state",
    "get_state",
    "is_winner",
    "is_draw",
    "find_best_move",
    "minimax",
]
