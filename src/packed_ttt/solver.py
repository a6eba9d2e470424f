"""
Exhaustive minimax over the packed board, from the computer's perspective.
Scoring:
- +1 if the computer (maximizing side) owns a line, -1 if the opponent does, 0 on a draw.
- Full-depth search, no pruning and no memoization; the tree is at most 9 plies deep.
- Moves are tried in place and undone before returning, so the caller's board is unchanged.
Tie-break policy:
- find_best_move scans empty cells in ascending order and keeps the first strict maximum.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .board import EMPTY, PLAYER_B, empty_cells, opponent, set_state
from .rules import is_winner


@dataclass
class SearchStats:
    nodes: int = 0


# nodes visited by the most recent top-level search
last_search = SearchStats()


def minimax(board: bytearray, maximizing: bool, player: int = PLAYER_B) -> int:
    last_search.nodes += 1
    other = opponent(player)
    if is_winner(board, player):
        return 1
    if is_winner(board, other):
        return -1
    moves = empty_cells(board)
    if not moves:
        return 0
    mover = player if maximizing else other
    scores = []
    for mv in moves:
        set_state(board, mv, mover)
        scores.append(minimax(board, not maximizing, player))
        set_state(board, mv, EMPTY)
    return max(scores) if maximizing else min(scores)


def move_scores(board: bytearray, player: int = PLAYER_B) -> List[Optional[int]]:
    """Score every cell for ``player`` to move; occupied cells get None."""
    scores: List[Optional[int]] = [None] * 9
    last_search.nodes = 0
    for mv in empty_cells(board):
        set_state(board, mv, player)
        scores[mv] = minimax(board, False, player)
        set_state(board, mv, EMPTY)
    return scores


def find_best_move(board: bytearray, player: int = PLAYER_B) -> int:
    moves = empty_cells(board)
    if not moves:
        raise ValueError("find_best_move called on a full board")
    last_search.nodes = 0
    best_move = moves[0]
    best_score: Optional[int] = None
    for mv in moves:
        set_state(board, mv, player)
        score = minimax(board, False, player)
        set_state(board, mv, EMPTY)
        if best_score is None or score > best_score:
            best_score = score
            best_move = mv
    logging.debug(
        "player=%d evaluated %d positions, best=%d score=%s",
        player, last_search.nodes, best_move, best_score,
    )
    return best_move


def choose_move(
    board: bytearray,
    player: int = PLAYER_B,
    epsilon: float = 0.0,
    rng: np.random.Generator | None = None,
) -> int:
    """Epsilon-greedy move: random empty cell with probability ``epsilon``, else optimal."""
    if epsilon < 0.0 or epsilon > 1.0:
        raise ValueError(f"Epsilon out of range [0,1]: {epsilon}")
    if epsilon > 0.0:
        if rng is None:
            rng = np.random.default_rng()
        if rng.random() < epsilon:
            moves = empty_cells(board)
            if not moves:
                raise ValueError("choose_move called on a full board")
            mv = int(rng.choice(moves))
            logging.debug("player=%d random move=%d", player, mv)
            return mv
    return find_best_move(board, player)
