"""
Interactive driving loop: numpad input, screen clearing, turn order.

Numpad layout maps onto board indices row by row:
  7 8 9      0 1 2
  4 5 6  ->  3 4 5
  1 2 3      6 7 8
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import numpy as np

from .board import EMPTY, PLAYER_A, PLAYER_B, get_state, new_board, set_state
from .config import GameConfig
from .render import render_board, render_numpad_help, to_marker
from .rules import is_draw, is_winner
from .solver import choose_move

NUMPAD_TO_INDEX = {7: 0, 8: 1, 9: 2, 4: 3, 5: 4, 6: 5, 1: 6, 2: 7, 3: 8}

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class InvalidMoveError(ValueError):
    """Raised for player input that cannot be applied to the board."""


def parse_move(text: str, board: bytearray) -> int:
    raw = text.strip()
    try:
        key = int(raw)
    except ValueError:
        raise InvalidMoveError(f"Not a number: {raw!r}") from None
    if key not in NUMPAD_TO_INDEX:
        raise InvalidMoveError(f"Key out of range: {key}. Use 1-9.")
    index = NUMPAD_TO_INDEX[key]
    if get_state(board, index) != EMPTY:
        raise InvalidMoveError(f"Cell {key} is already taken.")
    return index


def clear_screen(output_fn: OutputFn) -> None:
    output_fn(CLEAR_SEQUENCE)


class GameSession:
    """One game from an empty board to a win or a draw.

    Player A always moves first. In "hvc" mode the computer takes player B,
    or player A when ``config.computer_first`` is set.
    """

    def __init__(
        self,
        config: GameConfig,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.board = new_board()
        self.computer: Dict[int, bool] = self._seats(config)

    @staticmethod
    def _seats(config: GameConfig) -> Dict[int, bool]:
        if config.mode == "hvh":
            return {PLAYER_A: False, PLAYER_B: False}
        if config.mode == "cvc":
            return {PLAYER_A: True, PLAYER_B: True}
        computer_mark = PLAYER_A if config.computer_first else PLAYER_B
        return {PLAYER_A: computer_mark == PLAYER_A, PLAYER_B: computer_mark == PLAYER_B}

    def marker(self, mark: int) -> str:
        return to_marker(mark, self.config.marker_table)

    def show(self) -> None:
        if self.config.clear_screen:
            clear_screen(self.output_fn)
        self.output_fn(render_board(self.board, self.config.marker_table))

    def status(self) -> Optional[int]:
        """Winning mark, 0 for a draw, None while the game goes on."""
        for mark in (PLAYER_A, PLAYER_B):
            if is_winner(self.board, mark):
                return mark
        if is_draw(self.board):
            return 0
        return None

    def human_move(self, mark: int) -> int:
        while True:
            text = self.input_fn(f"Player {self.marker(mark)}, choose a cell (1-9): ")
            try:
                return parse_move(text, self.board)
            except InvalidMoveError as e:
                self.output_fn(str(e))

    def computer_move(self, mark: int) -> int:
        return choose_move(self.board, mark, epsilon=self.config.epsilon, rng=self.rng)

    def run(self) -> int:
        if not all(self.computer.values()):
            self.output_fn(render_numpad_help())
            self.input_fn("Press ENTER to begin")
        mark = PLAYER_A
        result = self.status()
        while result is None:
            self.show()
            if self.computer[mark]:
                index = self.computer_move(mark)
            else:
                index = self.human_move(mark)
            set_state(self.board, index, mark)
            logging.debug("mark=%d played index=%d", mark, index)
            mark = PLAYER_B if mark == PLAYER_A else PLAYER_A
            result = self.status()
        self.show()
        if result == 0:
            self.output_fn("It's a draw!")
        else:
            self.output_fn(f"{self.marker(result)} wins!")
        logging.info("game over: winner=%d", result)
        return result


def play_game(config: GameConfig, input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    return GameSession(config, input_fn=input_fn, output_fn=output_fn).run()
