"""
Text rendering of the packed board.

Markers are a presentation table {state: symbol}; the game logic never looks at them.
"""
from typing import Dict, List

from .board import iter_states

MarkerTable = Dict[int, str]

MARKER_THEMES: Dict[str, MarkerTable] = {
    'classic': {0: ' ', 1: 'x', 2: 'o'},
    'underscore': {0: '_', 1: 'x', 2: 'o'},
}

ROW_SEPARATOR = '-+-+-'


def to_marker(state: int, markers: MarkerTable) -> str:
    return markers.get(state, markers[0])


def render_board(board: bytearray, markers: MarkerTable = MARKER_THEMES['classic']) -> str:
    symbols = [to_marker(v, markers) for _, v in iter_states(board)]
    rows = ['|'.join(symbols[r * 3:r * 3 + 3]) for r in range(3)]
    return ('\n' + ROW_SEPARATOR + '\n').join(rows)


def render_cells(board: bytearray, markers: MarkerTable = MARKER_THEMES['classic']) -> List[str]:
    return [f"i: {i} state: {to_marker(v, markers)}" for i, v in iter_states(board)]


def render_numpad_help() -> str:
    rows = ['7|8|9', '4|5|6', '1|2|3']
    return ('\n' + ROW_SEPARATOR + '\n').join(rows)
