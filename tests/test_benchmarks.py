from packed_ttt.board import deserialize_board
from packed_ttt.solver import find_best_move, last_search


def test_benchmark_find_best_move_after_two_plies(benchmark):
    board = deserialize_board("100020000")

    best = benchmark(find_best_move, board, 1)
    assert best == 1
    assert last_search.nodes > 0
    assert bytes(board) == bytes(deserialize_board("100020000"))
