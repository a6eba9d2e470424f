#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from packed_ttt.board import deserialize_board
from packed_ttt.solver import find_best_move, last_search


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    boards: Tuple[str, ...] = ("000000000", "100000000", "100020000", "120010000")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Time find_best_move on a few openings")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    args = ap.parse_args(argv)
    cfg = Config(repeats=args.repeats)

    for raw in cfg.boards:
        times: List[float] = []
        best = -1
        for _ in range(cfg.repeats):
            board = deserialize_board(raw)
            t0 = time.perf_counter()
            best = find_best_move(board)
            times.append(time.perf_counter() - t0)
        m, h = ci95(times)
        print(f"{raw}: best={best} nodes={last_search.nodes} mean={m:.4f}s ± {h:.4f}s (95% CI)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
