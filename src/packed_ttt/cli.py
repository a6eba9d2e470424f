from __future__ import annotations

import argparse
import logging
from typing import Optional

from .board import PLAYER_B, deserialize_board, empty_cells
from .config import MODES, load_config
from .play import play_game
from .render import MARKER_THEMES, render_board, render_cells
from .rules import get_winner, is_draw, is_valid_state
from .solver import find_best_move, move_scores


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Packed-board tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves (play --epsilon)")

    # play
    p_play = sub.add_parser("play", help="Play an interactive game in the terminal")
    p_play.add_argument("--mode", choices=MODES, default=None,
                        help="hvc: human vs computer, hvh: two humans, cvc: computer vs computer")
    p_play.add_argument("--markers", choices=sorted(MARKER_THEMES), default=None,
                        help="Marker theme for rendering")
    p_play.add_argument("--computer-first", action="store_true", default=None,
                        help="Computer plays x and opens (hvc only)")
    p_play.add_argument("--no-clear", dest="clear_screen", action="store_false", default=None,
                        help="Do not clear the screen between moves")
    p_play.add_argument("--epsilon", type=float, default=None,
                        help="Probability the computer plays a random move (0 = unbeatable)")

    # best move
    p_best = sub.add_parser("best-move", help="Optimal move for a player on a board")
    p_best.add_argument("--board", help="Board string, e.g., 110000000 (omit with --stdin)")
    p_best.add_argument("--player", type=int, choices=[1, 2], default=PLAYER_B,
                        help="Maximizing player (default: 2)")
    p_best.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    # status
    p_stat = sub.add_parser("status", help="Winner/draw status of a board")
    p_stat.add_argument("--board", required=True, help="Board string, e.g., 111220000")

    # show
    p_show = sub.add_parser("show", help="Render a board")
    p_show.add_argument("--board", required=True, help="Board string, e.g., 120000000")
    p_show.add_argument("--markers", choices=sorted(MARKER_THEMES), default="classic")
    p_show.add_argument("--cells", action="store_true", help="List each cell instead of the grid")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: Optional[str]) -> Optional[bytearray]:
    try:
        b = deserialize_board(raw or "")
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("packed-tictactoe"))
        except PackageNotFoundError:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        try:
            cfg = load_config(
                mode=ns.mode,
                markers=ns.markers,
                computer_first=ns.computer_first,
                clear_screen=ns.clear_screen,
                epsilon=ns.epsilon,
                seed=ns.seed,
            )
        except ValueError as e:
            logging.error("%s", e)
            return 2
        logging.debug("config=%s", cfg)
        try:
            play_game(cfg)
        except (EOFError, KeyboardInterrupt):
            logging.info("Game aborted.")
            return 1
        return 0

    if ns.cmd == "best-move":
        if ns.stdin:
            import csv as _csv
            import sys as _sys

            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "player", "best_move"])
            for line in _sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    b = deserialize_board(raw)
                except ValueError:
                    continue
                if not is_valid_state(b) or get_winner(b) != 0 or not empty_cells(b):
                    continue
                w.writerow([raw, ns.player, find_best_move(b, ns.player)])
            return 0
        b = _parse_board(ns.board)
        if b is None:
            return 2
        if get_winner(b) != 0 or is_draw(b):
            logging.error("Game is already over on this board.")
            return 2
        scores = move_scores(b, ns.player)
        # first maximum, same tie-break as find_best_move
        best = scores.index(max(s for s in scores if s is not None))
        logging.info("best=%d scores=%s", best, scores)
        return 0

    if ns.cmd == "status":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        logging.info(
            "winner=%d draw=%s to_fill=%d",
            get_winner(b),
            is_draw(b),
            len(empty_cells(b)),
        )
        return 0

    if ns.cmd == "show":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        markers = MARKER_THEMES[ns.markers]
        if ns.cells:
            for line in render_cells(b, markers):
                print(line)
        else:
            print(render_board(b, markers))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
