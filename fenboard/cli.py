from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .core import ascii_board, occupied
from .errors import FENParseError
from .fen import parse_fen, STARTPOS_FEN

LOGGER = logging.getLogger("fenboard.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "WARNING"


def _default_log_level() -> str:
    level = os.environ.get("FENBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        print(
            f"warning: ignoring FENBOARD_LOG_LEVEL={level!r}, expected one of {', '.join(LOG_LEVELS)}",
            file=sys.stderr,
        )
        return DEFAULT_LOG_LEVEL
    return level


def _parse_or_report(fen: str):
    try:
        return parse_fen(fen)
    except FENParseError as exc:
        LOGGER.info("fen_rejected kind=%s", exc.kind.value)
        print(f"error: {exc}", file=sys.stderr)
        return None


def cmd_show(args: argparse.Namespace) -> int:
    board = _parse_or_report(args.fen)
    if board is None:
        return 2
    print(ascii_board(board))
    print()
    for square, piece in occupied(board):
        print(f"{square}: {piece}")
    return 0


def cmd_squares(args: argparse.Namespace) -> int:
    board = _parse_or_report(args.fen)
    if board is None:
        return 2
    for square, piece in occupied(board):
        flag = " ep" if piece.en_passant_target else ""
        print(f"{square} {piece.symbol}{flag}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="fenboard")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default=_default_log_level(),
        choices=LOG_LEVELS,
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ss = sub.add_parser("show", help="Show ASCII board and occupied squares")
    ss.add_argument("fen", nargs="?", default=STARTPOS_FEN)
    ss.set_defaults(fn=cmd_show)

    sq = sub.add_parser("squares", help="List occupied squares, one per line")
    sq.add_argument("fen", nargs="?", default=STARTPOS_FEN)
    sq.set_defaults(fn=cmd_squares)

    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    return int(args.fn(args))


if __name__ == "__main__":
    raise SystemExit(main())
