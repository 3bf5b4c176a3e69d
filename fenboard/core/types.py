from __future__ import annotations

from enum import Enum

class PieceColour(Enum):
    WHITE = 1
    BLACK = -1

FILES = "abcdefgh"
RANKS = 8

def piece_colour(ch: str) -> PieceColour:
    return PieceColour.WHITE if ch.isupper() else PieceColour.BLACK

def in_bounds(rank_index: int, file_index: int) -> bool:
    return 0 <= rank_index < RANKS and 0 <= file_index < len(FILES)

def square_name(rank_index: int, file_index: int) -> str:
    """Algebraic name for a placement coordinate.

    rank_index counts placement ranks from the top (0 is rank 8), so the
    digit is ``8 - rank_index``.
    """
    if not in_bounds(rank_index, file_index):
        raise IndexError(f"Square out of range: rank_index={rank_index} file_index={file_index}")
    return f"{FILES[file_index]}{RANKS - rank_index}"
