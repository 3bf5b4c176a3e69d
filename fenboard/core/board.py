from __future__ import annotations

from typing import Dict, List, Mapping, Tuple

from .piece import Piece
from .types import FILES, RANKS, square_name

BoardState = Dict[str, Piece]

def all_squares() -> List[str]:
    """All 64 square names in placement order (a8..h8, a7..h7, ... a1..h1)."""
    return [square_name(r, f) for r in range(RANKS) for f in range(len(FILES))]

_SQUARE_ORDER: Dict[str, int] = {name: i for i, name in enumerate(all_squares())}

def occupied(board: Mapping[str, Piece]) -> List[Tuple[str, Piece]]:
    return sorted(board.items(), key=lambda item: _SQUARE_ORDER.get(item[0], len(_SQUARE_ORDER)))

def ascii_board(board: Mapping[str, Piece]) -> str:
    rows = []
    for r in range(RANKS):
        row = []
        for f in range(len(FILES)):
            p = board.get(square_name(r, f))
            row.append(p.symbol if p else ".")
        rows.append(" ".join(row))
    return "\n".join(rows)
