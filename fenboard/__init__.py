"""fenboard: FEN placement parsing.

- core: colours, piece values, square names, board rendering
- fen: FEN record -> {square name: Piece}
- errors: FENParseError and its kinds
"""

from . import core
from .errors import FENParseError, FENErrorKind
from .fen import parse_fen, split_sections, parse_piece, expand_rank, STARTPOS_FEN

__all__ = [
    "core",
    "FENParseError","FENErrorKind",
    "parse_fen","split_sections","parse_piece","expand_rank","STARTPOS_FEN",
]
