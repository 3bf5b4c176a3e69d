from .types import PieceColour, FILES, RANKS, piece_colour, in_bounds, square_name
from .piece import PieceKind, Piece, EMPTY
from .board import BoardState, all_squares, occupied, ascii_board

__all__ = [
    "PieceColour","FILES","RANKS","piece_colour","in_bounds","square_name",
    "PieceKind","Piece","EMPTY",
    "BoardState","all_squares","occupied","ascii_board",
]
