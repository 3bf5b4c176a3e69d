from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict

from .core import (
    PieceColour, PieceKind, Piece, BoardState,
    FILES, RANKS, piece_colour, square_name,
)
from .errors import FENParseError

LOGGER = logging.getLogger("fenboard.fen")

STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

SECTION_COUNT = 6
EMPTY_RUN_DIGITS = "12345678"

_CHAR_TO_KIND: Dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}


@dataclass(frozen=True)
class FENSections:
    placement: str
    side_to_move: str
    castling: str
    en_passant_target: str
    halfmove_clock: str
    fullmove_number: str


def split_sections(fen: str) -> FENSections:
    """Split a FEN record on single spaces into its six fields.

    Only the placement and en passant fields are consumed by ``parse_fen``;
    the others are returned as-is without validation.
    """
    parts = fen.split(" ")
    if len(parts) != SECTION_COUNT:
        LOGGER.debug("fen_section_count count=%d fen=%r", len(parts), fen)
        raise FENParseError.invalid_section_count(len(parts))
    return FENSections(*parts)


def parse_piece(ch: str, en_passant_target: bool = False) -> Piece:
    kind = _CHAR_TO_KIND.get(ch.lower()) if len(ch) == 1 else None
    if kind is None:
        raise FENParseError.invalid_piece_char(ch)
    colour: PieceColour = piece_colour(ch)
    return Piece(kind, colour, en_passant_target and kind is PieceKind.PAWN)


def place_piece(board: BoardState, square: str, piece: Piece) -> None:
    if square in board:
        raise FENParseError.duplicate_square(square)
    board[square] = piece


def expand_rank(board: BoardState, rank_index: int, rank: str, en_passant_target: str = "-") -> None:
    """Add the pieces described by one placement rank to ``board``.

    Digits 1-8 skip that many empty files; every piece letter occupies the
    current file and moves on to the next one.
    """
    f = 0
    for ch in rank:
        if ch in EMPTY_RUN_DIGITS:
            f += int(ch)
            if f > len(FILES):
                raise FENParseError.invalid_rank_width(rank)
            continue
        if f >= len(FILES):
            # letters past the h-file are still reported as bad pieces first
            parse_piece(ch)
            raise FENParseError.invalid_rank_width(rank)
        square = square_name(rank_index, f)
        piece = parse_piece(ch, square == en_passant_target)
        place_piece(board, square, piece)
        LOGGER.debug("fen_place square=%s piece=%s", square, piece.symbol)
        f += 1


def parse_fen(fen: str) -> BoardState:
    """Parse a FEN record into a mapping of square name to piece.

    Empty squares are left out of the result. Square names use standard
    algebraic ranks, so the first placement rank is rank 8.

    Raises FENParseError; no partial board is ever returned.
    """
    sections = split_sections(fen)

    ranks = sections.placement.split("/")
    if len(ranks) != RANKS:
        LOGGER.debug("fen_rank_count count=%d placement=%r", len(ranks), sections.placement)
        raise FENParseError.invalid_rank_count(len(ranks))

    board: BoardState = {}
    for rank_index, rank in enumerate(ranks):
        expand_rank(board, rank_index, rank, sections.en_passant_target)

    LOGGER.debug("fen_parsed pieces=%d ep=%s", len(board), sections.en_passant_target)
    return board
