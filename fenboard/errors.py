from __future__ import annotations

from enum import Enum
from typing import Optional


class FENErrorKind(Enum):
    INVALID_PIECE = "invalid_piece"
    INVALID_SECTION_COUNT = "invalid_section_count"
    DUPLICATE_SQUARE = "duplicate_square"
    INVALID_RANK_COUNT = "invalid_rank_count"
    INVALID_RANK_WIDTH = "invalid_rank_width"


class FENParseError(ValueError):
    """A FEN string could not be turned into a board.

    ``kind`` says which check failed; the matching attribute
    (``invalid_piece``, ``count``, ``square`` or ``rank``) holds the detail.
    """

    def __init__(
        self,
        kind: FENErrorKind,
        message: str,
        *,
        invalid_piece: Optional[str] = None,
        count: Optional[int] = None,
        square: Optional[str] = None,
        rank: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.invalid_piece = invalid_piece
        self.count = count
        self.square = square
        self.rank = rank

    @classmethod
    def invalid_piece_char(cls, ch: str) -> "FENParseError":
        return cls(FENErrorKind.INVALID_PIECE, f"Invalid piece {ch!r}", invalid_piece=ch)

    @classmethod
    def invalid_section_count(cls, count: int) -> "FENParseError":
        return cls(
            FENErrorKind.INVALID_SECTION_COUNT,
            f"Invalid number of sections in FEN statement, expected 6, found {count}",
            count=count,
        )

    @classmethod
    def duplicate_square(cls, square: str) -> "FENParseError":
        return cls(
            FENErrorKind.DUPLICATE_SQUARE,
            "Incomplete board state - duplicate square inserted during FEN parse",
            square=square,
        )

    @classmethod
    def invalid_rank_count(cls, count: int) -> "FENParseError":
        return cls(
            FENErrorKind.INVALID_RANK_COUNT,
            f"Invalid number of ranks in FEN placement, expected 8, found {count}",
            count=count,
        )

    @classmethod
    def invalid_rank_width(cls, rank: str) -> "FENParseError":
        return cls(
            FENErrorKind.INVALID_RANK_WIDTH,
            f"Rank {rank!r} describes more than 8 files",
            rank=rank,
        )
