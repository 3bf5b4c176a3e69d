from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .types import PieceColour

class PieceKind(Enum):
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"
    EMPTY = "."

@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    colour: Optional[PieceColour] = None
    # only pawns can be an en passant target
    en_passant_target: bool = False

    def __post_init__(self) -> None:
        if self.kind is PieceKind.EMPTY:
            if self.colour is not None or self.en_passant_target:
                raise ValueError("Empty square carries no colour or target flag")
            return
        if self.colour is None:
            raise ValueError(f"{self.kind.name.title()} needs a colour")
        if self.en_passant_target and self.kind is not PieceKind.PAWN:
            raise ValueError("Only pawns can be en passant targets")

    @property
    def is_empty(self) -> bool:
        return self.kind is PieceKind.EMPTY

    @property
    def symbol(self) -> str:
        ch = self.kind.value
        return ch.upper() if self.colour is PieceColour.WHITE else ch

    def __str__(self) -> str:
        if self.is_empty:
            return "Empty"
        colour = self.colour.name.title()  # type: ignore[union-attr]
        text = f"{colour} {self.kind.name.title()}"
        if self.en_passant_target:
            text += " (en passant target)"
        return text

    @classmethod
    def pawn(cls, colour: PieceColour, en_passant_target: bool = False) -> "Piece":
        return cls(PieceKind.PAWN, colour, en_passant_target)

    @classmethod
    def knight(cls, colour: PieceColour) -> "Piece":
        return cls(PieceKind.KNIGHT, colour)

    @classmethod
    def bishop(cls, colour: PieceColour) -> "Piece":
        return cls(PieceKind.BISHOP, colour)

    @classmethod
    def rook(cls, colour: PieceColour) -> "Piece":
        return cls(PieceKind.ROOK, colour)

    @classmethod
    def queen(cls, colour: PieceColour) -> "Piece":
        return cls(PieceKind.QUEEN, colour)

    @classmethod
    def king(cls, colour: PieceColour) -> "Piece":
        return cls(PieceKind.KING, colour)


# the FEN parser leaves empty squares out of the board
EMPTY = Piece(PieceKind.EMPTY)
