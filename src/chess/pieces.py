"""Defines the types of chess pieces"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Self


class PieceKind(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


FEN_TO_PIECE: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

PIECE_TO_FEN: dict[PieceKind, str] = {value: key for key, value in FEN_TO_PIECE.items()}


PIECE_POINTS: dict[PieceKind, int] = {
    PieceKind.PAWN: 1,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.ROOK: 5,
    PieceKind.QUEEN: 9,
}


@dataclass(frozen=True)
class Piece:
    """
    Immutable value: a move changes the square a piece stands on, a promotion replaces the piece.
    """

    color: Color
    kind: PieceKind
    points: int = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        # NOTE: The King's worth is undefined (does not count towards total points)
        object.__setattr__(self, "points", PIECE_POINTS.get(self.kind, 0))

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        kind = FEN_TO_PIECE[character.lower()]
        return cls(color, kind)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.kind].lower()
        )

    def promoted(self, new_kind: PieceKind = PieceKind.QUEEN) -> Self:
        """The piece that replaces this one on promotion. Same color, new kind."""
        return type(self)(self.color, new_kind)
