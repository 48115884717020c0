"""Captured pieces, per capturing side"""

from dataclasses import dataclass, field
from typing import Self

from src.chess.pieces import Color, Piece


def _empty_ledger() -> dict[Color, list[Piece]]:
    return {color: [] for color in Color}


@dataclass
class CaptureLedger:
    """
    Append-only record of captures.
    ----

    * Keyed by the color that made the capture (not the color that lost the piece).
    * Insertion order is the order in which the pieces were captured.
    * No removal: there is no undo in this game.
    """

    captures: dict[Color, list[Piece]] = field(default_factory=_empty_ledger)

    def record(self, capturing_color: Color, piece: Piece) -> None:
        self.captures[capturing_color].append(piece)

    def captured_by(self, color: Color) -> list[Piece]:
        """Read-only view (a copy) of the pieces `color` has captured"""
        return list(self.captures[color])

    def count(self, color: Color) -> int:
        return len(self.captures[color])

    def points(self, color: Color) -> int:
        """Material value of everything `color` has captured"""
        return sum(piece.points for piece in self.captures[color])

    def copy(self) -> Self:
        return type(self)({color: list(pieces) for color, pieces in self.captures.items()})

    def to_fen(self) -> dict[str, str]:
        """Encode as FEN characters, e.g. {"white": "pn", "black": "P"}"""
        return {
            color.name.lower(): "".join(piece.to_fen() for piece in pieces)
            for color, pieces in self.captures.items()
        }

    @classmethod
    def from_fen(cls, encoded: dict[str, str]) -> Self:
        ledger = cls()
        for color in Color:
            for character in encoded.get(color.name.lower(), ""):
                ledger.record(color, Piece.from_fen(character))
        return ledger
