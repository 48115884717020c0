"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8 (rows, cols).
BOARD_DIMENSIONS = (8, 8)
FILE_NAMES = "abcdefgh"


@dataclass(frozen=True)
class Square:
    """
    Board address (row, col), both zero-based.

    Row 0 is Black's home rank (rank 8) at the top of the board, row 7 is White's home rank (rank 1).
    Col 0..7 maps to the files a..h.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' -> (0, 0), 'h1' -> (7, 7)"""
        col = FILE_NAMES.index(sq[0].lower())
        rank = int(sq[1])
        return cls(BOARD_DIMENSIONS[0] - rank, col)

    def to_algebraic(self) -> str:
        return f"{FILE_NAMES[self.col]}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """The square found by stepping along a vector. NOTE: not bounds-checked"""
        return Square(self.row + d_row, self.col + d_col)
