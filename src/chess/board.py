"""The Game board: piece placement on the 8x8 grid (in chess: the `position`)"""

from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.pieces import FEN_TO_PIECE, Color, Piece, PieceKind
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError, KingNotFoundError

Grid = list[list[Optional[Piece]]]

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        num_rows, num_cols = BOARD_DIMENSIONS
        return cls([[None] * num_cols for _ in range(num_rows)])

    @classmethod
    def starting_position(cls) -> Self:
        """
        Row 0 -> 7: black pieces, black pawns, four empty rows, white pawns, white pieces.
        Kings on the e-file (col 4), queens on the d-file (col 3).
        """
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), read left to right: rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 7) are the white pieces.
        """
        num_rows, num_cols = BOARD_DIMENSIONS
        fen_by_rows = fen_str.split("/")
        if len(fen_by_rows) != num_rows:
            raise InvalidFENError(
                f"Expected {num_rows} ranks separated by '/', got {len(fen_by_rows)}: {fen_str!r}"
            )

        board = cls.empty()
        # FEN string is read from top rank (8th) to bottom rank (1st): the same order as the rows of the grid
        for row, fen_one_row in enumerate(fen_by_rows):
            col = 0
            for character in fen_one_row:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                elif character.lower() in FEN_TO_PIECE:
                    if col >= num_cols:
                        raise InvalidFENError(
                            f"Rank {fen_one_row!r} describes more than {num_cols} squares."
                        )
                    board.grid[row][col] = Piece.from_fen(character)
                    col += 1
                else:
                    raise InvalidFENError(
                        f"Unknown character {character!r} in FEN string: {fen_str!r}"
                    )
            if col != num_cols:
                raise InvalidFENError(
                    f"Rank {fen_one_row!r} does not describe exactly {num_cols} squares."
                )
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    @staticmethod
    def _row_to_fen(row: list[Optional[Piece]]) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def copy(self) -> Self:
        """
        Independent copy: changing the copy never changes this board.
        Pieces are immutable, so copying the rows is a full deep copy.
        """
        return type(self)([list(row) for row in self.grid])

    def squares(self) -> Iterator[tuple[Square, Optional[Piece]]]:
        """All (square, piece) pairs, row by row."""
        for row, pieces in enumerate(self.grid):
            for col, piece in enumerate(pieces):
                yield Square(row, col), piece

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        piece = self.piece(square)
        self.grid[square.row][square.col] = None
        return piece

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Update the position on the board. Whatever stood on the target square is gone."""
        piece_that_moved = self.remove_piece(from_square)
        self.grid[to_square.row][to_square.col] = piece_that_moved

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square, piece in self.squares()
            if piece is not None and piece.color == color
        ]

    def locate_pieces(self, piece: Piece) -> list[Square]:
        return [square for square, found in self.squares() if found == piece]

    def locate_king(self, color: Color) -> Square:
        kings = self.locate_pieces(Piece(color, PieceKind.KING))
        if len(kings) != 1:
            raise KingNotFoundError(
                f"Expected exactly one {color.name.lower()} king on the board, found {len(kings)}."
            )
        return kings[0]

    def count_pieces(self, color: Color) -> int:
        return len(self.locate_color(color))

    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {color: self._count_material_player(color) for color in Color}

    def _count_material_player(self, color: Color) -> int:
        return sum(
            piece.points
            for _, piece in self.squares()
            if piece is not None and piece.color == color
        )
