"""
Attack / check detection.

A square is attacked when any piece of the attacking color could move there, using the move generator in attack mode.
No incremental attack maps: every query re-runs the movement rules of all the attacker's pieces (cheap on an 8x8 board).
"""

from src.chess.board import Board
from src.chess.moves import generate_moves
from src.chess.pieces import Color
from src.chess.square import Square


def is_square_attacked(square: Square, by_color: Color, board: Board) -> bool:
    for attacker_square in board.locate_color(by_color):
        attacker = board.piece(attacker_square)
        assert attacker is not None
        if square in generate_moves(attacker, attacker_square, board, attack_mode=True):
            return True
    return False


def is_king_in_check(color: Color, board: Board) -> bool:
    """
    Is the king of `color` under attack by the opponent?

    Raises KingNotFoundError if the king is missing: that cannot happen under legal play.
    """
    king_square = board.locate_king(color)
    return is_square_attacked(king_square, color.opponent, board)
