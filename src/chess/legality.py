"""
Legal move filter
-----

A pseudo-legal move is legal when it does not put (or leave) your own king in check.

plan, for every candidate destination:
1. Copy the board
2. make the candidate move on the copy
3. determine if the mover's king is in check on the new board

This single rule takes care of pinned pieces, of the king walking into check and of ignoring a check.
"""

from src.chess.attacks import is_king_in_check
from src.chess.board import Board
from src.chess.moves import Move, generate_moves
from src.chess.pieces import Color, Piece
from src.chess.square import Square


def legal_moves(piece: Piece, square: Square, board: Board) -> set[Square]:
    """Destinations `piece` (standing on `square`) may legally move to."""
    return {
        target
        for target in generate_moves(piece, square, board, attack_mode=False)
        if not _is_putting_yourself_in_check(piece, square, target, board)
    }


def all_legal_moves(color: Color, board: Board) -> list[Move]:
    """Every legal move for the player with the `color` pieces"""
    moves: list[Move] = []
    for square in board.locate_color(color):
        piece = board.piece(square)
        assert piece is not None
        moves.extend(
            Move(square, target) for target in legal_moves(piece, square, board)
        )
    return moves


def has_any_legal_move(color: Color, board: Board) -> bool:
    """Stops at the first piece that can move. Only used to derive the game status."""
    for square in board.locate_color(color):
        piece = board.piece(square)
        assert piece is not None
        if legal_moves(piece, square, board):
            return True
    return False


def _is_putting_yourself_in_check(
    piece: Piece, from_square: Square, to_square: Square, board: Board
) -> bool:
    """Simulate the move on a scratch copy. No promotion needed: it cannot change whether your own king is attacked."""
    scratch_board = board.copy()
    scratch_board.remove_piece(from_square)
    scratch_board.place_piece(piece, to_square)
    return is_king_in_check(piece.color, scratch_board)
