"""
Geometry/Base movement and capturing rules: the pseudo-legal move generator.

Key idea: every piece kind has its own movement rule; `generate_moves` dispatches on the (closed) set of piece kinds.

Moves generated here ignore whose turn it is and whether they leave your own king in check.
Legality is checked later by the legal move filter (see legality.py)
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.chess.pieces import Color, Piece, PieceKind
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface:
        ---
        One of the standard chess notations for moves

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "d8h4": (queen) moves from d8 to h4

        NOTE: A promotion suffix ("e7e8q") is accepted but ignored: pawns always promote to a queen.
        """
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


@dataclass(frozen=True)
class ResolvedMove:
    """A move after it has been played: snapshot of the pieces involved."""

    move: Move
    moving_piece: Piece
    captured_piece: Optional[Piece] = None
    promoted: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None


# --- DIRECTIONS (d_row, d_col) ---
# NOTE: White moves UP the board (towards row 0), Black moves DOWN (towards row 7)
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}

STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, color: Color, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    """
    targets: list[Square] = []
    for dr, dc in directions:
        target_square = square.offset(dr, dc)
        while target_square.is_within_bounds():
            piece_found = board.piece(target_square)
            if piece_found is not None:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if piece_found.color != color:
                    targets.append(target_square)
                break

            targets.append(target_square)
            target_square = target_square.offset(dr, dc)
    return targets


def single_step_move(
    square: Square, color: Color, board: Board, deltas: list[Vector]
) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step along a direction"""
    targets: list[Square] = []
    for dr, dc in deltas:
        target_square = square.offset(dr, dc)
        if not target_square.is_within_bounds():
            continue

        piece_found = board.piece(target_square)
        if piece_found is None or piece_found.color != color:
            targets.append(target_square)

    return targets


def candidate_pawn_moves(
    square: Square, color: Color, board: Board, attack_mode: bool = False
) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward (if that square is empty).
    - It can move by two in their first move (so when on their starting row), if both squares are empty.
    - takes diagonally

    In attack mode, both forward diagonals are threatened whether something stands there or not:
    the king is not allowed to step onto a square a pawn merely covers.

    NOTE: No en passant in this game.
    """
    direction = PAWN_DIRECTION[color]

    targets: list[Square] = []
    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.piece(one_step) is None:
        targets.append(one_step)

        two_steps = square.offset(2 * direction, 0)
        if square.row == PAWN_START_ROW[color] and board.piece(two_steps) is None:
            targets.append(two_steps)

    # pawns take diagonally:
    for dc in (-1, 1):
        target_square = square.offset(direction, dc)
        if not target_square.is_within_bounds():
            continue

        piece_found = board.piece(target_square)
        is_opponent_piece = piece_found is not None and piece_found.color != color
        if attack_mode or is_opponent_piece:
            targets.append(target_square)
    return targets


def candidate_knight_moves(square: Square, color: Color, board: Board) -> list[Square]:
    """Knights always jump such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, color, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, color: Color, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, color, board, DIAGONALS)


def candidate_rook_moves(square: Square, color: Color, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, color, board, STRAIGHTS)


def candidate_queen_moves(square: Square, color: Color, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, color, board, STRAIGHTS + DIAGONALS)


def candidate_king_moves(square: Square, color: Color, board: Board) -> list[Square]:
    """
    The king can move by a single square at the time, in any direction.
    """
    return single_step_move(square, color, board, KING_DELTAS)


def generate_moves(
    piece: Piece, square: Square, board: Board, attack_mode: bool = False
) -> set[Square]:
    """
    Pseudo-legal destinations of `piece` standing on `square`.

    `attack_mode` only changes the pawn rule (see `candidate_pawn_moves`). It is used for check detection.
    """
    color = piece.color
    match piece.kind:
        case PieceKind.PAWN:
            targets = candidate_pawn_moves(square, color, board, attack_mode)
        case PieceKind.KNIGHT:
            targets = candidate_knight_moves(square, color, board)
        case PieceKind.BISHOP:
            targets = candidate_bishop_moves(square, color, board)
        case PieceKind.ROOK:
            targets = candidate_rook_moves(square, color, board)
        case PieceKind.QUEEN:
            targets = candidate_queen_moves(square, color, board)
        case PieceKind.KING:
            targets = candidate_king_moves(square, color, board)
    return set(targets)


# -- PAWN PROMOTION --
def is_promotion_square(piece: Piece, square: Square) -> bool:
    """A pawn reaching the farthest row for its color (row 0 for white, row 7 for black)"""
    return piece.kind == PieceKind.PAWN and square.row == PROMOTION_ROW[piece.color]
