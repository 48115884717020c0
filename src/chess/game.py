"""
The game session is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn:
selecting a piece, moving it, keeping track of captures, switching turns, and deciding the game status.

Every public operation takes a session and returns a new one: the session passed in is never changed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess.attacks import is_king_in_check
from src.chess.board import Board
from src.chess.ledger import CaptureLedger
from src.chess.legality import has_any_legal_move, legal_moves
from src.chess.moves import Move, ResolvedMove, is_promotion_square
from src.chess.pieces import Color, Piece, PieceKind
from src.chess.square import Square
from src.core.exceptions import GameStateError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()


# statuses in which the board still accepts input
ACTIVE_STATUSES = (GameStatus.PLAYING, GameStatus.CHECK)


@dataclass
class GameSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board.starting_position)
    turn: Color = Color.WHITE
    status: GameStatus = GameStatus.PLAYING
    selection: Optional[Square] = None
    legal_destinations: frozenset[Square] = frozenset()
    ledger: CaptureLedger = field(default_factory=CaptureLedger)
    last_move: Optional[Move] = None
    checked_king: Optional[Color] = None

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a session from the information the Service layer actually has"""

        # Validation
        status_name = model.status.upper()
        if status_name not in GameStatus.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in GameStatus])}"
            )
        turn = _color_from_name(model.turn)
        checked_king = (
            _color_from_name(model.checked_king) if model.checked_king else None
        )

        try:
            ledger = CaptureLedger.from_fen(model.captures)
        except KeyError as e:
            raise GameStateError(f"Invalid captured piece: {e}") from e

        session = cls(
            board=Board.from_fen(model.board_fen),
            turn=turn,
            status=GameStatus[status_name],
            ledger=ledger,
            last_move=_move_from_uci(model.last_move) if model.last_move else None,
            checked_king=checked_king,
        )

        # legal destinations are derived data: recompute them for a stored selection
        if model.selection:
            session._select_piece(_square_from_name(model.selection))
        return session

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board_fen=self.board.to_fen(),
            turn=self.turn.name.lower(),
            status=self.status.name.lower(),
            selection=self.selection.to_algebraic() if self.selection else None,
            last_move=self.last_move.to_uci() if self.last_move else None,
            checked_king=self.checked_king.name.lower() if self.checked_king else None,
            captures=self.ledger.to_fen(),
        )

    def copy(self) -> Self:
        """Independent copy: squares / moves / pieces are immutable, the board and the ledger get copied."""
        return type(self)(
            board=self.board.copy(),
            turn=self.turn,
            status=self.status,
            selection=self.selection,
            legal_destinations=self.legal_destinations,
            ledger=self.ledger.copy(),
            last_move=self.last_move,
            checked_king=self.checked_king,
        )

    # --- READ ACCESSORS ---
    @property
    def is_over(self) -> bool:
        return self.status not in ACTIVE_STATUSES

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.STALEMATE

    @property
    def winner(self) -> Optional[Color]:
        """
        Only checkmate has a winner.
        Given we know it is checkmate, the side to move just got mated and the opponent must be the winner
        """
        if self.status != GameStatus.CHECKMATE:
            return None
        return self.turn.opponent

    @property
    def status_message(self) -> str:
        """One line summary for the side panel of the board"""
        side_to_move = self.turn.name.capitalize()
        match self.status:
            case GameStatus.CHECK:
                return f"{side_to_move} is in check!"
            case GameStatus.CHECKMATE:
                return f"Checkmate! {self.turn.opponent.name.capitalize()} wins!"
            case GameStatus.STALEMATE:
                return "Stalemate! The game is a draw."
            case GameStatus.PLAYING:
                return f"{side_to_move}'s Turn"

    # -- PRIVATE HELPERS ---
    def _handle_selection(self, square: Square) -> None:
        """
        A click on the board.
        ----

        1. Game over? --> ignore the click (until the game gets reset)
        2. Nothing selected yet? --> select the piece if it belongs to the side to move
        3. Something selected and the click is on one of its legal destinations? --> play the move
        4. Otherwise: cancel the selection
        """
        if self.is_over:
            logger.debug("Ignoring %s: game is over (%s)", square, self.status.name)
            return

        if self.selection is None:
            self._select_piece(square)
            return

        if square in self.legal_destinations:
            self._apply_move(Move(self.selection, square))
        else:
            logger.debug("Selection of %s cancelled", self.selection.to_algebraic())
        self._clear_selection()

    def _select_piece(self, square: Square) -> None:
        piece = self.board.piece(square)
        if piece is None or piece.color != self.turn:
            return
        self.selection = square
        self.legal_destinations = frozenset(legal_moves(piece, square, self.board))
        logger.debug(
            "Selected %s on %s: %d legal destination(s)",
            piece.to_fen(),
            square.to_algebraic(),
            len(self.legal_destinations),
        )

    def _clear_selection(self) -> None:
        self.selection = None
        self.legal_destinations = frozenset()

    def _apply_move(self, move: Move) -> None:
        """
        Play a move that has already been certified legal
        -----

        1. record a capture (in the ledger of the player making the move)
        2. update the board
        3. promote the pawn if it reached the last row
        4. remember the move (for highlighting)
        5. switch turns
        6. update game status (if needed)
        """
        resolved_move = self._create_resolved_move(move)

        if resolved_move.captured_piece is not None:
            self.ledger.record(self.turn, resolved_move.captured_piece)

        self.board.move_piece(move.from_square, move.to_square)

        if resolved_move.promoted:
            self._promote_pawn(move.to_square, resolved_move.moving_piece)

        self.last_move = move
        self.turn = self.turn.opponent
        self._update_game_status()

        logger.debug(
            "Played %s (%s)%s. Status: %s",
            move.to_uci(),
            resolved_move.moving_piece.to_fen(),
            f", captured {resolved_move.captured_piece.to_fen()}"
            if resolved_move.captured_piece
            else "",
            self.status.name,
        )

    def _create_resolved_move(self, move: Move) -> ResolvedMove:
        """Snapshot of the moving pieces before the updates are done."""
        moving_piece = self.board.piece(move.from_square)
        assert moving_piece is not None
        return ResolvedMove(
            move=move,
            moving_piece=moving_piece,
            captured_piece=self.board.piece(move.to_square),
            promoted=is_promotion_square(moving_piece, move.to_square),
        )

    def _promote_pawn(self, square: Square, pawn: Piece) -> None:
        """Always promote to a queen."""
        self.board.place_piece(pawn.promoted(PieceKind.QUEEN), square)

    def _update_game_status(self) -> None:
        """Performs checks to see if game has ended and changes status accordingly.

        NOTE the turn has already been switched. The color to check is the opponent of the player that just moved.
        """
        color = self.turn
        can_move = has_any_legal_move(color, self.board)
        if is_king_in_check(color, self.board):
            self.checked_king = color
            self._change_status(GameStatus.CHECK if can_move else GameStatus.CHECKMATE)
        else:
            self.checked_king = None
            self._change_status(GameStatus.PLAYING if can_move else GameStatus.STALEMATE)

    def _change_status(self, new_status: GameStatus) -> None:
        if new_status != self.status:
            logger.debug("Status changed: %s -> %s", self.status.name, new_status.name)
        self.status = new_status


def _color_from_name(name: str) -> Color:
    color_name = name.upper()
    if color_name not in Color.__members__:
        raise GameStateError(
            f"Invalid color: {name!r}. \nPick one from {','.join([color.name.lower() for color in Color])}"
        )
    return Color[color_name]


def _square_from_name(name: str) -> Square:
    try:
        square = Square.from_algebraic(name)
    except (IndexError, ValueError) as e:
        raise GameStateError(f"Invalid square: {name!r}") from e
    if len(name) != 2 or not square.is_within_bounds():
        raise GameStateError(f"Invalid square: {name!r}")
    return square


def _move_from_uci(uci: str) -> Move:
    if len(uci) not in (4, 5):
        raise GameStateError(f"Invalid move: {uci!r}")
    return Move(_square_from_name(uci[:2]), _square_from_name(uci[2:4]))


# --- ENGINE API ---
def initialize() -> GameSession:
    """Standard starting position, white to move, nothing captured or selected."""
    return GameSession()


def select(session: GameSession, square: Square) -> GameSession:
    """
    Selection / move attempt entry point.
    Invalid intents are no-ops (or cancel the selection): the returned session is then equal to the one passed in
    (apart from the cleared selection).
    """
    new_session = session.copy()
    new_session._handle_selection(square)
    return new_session


def reset(session: GameSession) -> GameSession:
    """Throw away the current game entirely and start a new one."""
    logger.debug("Resetting game (was %s)", session.status.name)
    return initialize()
