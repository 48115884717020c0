"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    ResetGameRequest,
    SelectSquareRequest,
)
from src.chess.game import GameSession, initialize, reset, select
from src.chess.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Both players sit at the same device: a new game is immediately ready to be played."""

        # Create a new session, and convert into GameModel
        new_game = initialize()
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        _, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, new_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state (to redraw the board)."""
        stored_model = self._fetch_game(request.game_id)
        game = GameSession.from_model(stored_model)
        return self._create_game_response(request.game_id, game)

    def select_square(self, request: SelectSquareRequest) -> GameResponse:
        """
        A player clicked a square.
        ----
        Depending on the current selection this selects a piece, plays a move, or cancels the selection.
        Clicks that do nothing are not errors: the (unchanged) game state is returned.
        """

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a session from the retrieved GameModel and handle the click
        game = GameSession.from_model(stored_model)
        after_click = select(game, Square.from_algebraic(request.square))

        # Capture updated state in GameModel and store in repository
        self.repo.update_game(request.game_id, after_click.to_model())

        return self._create_game_response(request.game_id, after_click)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Start over, on the same game id."""
        stored_model = self._fetch_game(request.game_id)
        new_game = reset(GameSession.from_model(stored_model))
        self.repo.update_game(request.game_id, new_game.to_model())
        logger.info("Reset game %s", request.game_id)
        return self._create_game_response(request.game_id, new_game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: GameSession) -> GameResponse:
        """Convert the session into a GameResponse (for game with given ID.)"""
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            board_fen=model.board_fen,
            turn=Color(model.turn),
            status=Status(model.status),
            status_message=game.status_message,
            selection=model.selection,
            legal_destinations=sorted(
                square.to_algebraic() for square in game.legal_destinations
            ),
            last_move=model.last_move,
            checked_king=Color(model.checked_king) if model.checked_king else None,
            captures=model.captures,
            winner=Color(game.winner.name.lower()) if game.winner else None,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            logger.warning("Game %s not found", game_id)
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
