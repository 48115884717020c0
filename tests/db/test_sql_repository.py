"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.core.shared_types import Status
from src.db.schema import DBGame
from src.db.sql_repository import GameModel, SQLGameRepository


@pytest.fixture
def model() -> GameModel:
    """Mock game data. No chess logic is tested here, the values just need to survive the trip."""
    return GameModel(
        board_fen="rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR",
        turn="white",
        status=Status.CHECKMATE,
        selection=None,
        last_move="d8h4",
        checked_king="white",
        captures={"white": "", "black": ""},
    )


def test_create_game(db_session_repo: Session, model: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_timestamps_are_set(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)
    game_db = db_session_repo.get(DBGame, game_id)
    assert game_db is not None
    assert game_db.created_at is not None
    assert game_db.updated_at is not None


def test_get_game_by_id(db_session_repo: Session, model: GameModel) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(model)
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session, model: GameModel) -> None:
    """
    Update an earlier created record.
    """
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    updated = GameModel(
        board_fen="rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        turn="black",
        status=Status.PLAYING,
        selection="e7",
        last_move="e2e4",
        checked_king=None,
        captures={"white": "pn", "black": "Q"},
    )
    record = repo.update_game(game_id, updated)
    assert record == updated
    assert repo.get_game(game_id) == updated


def test_update_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), model) is None


def test_delete_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)
    deleted = repo.delete_game(game_id)
    assert deleted == model
    assert repo.get_game(game_id) is None
    # deleting twice: nothing left to delete
    assert repo.delete_game(game_id) is None


def test_separate_sessions_share_records(db_session_shared: Session, model: GameModel) -> None:
    """Mock real setup: one session stores, another one (same engine) reads."""
    _, game_id = SQLGameRepository(db_session_shared).create_game(model)
    other_session = Session(bind=db_session_shared.get_bind())
    try:
        assert SQLGameRepository(other_session).get_game(game_id) == model
    finally:
        other_session.close()
