"""Unit tests for src/db/database.py"""

import importlib
from pathlib import Path
from types import ModuleType
from typing import Generator

import pytest
from sqlalchemy import inspect
from sqlalchemy.orm import Session

import src.db.database
from src.api.models import GetGameRequest, SelectSquareRequest
from src.core.config import get_settings
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.chess_service import ChessService


@pytest.fixture
def file_database(tmp_path: Path) -> Generator[ModuleType, None, None]:
    """The database module bound to a brand new SQLite file (no tables yet)."""
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("CHESS_DATABASE_URL", f"sqlite:///{tmp_path / 'games.db'}")
        get_settings.cache_clear()
        database = importlib.reload(src.db.database)
        try:
            yield database
        finally:
            database.engine.dispose()
    get_settings.cache_clear()
    importlib.reload(src.db.database)


def test_get_db_yields_session_and_closes_it() -> None:
    generator = get_db()
    db = next(generator)
    assert isinstance(db, Session)
    generator.close()


def test_tables_are_created_on_new_database(file_database: ModuleType) -> None:
    assert "games" in inspect(file_database.engine).get_table_names()


def test_play_a_game_on_new_database(file_database: ModuleType) -> None:
    generator = file_database.get_db()
    service = ChessService(SQLGameRepository(next(generator)))
    try:
        created = service.create_new_game()
        service.select_square(SelectSquareRequest(game_id=created.game_id, square="e2"))
        service.select_square(SelectSquareRequest(game_id=created.game_id, square="e4"))

        response = service.get_game_state(GetGameRequest(game_id=created.game_id))
        assert response.last_move == "e2e4"
        assert response.turn == "black"
    finally:
        generator.close()
