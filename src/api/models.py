"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

PieceColor = str
CapturedFEN = str
FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def _is_algebraic_notation(value: str) -> bool:
    """'a1' - 'h8'"""
    if len(value) != 2:
        return False

    file_character, rank_character = value[0], value[1]
    return file_character in FILE_NAMES and rank_character in RANK_NAMES


# --- REQUEST MODELS ---
class SelectSquareRequest(BaseModel):
    """A click on the board, already translated into a square name by the frontend."""

    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip().lower()
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """Everything the frontend needs to draw the board, the highlights and the side panels."""

    game_id: UUID
    board_fen: str
    turn: Color
    status: Status
    status_message: str
    selection: Optional[str]
    legal_destinations: list[str]
    last_move: Optional[str]
    checked_king: Optional[Color]
    captures: dict[PieceColor, CapturedFEN]
    winner: Optional[Color]
