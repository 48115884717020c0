"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def empty_captures() -> dict[str, str]:
    return {"white": "", "black": ""}


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    board_fen: Mapped[str]
    turn: Mapped[str]
    status: Mapped[str]
    selection: Mapped[Optional[str]]
    last_move: Mapped[Optional[str]]
    checked_king: Mapped[Optional[str]]
    captures: Mapped[dict[str, str]] = mapped_column(JSON, default=empty_captures)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
