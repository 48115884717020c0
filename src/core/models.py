"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
CapturedFEN = str


@dataclass
class GameModel:
    """Transport-safe representation of a game session used between API, Service, DB, and Game layers."""

    board_fen: str
    turn: str
    status: str
    selection: Optional[str] = None
    last_move: Optional[str] = None
    checked_king: Optional[str] = None
    captures: dict[PieceColor, CapturedFEN] = field(
        default_factory=lambda: {"white": "", "black": ""}
    )
