"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    PLAYING = "playing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


# --- NOTE The chess domain layer has its own (non-string) Color enum in src/chess/pieces.py.
# --- These string versions are what crosses the boundary to the api / db layers.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
