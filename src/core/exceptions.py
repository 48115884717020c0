"""
Custom exceptions, shared by all layers.

Player intents (clicking an empty square, an illegal destination, ...) are never errors in this game.
These exceptions signal either programming errors (invariant violations) or bad data crossing a layer boundary.
"""


class GameError(Exception):
    """Base class: lets the service / api layer catch everything raised by the game in one go."""


class InvariantViolationError(GameError):
    """Something that cannot happen under legal play did happen. Indicates a bug, not bad user input."""


class KingNotFoundError(InvariantViolationError):
    """Check detection requires exactly one king of the given color on the board."""


class GameStateError(GameError):
    """A stored / transported game cannot be turned back into a valid session."""


class InvalidFENError(GameError):
    """The piece placement string cannot be interpreted."""


class InvalidRequestError(GameError, ValueError):
    """
    Raised by the request model validators.

    NOTE: pydantic only wraps ValueError / AssertionError raised inside validators into a ValidationError.
    """


class RepositoryError(GameError):
    """Record missing / cannot be stored."""
