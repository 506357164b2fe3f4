"""
Custom exceptions. All derive from GameError.
"""


class GameError(Exception):
    """Base class for all errors raised by the chess application."""


class OutOfRangeError(GameError):
    """A square was requested that does not lie on the board."""


class EmptySourceError(GameError):
    """Move legality was asked for a square that holds no piece."""


class IllegalMoveError(GameError):
    """The piece cannot reach the target square."""


class NotYourTurnError(GameError):
    """Tried to move a piece that does not belong to the player to move."""


class GameStateError(GameError):
    """Stored game data cannot be turned into a Game."""


class InvalidFENError(GameError):
    """Placement string is not valid FEN."""


class InvalidRequestError(GameError):
    """Request data failed validation at the API boundary.

    NOTE: not a ValueError, pydantic would wrap that into a ValidationError.
    """


class RepositoryError(GameError):
    """Record could not be found / stored."""
