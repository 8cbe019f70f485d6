"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch a single top-level type."""


class GameError(Exception):
    """Base class for all errors raised by the application."""


class OutOfBoundsError(GameError):
    """A coordinate outside of the 8x8 grid."""


class InvalidNotationError(GameError):
    """Text that cannot be read as a position (ex. 'D3')."""


class InvalidBoardError(GameError):
    """Board notation that does not describe an 8x8 board."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested operation."""


class NoLegalMoveError(GameStateError):
    """A move was requested for a side that has no legal move."""


class IllegalMoveError(GameError):
    """Move rejected by the rules."""


class NotYourTurnError(GameError):
    """A player attempted to act while it is the opponent's turn."""


class InvalidRequestError(GameError):
    """Request data that does not pass validation."""


class RepositoryError(GameError):
    """Record could not be found / stored."""
