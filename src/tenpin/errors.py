"""Errors raised by the game rules and scorer.

Every error subclasses ``BowlingError`` (itself a ``ValueError``) and carries a
``kind`` so callers can branch on it without matching messages.
"""
from __future__ import annotations

from enum import Enum

from tenpin.constants import GAME_NOT_COMPLETE_MSG, GAME_OVER_MSG


class ErrorKind(str, Enum):
    INVALID_PIN_COUNT = "invalid_pin_count"
    GAME_OVER = "game_over"
    GAME_NOT_COMPLETE = "game_not_complete"
    BAD_NOTATION = "bad_notation"


class BowlingError(ValueError):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPinCount(BowlingError):
    """Roll is out of range or knocks down more pins than are standing."""

    kind = ErrorKind.INVALID_PIN_COUNT


class GameOver(BowlingError):
    kind = ErrorKind.GAME_OVER

    def __init__(self, message: str = GAME_OVER_MSG):
        super().__init__(message)


class GameNotComplete(BowlingError):
    kind = ErrorKind.GAME_NOT_COMPLETE

    def __init__(self, message: str = GAME_NOT_COMPLETE_MSG):
        super().__init__(message)


class NotationError(BowlingError):
    """Scorecard text could not be read."""

    kind = ErrorKind.BAD_NOTATION
