"""
Error types for the music theory library.

Every failure is a MusicTheoryError tagged with an ErrorKind, so callers can
branch on the kind instead of on a class hierarchy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from music_theory_utils.constants import C0_POSITION, ErrorMessages


class ErrorKind(str, Enum):
    """What went wrong."""

    INVALID_INPUT = "invalid_input"  # Malformed strings, bad degrees, empty interval lists
    IMPOSSIBLE_QUALITY = "impossible_quality"  # No accidental/quality can spell the result
    NOT_SAME_TYPE = "not_same_type"  # Relative and absolute notes mixed
    OUT_OF_RANGE = "out_of_range"  # Outside C0..C8


class MusicTheoryError(ValueError):
    """
    Raised by every operation of the library on invalid input or impossible results.

    Attributes:
        kind: The error kind
        context: Extra payload (offending property, value, ...)
    """

    def __init__(self, kind: ErrorKind, message: str, **context: Any) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.context = context

    def __repr__(self) -> str:
        return f"MusicTheoryError({self.kind.value!r}, {self.message!r})"

    @classmethod
    def invalid_input(cls, property_name: str, explain: str, **context: Any) -> MusicTheoryError:
        """A constructor or method received an invalid value for `property_name`."""
        message = ErrorMessages.INVALID_INPUT.format(property=property_name, explain=explain)
        return cls(ErrorKind.INVALID_INPUT, message, property=property_name, **context)

    @classmethod
    def out_of_range(cls, value: int, below: bool | None = None) -> MusicTheoryError:
        """An absolute position (or the octave it resolves to) falls outside C0..C8."""
        if below is None:
            below = value < C0_POSITION
        message = ErrorMessages.BELOW_C0 if below else ErrorMessages.ABOVE_C8
        return cls(ErrorKind.OUT_OF_RANGE, message, value=value)

    @classmethod
    def not_same_type(cls) -> MusicTheoryError:
        return cls(ErrorKind.NOT_SAME_TYPE, ErrorMessages.NOT_SAME_TYPE)

    @classmethod
    def impossible_quality(cls, message: str, **context: Any) -> MusicTheoryError:
        """No accidental or quality can satisfy the request."""
        return cls(ErrorKind.IMPOSSIBLE_QUALITY, message, **context)
