"""
Constants and enums for the music theory library.

No magic strings - use enums for letters, accidentals and interval qualities.
"""

from enum import Enum


class Letter(str, Enum):
    """The seven diatonic note letters, like the white keys on a piano."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"


class Accidental(str, Enum):
    """
    Chromatic modifiers a note can carry.

    Only up to triple sharps and triple flats are representable.
    """

    NATURAL = ""
    SHARP = "#"
    FLAT = "b"
    DOUBLE_SHARP = "x"
    TRIPLE_SHARP = "#x"
    DOUBLE_FLAT = "bb"
    TRIPLE_FLAT = "bbb"

    @property
    def english_name(self) -> str:
        """Spelled-out name, e.g. 'double flat'."""
        return _ACCIDENTAL_NAMES[self]

    @property
    def alternative(self) -> str:
        """Alternative notation: 'x' becomes '##' and natural becomes 'n'."""
        if self is Accidental.DOUBLE_SHARP:
            return "##"
        if self is Accidental.NATURAL:
            return "n"
        return self.value


# Module level to avoid Enum member issues
_ACCIDENTAL_NAMES: dict[Accidental, str] = {
    Accidental.SHARP: "sharp",
    Accidental.NATURAL: "natural",
    Accidental.DOUBLE_SHARP: "double sharp",
    Accidental.TRIPLE_SHARP: "triple sharp",
    Accidental.FLAT: "flat",
    Accidental.DOUBLE_FLAT: "double flat",
    Accidental.TRIPLE_FLAT: "triple flat",
}


class Quality(str, Enum):
    """
    Interval qualities.

    Unisons, fourths, fifths and their compounds take P/A/d,
    every other size takes d/m/M/A.
    """

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"


# Absolute positions count from A0 = 0 on an 88-key piano
C0_POSITION = -9
C8_POSITION = 87
POSITIONS_PER_OCTAVE = 12

MIN_OCTAVE = 0
MAX_OCTAVE = 8


class ErrorMessages:
    """Standardized error messages."""

    INVALID_INPUT = "[{property}]: {explain}"
    BELOW_C0 = "This note is lower than C0"
    ABOVE_C8 = "This note is higher than C8"
    NOT_SAME_TYPE = "The notes are not the same type"
    NO_ACCIDENTAL_FOR_POSITION = "A note with this accidental does not exist for this position"
    NO_ACCIDENTAL_FOR_INTERVAL = "No accidental matches this interval"
    NO_QUALITY_FOR_INTERVAL = (
        "This interval is too wide, no quality can match it. "
        "Use enharmonic intervals instead. (Hint: {hint})"
    )
