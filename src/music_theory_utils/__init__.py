"""
Music theory utilities - notes, intervals, chords and scales as values.

Spell intervals between notes, add intervals to notes, build and invert
chords, and build scales from a root and a step pattern.
"""

from music_theory_utils.constants import Accidental, Letter, Quality
from music_theory_utils.core import (
    AbsoluteNote,
    BidirectionalLookup,
    Chord,
    Interval,
    Note,
    RelativeNote,
    Scale,
    same_type,
)
from music_theory_utils.errors import ErrorKind, MusicTheoryError

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Letter",
    "Quality",
    "BidirectionalLookup",
    "Interval",
    "Note",
    "RelativeNote",
    "AbsoluteNote",
    "same_type",
    "Chord",
    "Scale",
    "ErrorKind",
    "MusicTheoryError",
]
