"""
Core music theory primitives.

These are the algebraic values everything else composes on:
- BidirectionalLookup: Two-way table behind the fixed letter/accidental/interval tables
- Interval: Quality + generic size, valued in semitones
- RelativeNote / AbsoluteNote: Spelled pitch classes and spelled piano keys
- Chord: Root + stacked intervals, with inversion
- Scale: Root + step pattern, with the seven diatonic modes
"""

from music_theory_utils.core.chord import Chord
from music_theory_utils.core.interval import Interval
from music_theory_utils.core.lookup import BidirectionalLookup
from music_theory_utils.core.note import AbsoluteNote, Note, RelativeNote, same_type, stack_notes
from music_theory_utils.core.scale import Scale

__all__ = [
    # Tables
    "BidirectionalLookup",
    # Interval
    "Interval",
    # Note
    "Note",
    "RelativeNote",
    "AbsoluteNote",
    "same_type",
    "stack_notes",
    # Chord
    "Chord",
    # Scale
    "Scale",
]
