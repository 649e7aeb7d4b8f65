"""
Pydantic models for the music theory library.

This module provides:
- IntervalPattern: Named chord stack or scale step pattern (presets)
- NoteResult, IntervalResult, ChordResult, ScaleResult: JSON answers for front ends
"""

from music_theory_utils.models.preset import IntervalPattern, PatternKind
from music_theory_utils.models.results import (
    ChordResult,
    ErrorResult,
    IntervalResult,
    NoteResult,
    PresetListResult,
    ScaleResult,
)

__all__ = [
    "IntervalPattern",
    "PatternKind",
    "NoteResult",
    "IntervalResult",
    "ChordResult",
    "ScaleResult",
    "PresetListResult",
    "ErrorResult",
]
