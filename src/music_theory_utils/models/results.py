"""
Result models - JSON-serializable answers for front ends.

Each model carries a status field so errors and results share one envelope.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from music_theory_utils.core.chord import Chord
from music_theory_utils.core.interval import Interval
from music_theory_utils.core.note import Note
from music_theory_utils.core.scale import Scale
from music_theory_utils.errors import MusicTheoryError
from music_theory_utils.models.preset import IntervalPattern

NoteType = Literal["relative", "absolute"]


class NoteResult(BaseModel):
    """A note and its position."""

    status: Literal["success"] = "success"
    note: str
    type: NoteType
    value: int = Field(..., description="0-11 for relative notes, A0 = 0 for absolute notes")

    @classmethod
    def from_note(cls, note: Note) -> NoteResult:
        return cls(
            note=str(note),
            type="absolute" if note.is_absolute else "relative",
            value=note.value,
        )


class IntervalResult(BaseModel):
    """An interval between two notes."""

    status: Literal["success"] = "success"
    lower: str
    upper: str
    interval: str
    semitones: int
    perfect: bool

    @classmethod
    def from_notes(cls, lower: Note, upper: Note, interval: Interval) -> IntervalResult:
        return cls(
            lower=str(lower),
            upper=str(upper),
            interval=str(interval),
            semitones=interval.semitones,
            perfect=interval.is_perfect,
        )


class ChordResult(BaseModel):
    """A spelled chord."""

    status: Literal["success"] = "success"
    name: str
    inversion: int = 0
    notes: list[str]
    intervals: list[str]

    @classmethod
    def from_chord(cls, name: str, chord: Chord, inversion: int = 0) -> ChordResult:
        return cls(
            name=name,
            inversion=inversion,
            notes=[str(note) for note in chord],
            intervals=[str(interval) for interval in chord.intervals],
        )


class ScaleResult(BaseModel):
    """A spelled scale."""

    status: Literal["success"] = "success"
    name: str
    notes: list[str]
    steps: list[str]

    @classmethod
    def from_scale(cls, name: str, scale: Scale) -> ScaleResult:
        return cls(
            name=name,
            notes=[str(note) for note in scale],
            steps=[str(interval) for interval in scale.configuration],
        )


class PresetListResult(BaseModel):
    """Available presets."""

    status: Literal["success"] = "success"
    presets: list[IntervalPattern]
    count: int


class ErrorResult(BaseModel):
    """A failed request."""

    status: Literal["error"] = "error"
    kind: str
    message: str

    @classmethod
    def from_error(cls, error: MusicTheoryError) -> ErrorResult:
        return cls(kind=error.kind.value, message=error.message)
