"""
Preset models - named interval patterns.

A preset names an interval stack (a chord) or a step pattern (a scale),
so front ends can say 'dominant_seventh' instead of listing intervals.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from music_theory_utils.core.interval import Interval


class PatternKind(str, Enum):
    """What an interval pattern builds."""

    CHORD = "chord"
    SCALE = "scale"


class IntervalPattern(BaseModel):
    """A named list of intervals, e.g. major_triad = [M3, m3]."""

    name: str = Field(..., min_length=1, description="Preset name, e.g. 'major_triad'")
    kind: PatternKind = Field(..., description="Chord stack or scale steps")
    intervals: list[str] = Field(..., description="Interval strings, e.g. ['M3', 'm3']")
    description: str = Field(default="", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("A pattern needs at least one interval")
        for text in v:
            Interval.parse(text)
        return v

    def to_intervals(self) -> tuple[Interval, ...]:
        """Parse the interval strings."""
        return tuple(Interval.parse(text) for text in self.intervals)

    @classmethod
    def from_intervals(
        cls,
        name: str,
        kind: PatternKind,
        intervals: tuple[Interval, ...],
        description: str = "",
    ) -> IntervalPattern:
        """Build a preset from interval values."""
        return cls(
            name=name,
            kind=kind,
            intervals=[str(interval) for interval in intervals],
            description=description,
        )
