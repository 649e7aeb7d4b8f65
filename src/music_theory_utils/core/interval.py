"""
Interval primitive - quality + generic size.

An interval is spelled, not just counted: a minor third and an augmented
second both span three semitones but are different intervals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from music_theory_utils.constants import Quality
from music_theory_utils.core.lookup import BidirectionalLookup
from music_theory_utils.errors import MusicTheoryError

# Simple interval size -> half steps above the lower note
SIMPLE_INTERVAL_VALUES: BidirectionalLookup[int, int] = BidirectionalLookup(
    [(1, 0), (2, 2), (3, 4), (4, 5), (5, 7), (6, 9), (7, 11)]
)

# Augmented raises a perfect interval by one half step, diminished lowers it
PERFECT_QUALITY_VALUES: BidirectionalLookup[Quality, int] = BidirectionalLookup(
    [(Quality.PERFECT, 0), (Quality.AUGMENTED, 1), (Quality.DIMINISHED, -1)]
)

# Major is the reference for imperfect intervals
IMPERFECT_QUALITY_VALUES: BidirectionalLookup[Quality, int] = BidirectionalLookup(
    [
        (Quality.DIMINISHED, -2),
        (Quality.MINOR, -1),
        (Quality.MAJOR, 0),
        (Quality.AUGMENTED, 1),
    ]
)

_SIZE_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Interval:
    """
    A spelled interval: quality plus generic size.

    Size 1 is a unison, 8 an octave, anything above 8 is compound.

    Examples:
        Interval(Quality.MINOR, 3)  = minor third
        Interval.parse("P5")        = perfect fifth
        Interval.parse("A11")       = augmented eleventh

    Immutable and hashable.
    """

    quality: Quality
    size: int

    # Named intervals (defined after class)
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    A2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise MusicTheoryError.invalid_input(
                "size", "The interval size must be a positive integer", value=self.size
            )
        try:
            quality = Quality(self.quality)
        except ValueError:
            raise MusicTheoryError.invalid_input(
                "quality", "This is not a valid interval quality", value=self.quality
            ) from None
        if self.is_perfect_size(self.size):
            table = PERFECT_QUALITY_VALUES
        else:
            table = IMPERFECT_QUALITY_VALUES
        if quality not in table:
            raise MusicTheoryError.invalid_input(
                "quality",
                "This quality does not exist for this interval class",
                value=quality.value,
                size=self.size,
            )
        object.__setattr__(self, "quality", quality)

    @classmethod
    def parse(cls, text: str) -> Interval:
        """
        Parse an interval from a string like 'm3', 'P5', 'd24'.

        The first character is the quality, the rest is the size.
        """
        quality, size = text[:1], text[1:]
        if not quality:
            raise MusicTheoryError.invalid_input("str", "The interval string is empty")
        if not _SIZE_PATTERN.fullmatch(size):
            raise MusicTheoryError.invalid_input(
                "str", "The interval size is not an integer", value=text
            )
        return cls(quality, int(size))  # type: ignore[arg-type]

    @staticmethod
    def is_perfect_size(size: int) -> bool:
        """Unisons, fourths, fifths and their compounds are perfect intervals."""
        return size % 7 in (1, 4, 5)

    @property
    def is_perfect(self) -> bool:
        return self.is_perfect_size(self.size)

    @property
    def semitones(self) -> int:
        """
        Number of half steps spanned by the interval.

        m3 -> 3, P5 -> 7, m10 -> 15, P15 -> 24
        """
        remaining = self.size - 8  # past the first octave
        if remaining == 0:
            octaves = 1
        elif remaining < 0:
            octaves = 0
        else:
            octaves = 1 + remaining // 7

        simple = SIMPLE_INTERVAL_VALUES[(self.size + octaves) % 8]
        table = PERFECT_QUALITY_VALUES if self.is_perfect else IMPERFECT_QUALITY_VALUES
        delta = table[self.quality]
        return octaves * 12 + simple + delta

    def equals(self, other: Interval, enharmonic: bool = False) -> bool:
        """
        Compare two intervals.

        Args:
            other: The interval to compare with
            enharmonic: Compare semitone counts only (P15 equals d16)

        Returns:
            True if equal
        """
        if enharmonic:
            return self.semitones == other.semitones
        return self == other

    def __str__(self) -> str:
        return f"{self.quality.value}{self.size}"

    def __repr__(self) -> str:
        return f"Interval.parse({str(self)!r})"


# Initialize class constants after class is defined
Interval.P1 = Interval(Quality.PERFECT, 1)
Interval.m2 = Interval(Quality.MINOR, 2)
Interval.M2 = Interval(Quality.MAJOR, 2)
Interval.A2 = Interval(Quality.AUGMENTED, 2)
Interval.m3 = Interval(Quality.MINOR, 3)
Interval.M3 = Interval(Quality.MAJOR, 3)
Interval.P4 = Interval(Quality.PERFECT, 4)
Interval.A4 = Interval(Quality.AUGMENTED, 4)
Interval.d5 = Interval(Quality.DIMINISHED, 5)
Interval.P5 = Interval(Quality.PERFECT, 5)
Interval.m6 = Interval(Quality.MINOR, 6)
Interval.M6 = Interval(Quality.MAJOR, 6)
Interval.m7 = Interval(Quality.MINOR, 7)
Interval.M7 = Interval(Quality.MAJOR, 7)
Interval.P8 = Interval(Quality.PERFECT, 8)
