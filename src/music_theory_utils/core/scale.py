"""
Scale primitive - a root note plus a step pattern.

Scales are interval patterns from a root. The steps are from one degree to
the next (not cumulative), and the modes below close at the octave.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from music_theory_utils.core.interval import Interval
from music_theory_utils.core.note import Note, stack_notes
from music_theory_utils.errors import MusicTheoryError


@dataclass(frozen=True)
class Scale:
    """
    A scale spelled from its root.

    A major scale is: M2 M2 m2 M2 M2 M2 m2

    Examples:
        Scale(RelativeNote("A"), Scale.MAJOR)  = A B C# D E F# G# A
        Scale(RelativeNote("G"), Scale.LOCRIAN) = G Ab Bb C Db Eb F G

    Immutable and hashable.
    """

    root: Note
    configuration: tuple[Interval, ...]

    # Diatonic modes (defined after class)
    MAJOR: ClassVar[tuple[Interval, ...]]
    IONIAN: ClassVar[tuple[Interval, ...]]
    DORIAN: ClassVar[tuple[Interval, ...]]
    PHRYGIAN: ClassVar[tuple[Interval, ...]]
    LYDIAN: ClassVar[tuple[Interval, ...]]
    MIXOLYDIAN: ClassVar[tuple[Interval, ...]]
    MINOR: ClassVar[tuple[Interval, ...]]
    AEOLIAN: ClassVar[tuple[Interval, ...]]
    LOCRIAN: ClassVar[tuple[Interval, ...]]

    def __post_init__(self) -> None:
        configuration = tuple(self.configuration)
        if not configuration:
            raise MusicTheoryError.invalid_input(
                "configuration", "A scale must have at least one step"
            )
        object.__setattr__(self, "configuration", configuration)

    def __iter__(self) -> Iterator[Note]:
        return stack_notes(self.root, self.configuration)

    def notes(self) -> list[Note]:
        """All scale notes, root first (the modes end on the octave)."""
        return list(self)

    def equals(self, other: Scale) -> bool:
        """Same root spelling and the same steps in the same order."""
        return self.root.equals(other.root) and self.configuration == other.configuration

    def __str__(self) -> str:
        return " ".join(str(note) for note in self)


_M2 = Interval.M2  # Whole step
_m2 = Interval.m2  # Half step

Scale.MAJOR = (_M2, _M2, _m2, _M2, _M2, _M2, _m2)
Scale.IONIAN = Scale.MAJOR
Scale.DORIAN = (_M2, _m2, _M2, _M2, _M2, _m2, _M2)
Scale.PHRYGIAN = (_m2, _M2, _M2, _M2, _m2, _M2, _M2)
Scale.LYDIAN = (_M2, _M2, _M2, _m2, _M2, _M2, _m2)
Scale.MIXOLYDIAN = (_M2, _M2, _m2, _M2, _M2, _m2, _M2)
Scale.MINOR = (_M2, _m2, _M2, _M2, _m2, _M2, _M2)
Scale.AEOLIAN = Scale.MINOR
Scale.LOCRIAN = (_m2, _M2, _M2, _m2, _M2, _M2, _M2)
