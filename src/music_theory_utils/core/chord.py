"""
Chord primitive - a root note plus a stack of intervals.

Intervals are stacked, not measured from the root: a major triad is
M3 then m3 (C -> E -> G).
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import ClassVar

from music_theory_utils.constants import MAX_OCTAVE, POSITIONS_PER_OCTAVE
from music_theory_utils.core.interval import Interval
from music_theory_utils.core.note import AbsoluteNote, Note, stack_notes
from music_theory_utils.errors import MusicTheoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Chord:
    """
    A chord spelled from its root.

    Each interval is the distance from one chord tone to the next, so a chord
    has one more note than it has intervals.

    Examples:
        Chord(RelativeNote("C"), Chord.MAJOR_TRIAD)          = C E G
        Chord(RelativeNote("A", "b"), Chord.DOMINANT_SEVENTH) = Ab C Eb Gb
        Chord(AbsoluteNote("F", "", 3), Chord.DOMINANT_SEVENTH) = F3 A3 C4 Eb4

    Immutable and hashable.
    """

    root: Note
    intervals: tuple[Interval, ...]

    # Common interval stacks (defined after class)
    MAJOR_TRIAD: ClassVar[tuple[Interval, ...]]
    MINOR_TRIAD: ClassVar[tuple[Interval, ...]]
    DIMINISHED_TRIAD: ClassVar[tuple[Interval, ...]]
    MAJOR_SEVENTH: ClassVar[tuple[Interval, ...]]
    MINOR_SEVENTH: ClassVar[tuple[Interval, ...]]
    DOMINANT_SEVENTH: ClassVar[tuple[Interval, ...]]
    DIMINISHED_SEVENTH: ClassVar[tuple[Interval, ...]]
    HALF_DIMINISHED_SEVENTH: ClassVar[tuple[Interval, ...]]

    def __post_init__(self) -> None:
        # Accept any iterable, store a tuple
        intervals = tuple(self.intervals)
        if not intervals:
            raise MusicTheoryError.invalid_input(
                "intervals", "A chord must have at least two notes"
            )
        object.__setattr__(self, "intervals", intervals)

    def __iter__(self) -> Iterator[Note]:
        """Walk the chord tones from the root up."""
        return stack_notes(self.root, self.intervals)

    def __len__(self) -> int:
        return len(self.intervals) + 1

    def notes(self) -> list[Note]:
        """All chord tones, root first."""
        return list(self)

    def invert(self, times: int) -> Chord:
        """
        Invert the chord `times` times.

        Each inversion moves the lowest note to the top. Absolute notes are
        raised by as many octaves as needed to sit above the current top note
        (C2 E2 G2 -> E2 G2 C3).

        Args:
            times: How many times to invert

        Returns:
            A new chord; this chord is left unchanged

        Raises:
            MusicTheoryError: INVALID_INPUT for a negative count,
                OUT_OF_RANGE if a note would have to move past octave 8
        """
        if isinstance(times, bool) or not isinstance(times, int) or times < 0:
            raise MusicTheoryError.invalid_input(
                "times", "Inversions must be a non-negative integer", value=times
            )

        notes = self.notes()
        for _ in range(times):
            note = notes.pop(0)
            if isinstance(note, AbsoluteNote):
                diff = notes[-1].difference(note)
                if diff < 0:
                    octaves = math.ceil(-diff / POSITIONS_PER_OCTAVE)
                    if note.octave + octaves > MAX_OCTAVE:
                        raise MusicTheoryError.out_of_range(
                            note.value + octaves * POSITIONS_PER_OCTAVE
                        )
                    logger.debug("Raising %s by %d octave(s) above %s", note, octaves, notes[-1])
                    note = note.with_octave(note.octave + octaves)
            notes.append(note)

        intervals = [lower.interval_to(upper) for lower, upper in pairwise(notes)]
        return Chord(notes[0], intervals)

    def equals(
        self,
        other: Chord,
        enharmonic: bool = False,
        ignore_inversion: bool = False,
    ) -> bool:
        """
        Compare two chords.

        By default the roots and every interval must match exactly, in order.

        Args:
            other: The chord to compare with
            enharmonic: Compare by sound (C# matches Db, A3 matches d4)
            ignore_inversion: Compare the sets of chord tones regardless of
                order and octave, so C E G matches E G C

        Returns:
            True if equal
        """
        if ignore_inversion:
            return self._tone_counts(enharmonic) == other._tone_counts(enharmonic)

        if len(self.intervals) != len(other.intervals):
            return False
        if not self.root.equals(other.root, enharmonic):
            return False
        return all(
            mine.equals(theirs, enharmonic)
            for mine, theirs in zip(self.intervals, other.intervals, strict=True)
        )

    def _tone_counts(self, enharmonic: bool) -> Counter[object]:
        tones = (note.to_relative() for note in self)
        if enharmonic:
            return Counter(tone.value for tone in tones)
        return Counter(tones)

    def __str__(self) -> str:
        return " ".join(str(note) for note in self)

    def __repr__(self) -> str:
        intervals = ", ".join(str(interval) for interval in self.intervals)
        return f"Chord({self.root!r}, [{intervals}])"


# Define common chords
Chord.MAJOR_TRIAD = (Interval.M3, Interval.m3)
Chord.MINOR_TRIAD = (Interval.m3, Interval.M3)
Chord.DIMINISHED_TRIAD = (Interval.m3, Interval.m3)
Chord.MAJOR_SEVENTH = (Interval.M3, Interval.m3, Interval.M3)
Chord.MINOR_SEVENTH = (Interval.m3, Interval.M3, Interval.m3)
Chord.DOMINANT_SEVENTH = (Interval.M3, Interval.m3, Interval.m3)
Chord.DIMINISHED_SEVENTH = (Interval.m3, Interval.m3, Interval.m3)
Chord.HALF_DIMINISHED_SEVENTH = (Interval.m3, Interval.m3, Interval.M3)
