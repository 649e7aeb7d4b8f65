"""
Note primitives - RelativeNote and AbsoluteNote.

A note is a letter plus an accidental. A relative note is a pitch class with
no register (C#). An absolute note is bound to a piano key (C#4).

Positions are counted in half steps. Relative notes live in 0-11 (C = 0).
Absolute notes are counted from A0 = 0, so C0 = -9 and C8 = 87.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from music_theory_utils.constants import (
    C0_POSITION,
    C8_POSITION,
    MAX_OCTAVE,
    MIN_OCTAVE,
    POSITIONS_PER_OCTAVE,
    Accidental,
    ErrorMessages,
    Letter,
    Quality,
)
from music_theory_utils.core.interval import Interval
from music_theory_utils.core.lookup import BidirectionalLookup
from music_theory_utils.errors import MusicTheoryError

# Position of each letter within an octave, starting from C
LETTER_VALUES: BidirectionalLookup[Letter, int] = BidirectionalLookup(
    [
        (Letter.C, 0),
        (Letter.D, 2),
        (Letter.E, 4),
        (Letter.F, 5),
        (Letter.G, 7),
        (Letter.A, 9),
        (Letter.B, 11),
    ]
)

# Zero-indexed degrees of the C major scale
DEGREE_VALUES: BidirectionalLookup[Letter, int] = BidirectionalLookup(
    (letter, index) for index, letter in enumerate(Letter)
)

# How far each accidental moves a letter, in half steps
ACCIDENTAL_VALUES: BidirectionalLookup[Accidental, int] = BidirectionalLookup(
    [
        (Accidental.FLAT, -1),
        (Accidental.DOUBLE_FLAT, -2),
        (Accidental.TRIPLE_FLAT, -3),
        (Accidental.SHARP, 1),
        (Accidental.DOUBLE_SHARP, 2),
        (Accidental.TRIPLE_SHARP, 3),
        (Accidental.NATURAL, 0),
    ]
)

# Order in which spellings are tried when adding an interval
_SPELLING_PRIORITY: tuple[Accidental, ...] = (
    Accidental.NATURAL,
    Accidental.SHARP,
    Accidental.FLAT,
    Accidental.DOUBLE_SHARP,
    Accidental.DOUBLE_FLAT,
    Accidental.TRIPLE_SHARP,
    Accidental.TRIPLE_FLAT,
)

# Quality guesses when naming the interval between two notes
_IMPERFECT_GUESSES = (Quality.MAJOR, Quality.MINOR, Quality.AUGMENTED, Quality.DIMINISHED)
_PERFECT_GUESSES = (Quality.PERFECT, Quality.DIMINISHED, Quality.AUGMENTED)

_NOTE_PATTERN = re.compile(r"([A-G])(#x|#|x|b+)?([0-9])?")


def _coerce_letter(letter: Letter | str) -> Letter:
    try:
        return Letter(letter)
    except ValueError:
        raise MusicTheoryError.invalid_input(
            "letter", "This is not a valid note letter", value=letter
        ) from None


def _coerce_accidental(accidental: Accidental | str | None) -> Accidental:
    try:
        return Accidental(accidental or "")
    except ValueError:
        raise MusicTheoryError.invalid_input(
            "accidental", "This is not a valid accidental", value=accidental
        ) from None


class Note(ABC):
    """
    Base class for RelativeNote and AbsoluteNote.

    Holds the arithmetic shared by both kinds. Operations that combine two
    notes require both to be of the same kind and raise a NOT_SAME_TYPE
    MusicTheoryError otherwise.
    """

    letter: Letter
    accidental: Accidental

    C0_POSITION: ClassVar[int] = C0_POSITION
    C8_POSITION: ClassVar[int] = C8_POSITION
    POSITIONS_PER_OCTAVE: ClassVar[int] = POSITIONS_PER_OCTAVE

    @property
    def is_absolute(self) -> bool:
        return isinstance(self, AbsoluteNote)

    @property
    def offset(self) -> int:
        """Letter position plus accidental, without wrapping (B# -> 12, Cb -> -1)."""
        return LETTER_VALUES[self.letter] + ACCIDENTAL_VALUES[self.accidental]

    @property
    @abstractmethod
    def value(self) -> int:
        """Position in half steps."""

    @staticmethod
    def of(
        letter: Letter | str,
        accidental: Accidental | str = Accidental.NATURAL,
        octave: int | None = None,
    ) -> Note:
        """Create a relative note, or an absolute one when an octave is given."""
        if octave is None:
            return RelativeNote(letter, accidental)  # type: ignore[arg-type]
        return AbsoluteNote(letter, accidental, octave)  # type: ignore[arg-type]

    @staticmethod
    def parse(text: str) -> Note:
        """
        Parse a note from a string like 'C#', 'Gbb', 'Cbb5', 'E4'.

        Raises:
            MusicTheoryError: INVALID_INPUT if the letter, accidental or octave is invalid
        """
        match = _NOTE_PATTERN.fullmatch(text)
        if not match:
            raise MusicTheoryError.invalid_input(
                "str", "The whole string representation is invalid", value=text
            )
        letter, accidental, octave = match.groups()
        if (accidental or "") not in ACCIDENTAL_VALUES:
            raise MusicTheoryError.invalid_input(
                "accidental", "This is not a valid accidental", value=accidental
            )
        if octave is not None and not MIN_OCTAVE <= int(octave) <= MAX_OCTAVE:
            raise MusicTheoryError.invalid_input(
                "octave", "This is not a valid octave", value=int(octave)
            )
        return Note.of(letter, accidental or "", None if octave is None else int(octave))

    @staticmethod
    def from_absolute_position(
        position: int, accidental: Accidental | str = Accidental.NATURAL
    ) -> AbsoluteNote:
        """
        Spell the piano key at `position` with the given accidental.

        Args:
            position: Absolute position, C0 (-9) to C8 (87)
            accidental: Resolves the enharmonic ambiguity (39 -> C4, or Dbb4 with 'bb')

        Returns:
            The absolute note

        Raises:
            MusicTheoryError: INVALID_INPUT for non-integers, OUT_OF_RANGE outside C0..C8,
                IMPOSSIBLE_QUALITY if no letter takes this accidental at this position
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise MusicTheoryError.invalid_input("value", "It is not an integer", value=position)
        if position < C0_POSITION or position > C8_POSITION:
            raise MusicTheoryError.out_of_range(position)

        accidental = _coerce_accidental(accidental)
        delta = ACCIDENTAL_VALUES[accidental]

        octave, remainder = divmod(position - C0_POSITION, POSITIONS_PER_OCTAVE)
        remainder -= delta
        # B# and Cb cross the octave boundary
        if remainder < 0:
            remainder += POSITIONS_PER_OCTAVE
            octave -= 1
        elif remainder >= POSITIONS_PER_OCTAVE:
            remainder -= POSITIONS_PER_OCTAVE
            octave += 1

        letter = LETTER_VALUES.get_rev(remainder)
        if letter is None:
            raise MusicTheoryError.impossible_quality(
                ErrorMessages.NO_ACCIDENTAL_FOR_POSITION,
                position=position,
                accidental=accidental.value,
            )
        if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
            raise MusicTheoryError.out_of_range(position, below=octave < MIN_OCTAVE)
        return AbsoluteNote(letter, accidental, octave)

    @staticmethod
    def add_letter(letter: Letter | str, degree: int) -> Letter:
        """
        Step a letter by a generic degree, ignoring accidentals.

        Degree 1 is the letter itself, 2 the next letter up, -2 the next letter down.

        Examples:
            Note.add_letter("A", 2)   -> B
            Note.add_letter("C", 13)  -> A
            Note.add_letter("C", -5)  -> F

        Raises:
            MusicTheoryError: INVALID_INPUT if degree is 0 or not an integer
        """
        if isinstance(degree, bool) or not isinstance(degree, int) or degree == 0:
            raise MusicTheoryError.invalid_input("degree", "Degree is invalid", value=degree)
        letter = _coerce_letter(letter)
        index = DEGREE_VALUES[letter]

        if degree == 1:
            return letter
        if degree > 1:
            step = (index + degree - 1) % 7
        else:
            # Truncated remainder, the sign follows the dividend
            remainder = (index + degree) - 7 * int((index + degree) / 7)
            step = remainder + 1 if remainder > 0 else remainder + 8
        return DEGREE_VALUES.rev(step % 7)

    @staticmethod
    def same_type(*notes: Note) -> bool:
        """True if all notes are relative or all are absolute (and for no notes)."""
        return same_type(*notes)

    @abstractmethod
    def difference(self, other: Note) -> int:
        """
        Half steps from this note to `other`.

        This note is exclusive, `other` inclusive. May be negative when `other`
        is lower.

        Examples:
            C -> A          = 9
            F# -> C         = -6
            C3 -> E4        = 16
            D4 -> F2        = -21

        Raises:
            MusicTheoryError: NOT_SAME_TYPE if one note is relative and the other absolute
        """

    @abstractmethod
    def _octave_span(self, other: Note) -> int:
        """Whole octaves between this note and `other`."""

    def _check_same_type(self, other: Note) -> None:
        if not same_type(self, other):
            raise MusicTheoryError.not_same_type()

    def add_interval(self, interval: Interval) -> Note:
        """
        Add an interval on top of this note.

        The target letter comes from the interval size, the accidental is the
        first spelling (natural, #, b, x, bb, #x, bbb) that lands on the right
        half step.

        Examples:
            A + M3   = C#
            C# + P5  = G#
            A3 + m10 = C5

        Raises:
            MusicTheoryError: IMPOSSIBLE_QUALITY if no accidental fits
        """
        next_letter = Note.add_letter(self.letter, interval.size)
        semitones = interval.semitones
        target = self._chromatic_position(semitones)
        letter_value = LETTER_VALUES[next_letter]

        for accidental in _SPELLING_PRIORITY:
            if (letter_value + ACCIDENTAL_VALUES[accidental]) % POSITIONS_PER_OCTAVE == target:
                return self._spell(next_letter, accidental, semitones)

        raise MusicTheoryError.impossible_quality(
            ErrorMessages.NO_ACCIDENTAL_FOR_INTERVAL, note=str(self), interval=str(interval)
        )

    @abstractmethod
    def _chromatic_position(self, semitones: int) -> int:
        """Position within the octave, 0-11, after moving up `semitones`."""

    @abstractmethod
    def _spell(self, letter: Letter, accidental: Accidental, semitones: int) -> Note:
        """Build the note reached by moving up `semitones` with this spelling."""

    def interval_to(self, other: Note) -> Interval:
        """
        Name the interval from this note up to `other`.

        The size counts letters (plus 7 per extra octave for absolute notes),
        the quality is the first of M/m/A/d (or P/d/A for perfect sizes) whose
        span matches the distance between the notes.

        Examples:
            A -> F#        = M6
            Bb -> Fb       = d5
            F#4 -> G#6     = M16

        Raises:
            MusicTheoryError: NOT_SAME_TYPE for mixed note kinds,
                IMPOSSIBLE_QUALITY if no quality spans the distance
        """
        self._check_same_type(other)
        relative_size = DEGREE_VALUES[other.letter] - DEGREE_VALUES[self.letter] + 1
        if relative_size <= 0:
            relative_size += 7

        octaves = self._octave_span(other)
        if octaves < 1:
            size = relative_size
        elif octaves == 1:
            size = 8 + relative_size - 1
        else:
            size = 8 + (octaves - 1) * 7 + (relative_size - 1)

        distance = abs(self.difference(other))
        guesses = _PERFECT_GUESSES if Interval.is_perfect_size(size) else _IMPERFECT_GUESSES
        for quality in guesses:
            candidate = Interval(quality, size)
            if candidate.semitones == distance:
                return candidate

        raise MusicTheoryError.impossible_quality(
            ErrorMessages.NO_QUALITY_FOR_INTERVAL.format(hint=str(other)),
            lower=str(self),
            upper=str(other),
        )

    def equals(self, other: Note, enharmonic: bool = False) -> bool:
        """
        Compare two notes.

        Args:
            other: The note to compare with
            enharmonic: Compare positions only, so A equals Bbb

        Returns:
            True if equal
        """
        if enharmonic:
            return self.value == other.value
        return self == other

    def to_relative(self) -> RelativeNote:
        """Drop the octave."""
        return RelativeNote(self.letter, self.accidental)

    def with_octave(self, octave: int) -> AbsoluteNote:
        """Place this spelling in the given octave."""
        return AbsoluteNote(self.letter, self.accidental, octave)


@dataclass(frozen=True)
class RelativeNote(Note):
    """
    A pitch class with a spelling and no register.

    Examples:
        RelativeNote("C", "#")  = C#
        RelativeNote("B", "b")  = Bb

    Immutable and hashable.
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _coerce_letter(self.letter))
        object.__setattr__(self, "accidental", _coerce_accidental(self.accidental))

    @property
    def value(self) -> int:
        """Position within the octave, 0-11 (B# -> 0, Cb -> 11)."""
        return self.offset % POSITIONS_PER_OCTAVE

    def difference(self, other: Note) -> int:
        self._check_same_type(other)
        diff = other.value - self.value
        if diff < 0:
            return -(POSITIONS_PER_OCTAVE + diff)
        return diff

    def _octave_span(self, other: Note) -> int:
        return 0

    def _chromatic_position(self, semitones: int) -> int:
        return (self.value + semitones) % POSITIONS_PER_OCTAVE

    def _spell(self, letter: Letter, accidental: Accidental, semitones: int) -> Note:
        return RelativeNote(letter, accidental)

    def to_relative(self) -> RelativeNote:
        return self

    def __str__(self) -> str:
        return f"{self.letter.value}{self.accidental.value}"

    def __repr__(self) -> str:
        return f"RelativeNote({self.letter.value!r}, {self.accidental.value!r})"


@dataclass(frozen=True)
class AbsoluteNote(Note):
    """
    A spelled note bound to a piano key.

    The octave runs 0-8. Extreme accidentals may push the value past the
    octave band (B#3 sounds like C4).

    Examples:
        AbsoluteNote("C", "", 4)   = C4 (middle C, position 39)
        AbsoluteNote("A", "", 0)   = A0 (position 0)

    Immutable and hashable.
    """

    letter: Letter
    accidental: Accidental
    octave: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _coerce_letter(self.letter))
        object.__setattr__(self, "accidental", _coerce_accidental(self.accidental))
        if (
            isinstance(self.octave, bool)
            or not isinstance(self.octave, int)
            or not MIN_OCTAVE <= self.octave <= MAX_OCTAVE
        ):
            raise MusicTheoryError.invalid_input(
                "octave", "This is not a valid octave", value=self.octave
            )

    @property
    def value(self) -> int:
        """Absolute position, A0 = 0."""
        return C0_POSITION + self.octave * POSITIONS_PER_OCTAVE + self.offset

    def difference(self, other: Note) -> int:
        self._check_same_type(other)
        return other.value - self.value

    def _octave_span(self, other: Note) -> int:
        return abs(self.difference(other)) // POSITIONS_PER_OCTAVE

    def _chromatic_position(self, semitones: int) -> int:
        return (self.value - C0_POSITION + semitones) % POSITIONS_PER_OCTAVE

    def _spell(self, letter: Letter, accidental: Accidental, semitones: int) -> Note:
        return Note.from_absolute_position(self.value + semitones, accidental)

    def __str__(self) -> str:
        return f"{self.letter.value}{self.accidental.value}{self.octave}"

    def __repr__(self) -> str:
        return (
            f"AbsoluteNote({self.letter.value!r}, {self.accidental.value!r}, {self.octave})"
        )


def same_type(*notes: Note) -> bool:
    """
    Check that all notes are relative or all are absolute.

    Returns True for no notes.
    """
    if not notes:
        return True
    first_is_absolute = notes[0].is_absolute
    return all(note.is_absolute == first_is_absolute for note in notes)


def stack_notes(root: Note, intervals: Iterable[Interval]) -> Iterator[Note]:
    """
    Yield the root, then each note reached by adding the intervals in order.

    Every call starts a fresh walk from the root.
    """
    current = root
    yield current
    for interval in intervals:
        current = current.add_interval(interval)
        yield current
