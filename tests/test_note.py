"""
Tests for note arithmetic.

Tests cover:
- Parsing and construction of RelativeNote / AbsoluteNote
- value and difference
- from_absolute_position and add_letter
- add_interval and interval_to
- equality
"""

import pytest

from music_theory_utils import (
    AbsoluteNote,
    Accidental,
    ErrorKind,
    Interval,
    Letter,
    MusicTheoryError,
    Note,
    RelativeNote,
    same_type,
)


def _kind(exc_info: pytest.ExceptionInfo[MusicTheoryError]) -> ErrorKind:
    return exc_info.value.kind


class TestParse:
    """Tests for Note.parse."""

    def test_without_octaves(self) -> None:
        """Relative notes parse into RelativeNote."""
        assert Note.parse("C#") == RelativeNote("C", "#")
        assert Note.parse("Cx") == RelativeNote("C", "x")
        assert Note.parse("Gbb") == RelativeNote("G", "bb")
        assert Note.parse("Abbb") == RelativeNote("A", "bbb")
        assert Note.parse("B#x") == RelativeNote("B", "#x")
        assert Note.parse("E") == RelativeNote("E")

    def test_with_octaves(self) -> None:
        """Notes with an octave parse into AbsoluteNote."""
        assert Note.parse("A0") == AbsoluteNote("A", "", 0)
        assert Note.parse("Cx1") == AbsoluteNote("C", "x", 1)
        assert Note.parse("Bbb4") == AbsoluteNote("B", "bb", 4)
        assert Note.parse("Ebbb7") == AbsoluteNote("E", "bbb", 7)
        assert Note.parse("F#x5") == AbsoluteNote("F", "#x", 5)
        assert Note.parse("E3") == AbsoluteNote("E", "", 3)

    @pytest.mark.parametrize(
        "text", ["H#x5", "I3", "Abbbbb5", "C#x##4", "Abb9", "C-3", "", "C#\n", "C4\n", "C٤"]
    )
    def test_invalid(self, text: str) -> None:
        """Bad letters, accidentals and octaves are rejected."""
        with pytest.raises(MusicTheoryError) as exc_info:
            Note.parse(text)
        assert _kind(exc_info) == ErrorKind.INVALID_INPUT

    def test_str_round_trip(self) -> None:
        """str() gives back the parsed text."""
        for text in ("A#", "A", "Cbb5", "A7", "B#x0"):
            assert str(Note.parse(text)) == text


class TestConstruction:
    """Tests for RelativeNote / AbsoluteNote constructors."""

    def test_coerces_strings(self) -> None:
        """Letter and accidental strings become enums."""
        note = RelativeNote("C", "#")
        assert note.letter is Letter.C
        assert note.accidental is Accidental.SHARP

    def test_of(self) -> None:
        """Note.of picks the kind from the octave."""
        assert Note.of("D", "b") == RelativeNote("D", "b")
        assert Note.of("D", "b", 4) == AbsoluteNote("D", "b", 4)
        assert Note.of("D", "b", 0) == AbsoluteNote("D", "b", 0)

    def test_invalid_letter(self) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            RelativeNote("H")
        assert _kind(exc_info) == ErrorKind.INVALID_INPUT

    def test_invalid_accidental(self) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            RelativeNote("C", "##")
        assert _kind(exc_info) == ErrorKind.INVALID_INPUT

    @pytest.mark.parametrize("octave", [-1, 9, 4.0, True])
    def test_invalid_octave(self, octave: object) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            AbsoluteNote("C", "", octave)  # type: ignore[arg-type]
        assert _kind(exc_info) == ErrorKind.INVALID_INPUT

    def test_base_is_abstract(self) -> None:
        """Only the relative and absolute variants can be created."""
        with pytest.raises(TypeError):
            Note()  # type: ignore[abstract]

    def test_immutable(self) -> None:
        """Notes are frozen."""
        note = AbsoluteNote("C", "", 4)
        with pytest.raises(AttributeError):
            note.octave = 5  # type: ignore[misc]

    def test_conversions(self) -> None:
        """Notes can drop or gain an octave."""
        assert AbsoluteNote("F", "#", 3).to_relative() == RelativeNote("F", "#")
        assert RelativeNote("F", "#").with_octave(3) == AbsoluteNote("F", "#", 3)

    def test_same_type(self) -> None:
        """same_type checks relative/absolute agreement."""
        assert same_type() is True
        assert same_type(RelativeNote("A"), RelativeNote("A")) is True
        assert same_type(AbsoluteNote("A", "", 4), AbsoluteNote("A", "", 5)) is True
        assert same_type(AbsoluteNote("A", "", 4), RelativeNote("A")) is False
        assert Note.same_type(RelativeNote("A"), AbsoluteNote("A", "", 5)) is False


class TestValue:
    """Tests for note values."""

    def test_relative(self) -> None:
        assert RelativeNote("C", "#").value == 1
        assert RelativeNote("G", "b").value == 6
        assert RelativeNote("D", "x").value == 4
        assert RelativeNote("A", "bb").value == 7

    def test_relative_wraps_after_b(self) -> None:
        assert RelativeNote("B", "x").value == 1
        assert RelativeNote("B", "#").value == 0

    def test_relative_wraps_below_c(self) -> None:
        assert RelativeNote("C", "bb").value == 10
        assert RelativeNote("C", "b").value == 11

    def test_absolute(self) -> None:
        """Absolute values count from A0 = 0."""
        assert AbsoluteNote("A", "", 0).value == 0
        assert AbsoluteNote("C", "", 0).value == Note.C0_POSITION
        assert AbsoluteNote("C", "", 1).value == 3
        assert AbsoluteNote("D", "#", 2).value == 18
        assert AbsoluteNote("E", "b", 4).value == 42
        assert AbsoluteNote("G", "bb", 5).value == 56
        assert AbsoluteNote("B", "b", 7).value == 85
        assert AbsoluteNote("C", "", 8).value == Note.C8_POSITION

    def test_absolute_does_not_wrap(self) -> None:
        """B#3 spills over to the value of C4."""
        assert AbsoluteNote("B", "#", 3).value == AbsoluteNote("C", "", 4).value


class TestDifference:
    """Tests for Note.difference."""

    def test_relative(self) -> None:
        assert RelativeNote("C").difference(RelativeNote("A")) == 9
        assert RelativeNote("G", "b").difference(RelativeNote("A", "b")) == 2

    def test_relative_negative_side(self) -> None:
        assert RelativeNote("F", "#").difference(RelativeNote("C")) == -6
        assert RelativeNote("B", "b").difference(RelativeNote("D", "#")) == -5
        assert RelativeNote("A").difference(RelativeNote("F", "#")) == -9

    def test_absolute_simple(self) -> None:
        assert AbsoluteNote("C", "", 4).difference(AbsoluteNote("E", "", 4)) == 4
        assert AbsoluteNote("D", "b", 6).difference(AbsoluteNote("A", "#", 6)) == 9

    def test_absolute_compound(self) -> None:
        assert AbsoluteNote("C", "", 3).difference(AbsoluteNote("E", "", 4)) == 16
        assert AbsoluteNote("D", "b", 2).difference(AbsoluteNote("A", "#", 6)) == 57

    def test_absolute_negative_side(self) -> None:
        assert AbsoluteNote("D", "", 4).difference(AbsoluteNote("F", "", 3)) == -9
        assert AbsoluteNote("F", "b", 6).difference(AbsoluteNote("A", "", 5)) == -7
        assert AbsoluteNote("D", "", 4).difference(AbsoluteNote("F", "", 2)) == -21
        assert AbsoluteNote("F", "", 7).difference(AbsoluteNote("A", "bb", 5)) == -22

    def test_mixed_types(self) -> None:
        """Relative and absolute notes cannot be compared."""
        with pytest.raises(MusicTheoryError) as exc_info:
            AbsoluteNote("D", "#", 4).difference(RelativeNote("F", "#"))
        assert _kind(exc_info) == ErrorKind.NOT_SAME_TYPE
        with pytest.raises(MusicTheoryError) as exc_info:
            RelativeNote("C", "b").difference(AbsoluteNote("A", "bb", 5))
        assert _kind(exc_info) == ErrorKind.NOT_SAME_TYPE


class TestFromAbsolutePosition:
    """Tests for Note.from_absolute_position."""

    def test_no_accidentals(self) -> None:
        assert Note.from_absolute_position(39) == AbsoluteNote("C", "", 4)
        assert Note.from_absolute_position(77) == AbsoluteNote("D", "", 7)
        assert Note.from_absolute_position(24) == AbsoluteNote("A", "", 2)
        assert Note.from_absolute_position(-9) == AbsoluteNote("C", "", 0)
        assert Note.from_absolute_position(87) == AbsoluteNote("C", "", 8)

    def test_with_accidentals(self) -> None:
        assert Note.from_absolute_position(39, "bb") == AbsoluteNote("D", "bb", 4)
        assert Note.from_absolute_position(76, "#") == AbsoluteNote("C", "#", 7)
        assert Note.from_absolute_position(24, "x") == AbsoluteNote("G", "x", 2)
        assert Note.from_absolute_position(4, "b") == AbsoluteNote("D", "b", 1)
        assert Note.from_absolute_position(10, "bb") == AbsoluteNote("A", "bb", 1)

    def test_carries_octave(self) -> None:
        """Spellings across the B/C boundary change the octave."""
        assert Note.from_absolute_position(16, "x") == AbsoluteNote("B", "x", 1)
        assert Note.from_absolute_position(86, "b") == AbsoluteNote("C", "b", 8)

    def test_value_round_trip(self) -> None:
        """Every resolvable spelling lands back on its position."""
        for position in range(Note.C0_POSITION, Note.C8_POSITION + 1):
            for accidental in Accidental:
                try:
                    note = Note.from_absolute_position(position, accidental)
                except MusicTheoryError:
                    continue
                assert note.value == position

    def test_impossible(self) -> None:
        """No letter takes this accidental at this position."""
        with pytest.raises(MusicTheoryError) as exc_info:
            Note.from_absolute_position(1, "")
        assert _kind(exc_info) == ErrorKind.IMPOSSIBLE_QUALITY
        with pytest.raises(MusicTheoryError) as exc_info:
            Note.from_absolute_position(53, "b")
        assert _kind(exc_info) == ErrorKind.IMPOSSIBLE_QUALITY

    def test_out_of_range(self) -> None:
        with pytest.raises(MusicTheoryError, match="higher than C8") as exc_info:
            Note.from_absolute_position(12519350)
        assert _kind(exc_info) == ErrorKind.OUT_OF_RANGE
        with pytest.raises(MusicTheoryError, match="lower than C0") as exc_info:
            Note.from_absolute_position(-12519350)
        assert _kind(exc_info) == ErrorKind.OUT_OF_RANGE

    def test_octave_carry_out_of_range(self) -> None:
        """C0 spelled as B# would need octave -1."""
        with pytest.raises(MusicTheoryError, match="lower than C0") as exc_info:
            Note.from_absolute_position(-9, "#")
        assert _kind(exc_info) == ErrorKind.OUT_OF_RANGE

    def test_not_integer(self) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            Note.from_absolute_position(23.35)  # type: ignore[arg-type]
        assert _kind(exc_info) == ErrorKind.INVALID_INPUT


class TestAddLetter:
    """Tests for Note.add_letter."""

    def test_simple_positive(self) -> None:
        assert Note.add_letter("A", 2) == Letter.B
        assert Note.add_letter("C", 5) == Letter.G

    def test_compound_positive(self) -> None:
        assert Note.add_letter("A", 9) == Letter.B
        assert Note.add_letter("C", 13) == Letter.A
        assert Note.add_letter("D", 18) == Letter.G

    def test_simple_negative(self) -> None:
        assert Note.add_letter("A", -2) == Letter.G
        assert Note.add_letter("C", -5) == Letter.F

    def test_compound_negative(self) -> None:
        assert Note.add_letter("A", -9) == Letter.G
        assert Note.add_letter("C", -13) == Letter.E
        assert Note.add_letter("D", -18) == Letter.A

    def test_negative_sevenths(self) -> None:
        """Descending sevenths wrap around the letter cycle."""
        assert Note.add_letter("C", -7) == Letter.D
        assert Note.add_letter("B", -7) == Letter.C

    def test_identity(self) -> None:
        assert Note.add_letter("A", 1) == Letter.A
        assert Note.add_letter("D", 1) == Letter.D

    @pytest.mark.parametrize("degree", [0, -1.2, 2.0])
    def test_invalid_degree(self, degree: object) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            Note.add_letter("B", degree)  # type: ignore[arg-type]
        assert _kind(exc_info) == ErrorKind.INVALID_INPUT


class TestAddInterval:
    """Tests for Note.add_interval."""

    def test_major_and_minor(self) -> None:
        assert RelativeNote("A").add_interval(Interval.parse("M3")).equals(RelativeNote("C", "#"))
        assert RelativeNote("F").add_interval(Interval.parse("m3")).equals(RelativeNote("A", "b"))
        assert (
            RelativeNote("A", "b")
            .add_interval(Interval.parse("m3"))
            .equals(RelativeNote("C", "b"))
        )
        assert RelativeNote("F", "#").add_interval(Interval.parse("m3")).equals(RelativeNote("A"))

    def test_perfect(self) -> None:
        assert RelativeNote("C", "#").add_interval(Interval.P5) == RelativeNote("G", "#")
        assert RelativeNote("B", "b").add_interval(Interval.P4) == RelativeNote("E", "b")

    def test_diminished_and_augmented(self) -> None:
        assert RelativeNote("C").add_interval(Interval.parse("d6")) == RelativeNote("A", "bb")
        assert RelativeNote("F").add_interval(Interval.parse("A3")) == RelativeNote("A", "#")

    def test_absolute_same_octave(self) -> None:
        assert AbsoluteNote("E", "b", 2).add_interval(Interval.m3) == AbsoluteNote("G", "b", 2)
        assert AbsoluteNote("G", "#", 3).add_interval(Interval.M2) == AbsoluteNote("A", "#", 3)
        assert AbsoluteNote("G", "", 3).add_interval(Interval.A2) == AbsoluteNote("A", "#", 3)
        assert AbsoluteNote("F", "", 3).add_interval(Interval.parse("d3")) == AbsoluteNote(
            "A", "bb", 3
        )

    def test_absolute_between_octaves(self) -> None:
        assert AbsoluteNote("A", "", 2).add_interval(Interval.m3) == AbsoluteNote("C", "", 3)
        assert AbsoluteNote("E", "#", 3).add_interval(Interval.M6) == AbsoluteNote("C", "x", 4)
        assert AbsoluteNote("D", "", 3).add_interval(Interval.M7) == AbsoluteNote("C", "#", 4)
        assert AbsoluteNote("E", "b", 5).add_interval(Interval.parse("A6")) == AbsoluteNote(
            "C", "#", 6
        )
        assert AbsoluteNote("G", "#", 2).add_interval(Interval.M3) == AbsoluteNote("B", "#", 2)

    def test_absolute_compound(self) -> None:
        assert AbsoluteNote("A", "", 3).add_interval(Interval.parse("m10")) == AbsoluteNote(
            "C", "", 5
        )
        assert AbsoluteNote("E", "", 2).add_interval(Interval.parse("P12")) == AbsoluteNote(
            "B", "", 3
        )
        assert AbsoluteNote("D", "", 3).add_interval(Interval.parse("A8")) == AbsoluteNote(
            "D", "#", 4
        )
        assert AbsoluteNote("E", "b", 5).add_interval(Interval.parse("d10")) == AbsoluteNote(
            "G", "bb", 6
        )

    def test_impossible(self) -> None:
        """Needing more than triple flats fails."""
        with pytest.raises(MusicTheoryError) as exc_info:
            RelativeNote("B", "bbb").add_interval(Interval.parse("d2"))
        assert _kind(exc_info) == ErrorKind.IMPOSSIBLE_QUALITY

    def test_past_c8(self) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            AbsoluteNote("C", "", 8).add_interval(Interval.M2)
        assert _kind(exc_info) == ErrorKind.OUT_OF_RANGE

    def test_returns_new_note(self) -> None:
        """The starting note is untouched."""
        note = AbsoluteNote("C", "", 4)
        note.add_interval(Interval.P8)
        assert note == AbsoluteNote("C", "", 4)


class TestIntervalTo:
    """Tests for Note.interval_to."""

    def test_mixed_types(self) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            RelativeNote("A").interval_to(AbsoluteNote("B", "#", 3))
        assert _kind(exc_info) == ErrorKind.NOT_SAME_TYPE

    def test_no_quality_fits(self) -> None:
        with pytest.raises(MusicTheoryError) as exc_info:
            AbsoluteNote("A", "bb", 2).interval_to(AbsoluteNote("B", "x", 3))
        assert _kind(exc_info) == ErrorKind.IMPOSSIBLE_QUALITY

    def test_relative_imperfect(self) -> None:
        assert RelativeNote("A").interval_to(RelativeNote("F", "#")) == Interval.M6
        assert RelativeNote("A").interval_to(RelativeNote("F")) == Interval.m6
        assert RelativeNote("E", "#").interval_to(RelativeNote("G")) == Interval.parse("d3")
        assert RelativeNote("E", "b").interval_to(RelativeNote("G", "#")) == Interval.parse("A3")

    def test_relative_perfect(self) -> None:
        assert RelativeNote("B", "b").interval_to(RelativeNote("F", "b")) == Interval.d5
        assert RelativeNote("C").interval_to(RelativeNote("G")) == Interval.P5
        assert RelativeNote("D").interval_to(RelativeNote("A", "#")) == Interval.parse("A5")

    def test_absolute_single_octave_imperfect(self) -> None:
        assert AbsoluteNote("F", "#", 4).interval_to(AbsoluteNote("E", "#", 5)) == Interval.M7
        assert AbsoluteNote("A", "", 3).interval_to(AbsoluteNote("F", "", 4)) == Interval.m6
        assert AbsoluteNote("E", "#", 6).interval_to(AbsoluteNote("G", "", 6)) == Interval.parse(
            "d3"
        )
        assert AbsoluteNote("E", "b", 2).interval_to(AbsoluteNote("G", "#", 2)) == Interval.parse(
            "A3"
        )

    def test_absolute_single_octave_perfect(self) -> None:
        assert AbsoluteNote("F", "#", 4).interval_to(AbsoluteNote("C", "#", 5)) == Interval.P5
        assert AbsoluteNote("A", "", 3).interval_to(AbsoluteNote("D", "b", 4)) == Interval.parse(
            "d4"
        )
        assert AbsoluteNote("E", "#", 6).interval_to(AbsoluteNote("E", "#", 6)) == Interval.P1
        assert AbsoluteNote("E", "b", 2).interval_to(AbsoluteNote("A", "", 2)) == Interval.A4
        assert AbsoluteNote("D", "x", 2).interval_to(AbsoluteNote("D", "x", 3)) == Interval.P8

    def test_absolute_compound_imperfect(self) -> None:
        assert AbsoluteNote("F", "#", 4).interval_to(AbsoluteNote("G", "#", 6)) == Interval.parse(
            "M16"
        )
        assert AbsoluteNote("A", "", 3).interval_to(AbsoluteNote("F", "", 5)) == Interval.parse(
            "m13"
        )
        assert AbsoluteNote("E", "#", 3).interval_to(AbsoluteNote("G", "", 6)) == Interval.parse(
            "d24"
        )
        assert AbsoluteNote("E", "b", 2).interval_to(AbsoluteNote("G", "#", 5)) == Interval.parse(
            "A24"
        )

    def test_absolute_compound_perfect(self) -> None:
        assert AbsoluteNote("F", "#", 4).interval_to(AbsoluteNote("B", "", 5)) == Interval.parse(
            "P11"
        )
        assert AbsoluteNote("A", "b", 3).interval_to(AbsoluteNote("E", "", 5)) == Interval.parse(
            "A12"
        )
        assert AbsoluteNote("E", "b", 3).interval_to(
            AbsoluteNote("A", "bb", 6)
        ) == Interval.parse("d25")
        assert AbsoluteNote("B", "", 2).interval_to(AbsoluteNote("B", "", 5)) == Interval.parse(
            "P22"
        )

    def test_round_trip_with_add_interval(self) -> None:
        """Adding the interval between two notes leads back to the upper note."""
        lower, upper = AbsoluteNote("D", "b", 4), AbsoluteNote("F", "b", 5)
        between = lower.interval_to(upper)
        assert between == Interval.parse("m10")
        assert lower.add_interval(between).equals(upper)


class TestEquals:
    """Tests for Note.equals."""

    def test_exact(self) -> None:
        assert AbsoluteNote("A", "", 3).equals(AbsoluteNote("A", "", 3))
        assert not AbsoluteNote("A", "", 3).equals(AbsoluteNote("A", "", 4))
        assert not RelativeNote("A").equals(AbsoluteNote("A", "", 4))
        assert not RelativeNote("A").equals(RelativeNote("B", "bb"))

    def test_enharmonic(self) -> None:
        assert AbsoluteNote("A", "", 3).equals(AbsoluteNote("B", "bb", 3), enharmonic=True)
        assert RelativeNote("A").equals(RelativeNote("B", "bb"), enharmonic=True)
        assert RelativeNote("B", "#").equals(RelativeNote("C"), enharmonic=True)
        assert not RelativeNote("A").equals(RelativeNote("B"), enharmonic=True)

    def test_hashable(self) -> None:
        notes = {RelativeNote("C", "#"), Note.parse("C#"), RelativeNote("D", "b")}
        assert len(notes) == 2
