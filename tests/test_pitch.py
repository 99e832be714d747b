"""
Tests for pitch primitives.

Tests cover:
- Note name <-> index conversion (flats, case, whitespace)
- Note <-> frequency conversion (A4 = 440 Hz)
- PitchClass and Interval
- Note and NoteRef coercion
"""

import math

import pytest

from chuk_mcp_theory.core import (
    ByFrequency,
    ByName,
    Interval,
    Note,
    PitchClass,
    cents_offset,
    coerce_note_ref,
    frequency_to_midi,
    frequency_to_note,
    index_to_note_name,
    note_name_to_index,
    note_to_frequency,
)
from chuk_mcp_theory.errors import InvalidFrequencyError, InvalidNoteNameError


class TestNoteNames:
    """Tests for note name parsing and spelling."""

    def test_sharps(self) -> None:
        """Sharp spellings map to their indices."""
        assert note_name_to_index("C") == 0
        assert note_name_to_index("C#") == 1
        assert note_name_to_index("F#") == 6
        assert note_name_to_index("B") == 11

    def test_flats_normalize_to_sharps(self) -> None:
        """Flat spellings share the index of their sharp twin."""
        assert note_name_to_index("Db") == note_name_to_index("C#")
        assert note_name_to_index("Bb") == 10
        assert note_name_to_index("Eb") == 3

    def test_enharmonic_edge_flats(self) -> None:
        """Cb and Fb land on B and E."""
        assert note_name_to_index("Cb") == 11
        assert note_name_to_index("Fb") == 4

    def test_lenient_case_and_whitespace(self) -> None:
        """Lowercase letters and surrounding whitespace are accepted."""
        assert note_name_to_index(" a ") == 9
        assert note_name_to_index("bb") == 10

    @pytest.mark.parametrize("name", ["H", "", "C##", "X#", "Do"])
    def test_invalid_names(self, name: str) -> None:
        """Unknown spellings raise InvalidNoteNameError."""
        with pytest.raises(InvalidNoteNameError):
            note_name_to_index(name)

    def test_invalid_name_is_value_error(self) -> None:
        """Theory errors are ValueErrors."""
        with pytest.raises(ValueError, match="Invalid note name"):
            note_name_to_index("Q")

    def test_index_wraps(self) -> None:
        """Any integer spells as a pitch class."""
        assert index_to_note_name(12) == "C"
        assert index_to_note_name(-1) == "B"
        assert index_to_note_name(13) == "C#"

    def test_index_flat_spelling(self) -> None:
        """Flat spelling is available on request."""
        assert index_to_note_name(10, use_flats=True) == "Bb"
        assert index_to_note_name(10) == "A#"

    def test_round_trip(self) -> None:
        """index -> name -> index is the identity modulo 12."""
        for index in range(-24, 36):
            assert note_name_to_index(index_to_note_name(index)) == index % 12


class TestFrequency:
    """Tests for note <-> frequency conversion."""

    def test_a4_is_440(self) -> None:
        """The reference pitch is exact."""
        assert note_to_frequency("A", 4) == 440.0

    def test_default_octave(self) -> None:
        """Octave defaults to 4."""
        assert note_to_frequency("A") == 440.0

    def test_octaves_double(self) -> None:
        """Each octave doubles the frequency."""
        assert note_to_frequency("A", 5) == pytest.approx(880.0)
        assert note_to_frequency("A", 3) == pytest.approx(220.0)

    def test_middle_c(self) -> None:
        """C4 is about 261.63 Hz."""
        assert note_to_frequency("C", 4) == pytest.approx(261.6256, abs=1e-3)

    def test_frequency_to_note_is_octave_lossy(self) -> None:
        """220, 440 and 880 Hz are all 'A'."""
        assert frequency_to_note(220.0) == "A"
        assert frequency_to_note(440.0) == "A"
        assert frequency_to_note(880.0) == "A"

    @pytest.mark.parametrize("k", [-4, -3, -2, -1, 0, 1, 2, 3, 4, 5])
    def test_every_octave_of_a440_is_a(self, k: int) -> None:
        """440 * 2**k names A for any whole octave shift."""
        assert frequency_to_note(440 * 2**k) == "A"

    def test_frequency_snaps_to_nearest(self) -> None:
        """Detuned frequencies snap to the nearest pitch class."""
        assert frequency_to_note(261.63) == "C"
        assert frequency_to_note(445.0) == "A"

    def test_half_rounds_up(self) -> None:
        """A frequency exactly between A4 and A#4 snaps up."""
        midpoint = 440.0 * 2 ** (0.5 / 12)
        assert frequency_to_midi(midpoint) == 70

    def test_round_trip_all_pitch_classes(self) -> None:
        """note -> frequency -> note returns the canonical spelling."""
        for name in ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]:
            for octave in (1, 4, 7):
                expected = index_to_note_name(note_name_to_index(name))
                assert frequency_to_note(note_to_frequency(name, octave)) == expected

    @pytest.mark.parametrize("frequency", [0, -440.0, math.inf, math.nan])
    def test_invalid_frequency(self, frequency: float) -> None:
        """Non-positive and non-finite frequencies raise."""
        with pytest.raises(InvalidFrequencyError):
            frequency_to_note(frequency)

    def test_cents_offset(self) -> None:
        """Cents report the signed distance from the nearest pitch."""
        assert cents_offset(440.0) == 0.0
        sharp = 440.0 * 2 ** (0.1 / 12)
        assert cents_offset(sharp) == pytest.approx(10.0, abs=0.01)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_transpose_wraps(self) -> None:
        """Transposition wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_interval_to(self) -> None:
        """Ascending interval between pitch classes."""
        assert PitchClass.C.interval_to(PitchClass.G) == Interval.PERFECT_FIFTH
        assert PitchClass.G.interval_to(PitchClass.C) == Interval.PERFECT_FOURTH

    def test_to_midi(self) -> None:
        """C4 = 60."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69

    def test_parse_flat(self) -> None:
        """Flats parse to the sharp member."""
        assert PitchClass.parse("Db") is PitchClass.Cs

    def test_spell(self) -> None:
        """Spelling defaults to sharps."""
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"


class TestInterval:
    """Tests for Interval."""

    def test_catalog_metadata(self) -> None:
        """Simple intervals carry catalog names and ratios."""
        fifth = Interval(7)
        assert fifth.name == "Perfect 5th"
        assert fifth.abbreviation == "P5"
        assert fifth.just_ratio == "3:2"

    def test_invert(self) -> None:
        """Inversion within an octave."""
        assert Interval.MAJOR_THIRD.invert() == Interval.MINOR_SIXTH
        assert Interval.PERFECT_FIFTH.invert() == Interval.PERFECT_FOURTH

    def test_compound_str(self) -> None:
        """Compound intervals show their extra octaves."""
        assert str(Interval(12)) == "P8"
        assert str(Interval(16)) == "M3+1oct"
        assert Interval(16).octaves == 1
        assert Interval(16).simple == Interval.MAJOR_THIRD

    def test_arithmetic(self) -> None:
        """Intervals add and subtract."""
        assert Interval.MAJOR_THIRD + Interval.MINOR_THIRD == Interval.PERFECT_FIFTH
        assert Interval.OCTAVE - Interval.PERFECT_FIFTH == Interval.PERFECT_FOURTH

    def test_ordering_and_hash(self) -> None:
        """Intervals order by size and hash by value."""
        assert Interval.MINOR_THIRD < Interval.MAJOR_THIRD
        assert len({Interval(7), Interval(7), Interval(5)}) == 2


class TestNote:
    """Tests for Note."""

    def test_parse_with_octave(self) -> None:
        """'C#3' parses to pitch class and octave."""
        note = Note.parse("C#3")
        assert note.pitch_class == PitchClass.Cs
        assert note.octave == 3
        assert str(note) == "C#3"

    def test_parse_without_octave(self) -> None:
        """A bare name lands in octave 4."""
        assert Note.parse("E").octave == 4

    def test_parse_flat(self) -> None:
        """Flat names print as sharps."""
        assert str(Note.parse("Bb2")) == "A#2"

    def test_midi_round_trip(self) -> None:
        """MIDI conversion is bijective."""
        for midi in range(0, 128):
            assert Note.from_midi(midi).midi == midi

    def test_from_frequency_keeps_octave(self) -> None:
        """Frequency -> Note keeps pitch height."""
        assert Note.from_frequency(220.0) == Note(PitchClass.A, 3)

    def test_parse_invalid(self) -> None:
        """Garbage raises InvalidNoteNameError."""
        with pytest.raises(InvalidNoteNameError):
            Note.parse("C#x")


class TestNoteRef:
    """Tests for coerce_note_ref."""

    def test_string_without_octave(self) -> None:
        """A bare name has no pitch height."""
        ref = coerce_note_ref("E")
        assert isinstance(ref, ByName)
        assert not ref.has_height
        assert ref.pitch_class == PitchClass.E

    def test_string_with_octave(self) -> None:
        """An octave gives pitch height."""
        ref = coerce_note_ref("G2")
        assert isinstance(ref, ByName)
        assert ref.has_height
        assert ref.frequency == pytest.approx(note_to_frequency("G", 2))

    def test_number_is_frequency(self) -> None:
        """Numbers are frequencies in Hz."""
        ref = coerce_note_ref(440)
        assert isinstance(ref, ByFrequency)
        assert ref.pitch_class == PitchClass.A

    def test_mapping(self) -> None:
        """{frequency, label} mappings become ByFrequency."""
        ref = coerce_note_ref({"freq": 261.63, "note": "C"})
        assert isinstance(ref, ByFrequency)
        assert ref.label == "C"
        assert ref.pitch_class == PitchClass.C

    def test_bool_rejected(self) -> None:
        """Booleans are not frequencies."""
        with pytest.raises(TypeError):
            coerce_note_ref(True)

    def test_bad_frequency(self) -> None:
        """Non-positive frequencies raise at the boundary."""
        with pytest.raises(InvalidFrequencyError):
            coerce_note_ref(-1.0)
