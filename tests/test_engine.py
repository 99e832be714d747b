"""
Tests for the TheoryEngine facade and session key selection.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_theory import TheoryEngine
from chuk_mcp_theory.constants import ChordIdStrategy
from chuk_mcp_theory.session import KeySelection, SelectionStore


@pytest.fixture
def engine() -> TheoryEngine:
    """A theory engine."""
    return TheoryEngine()


class TestTheoryEngine:
    """Tests for the engine facade."""

    def test_note_conversions(self, engine: TheoryEngine) -> None:
        """Name/index/frequency conversions delegate to the core."""
        assert engine.note_name_to_index("Eb") == 3
        assert engine.index_to_note_name(3, use_flats=True) == "Eb"
        assert engine.note_to_frequency("A") == 440.0
        assert engine.frequency_to_note(880.0) == "A"

    def test_intervals(self, engine: TheoryEngine) -> None:
        """Reduced and compound intervals."""
        assert engine.get_interval("C", "E").name == "Major 3rd"
        assert engine.get_compound_interval("C", 4, "C", 6).total_semitones == 24

    def test_scales_and_chords(self, engine: TheoryEngine) -> None:
        """Scale and chord construction."""
        assert engine.get_scale_notes("D", "dorian").notes[0] == "D"
        assert engine.is_note_in_scale("F", "D", "dorian")
        assert engine.build_chord("E", "minor").name == "Em"
        entries = engine.get_diatonic_chords("G")
        assert entries is not None
        assert entries[4].chord.name == "D"

    def test_identification(self, engine: TheoryEngine) -> None:
        """Both identification strategies are reachable."""
        assert engine.identify_chord(["B", "D", "F#"]).name == "Bm"
        assert engine.identify_chord_exhaustive(["B", "D", "F#"]).chord_type == "minor"
        result = engine.identify_chord([246.94, 293.66, 369.99], ChordIdStrategy.FAST_PATH)
        assert result.name == "Minor Triad"
        assert engine.identify_chord_fast_path([246.94, 293.66, 369.99]).root == "B"

    def test_key_detection(self, engine: TheoryEngine) -> None:
        """Key detection through the engine."""
        assert engine.detect_key(["F", "G", "A", "Bb", "C", "D", "E"])[0].root == "F"

    def test_modulation(self, engine: TheoryEngine) -> None:
        """Pivots and suggestions through the engine."""
        assert engine.find_pivot_chords("C", "major", "F", "major")
        assert engine.suggest_modulation("C", "major", "D", "major").relationship == (
            "Whole step away"
        )

    def test_progressions(self, engine: TheoryEngine) -> None:
        """Progression lookup and construction."""
        assert engine.get_progression("fifties").degrees == (1, 6, 4, 5)
        steps = engine.build_progression("fifties", "C")
        assert steps is not None
        assert [s.chord.name for s in steps] == ["C", "Am", "F", "G"]

    def test_listings(self, engine: TheoryEngine) -> None:
        """Catalog listings."""
        assert len(engine.list_scales()) == 18
        assert len(engine.list_chord_types()) == 16
        assert len(engine.list_intervals()) == 13
        assert len(engine.list_progressions()) == 8

    def test_stateless_and_idempotent(self, engine: TheoryEngine) -> None:
        """Repeated calls on one engine (or two) give equal results."""
        other = TheoryEngine()
        first = engine.get_diatonic_chords("A", "naturalMinor", use_sevenths=True)
        engine.build_chord("F#", "diminished7")
        engine.detect_key(["C", "E", "G"])
        assert engine.get_diatonic_chords("A", "naturalMinor", use_sevenths=True) == first
        assert other.get_diatonic_chords("A", "naturalMinor", use_sevenths=True) == first

    def test_engine_has_no_state(self, engine: TheoryEngine) -> None:
        """The engine carries no instance attributes."""
        with pytest.raises(AttributeError):
            engine.current_key = "C"  # type: ignore[attr-defined]


class TestSelectionStore:
    """Tests for per-session key selection."""

    def test_default_is_c_major(self) -> None:
        """Unset sessions read as C major triads."""
        selection = SelectionStore().get()
        assert selection.root == "C"
        assert selection.scale_type == "major"
        assert not selection.use_sevenths

    def test_set_and_get(self) -> None:
        """A stored selection is returned for its session only."""
        store = SelectionStore()
        store.set("D", "dorian", session="jam")
        assert store.get("jam").root == "D"
        assert store.get("jam").scale_type == "dorian"
        assert store.get().root == "C"

    def test_scale_type_is_canonical(self) -> None:
        """Scale types are stored as catalog keys."""
        assert KeySelection(root="A", scale_type="natural minor").scale_type == "naturalMinor"

    def test_invalid_root(self) -> None:
        """Invalid roots fail validation."""
        with pytest.raises(ValidationError):
            KeySelection(root="H")

    def test_invalid_scale(self) -> None:
        """Unknown scales fail validation."""
        with pytest.raises(ValidationError):
            SelectionStore().set("C", "nope")

    def test_clear(self) -> None:
        """Clearing falls back to the default."""
        store = SelectionStore()
        store.set("E", "major")
        store.clear()
        assert store.get().root == "C"
        store.clear("never-set")
