"""
TheoryEngine - a single entry point over the core operations.

The engine is stateless. It does not remember a "current" key or scale:
every call takes the key it works in as arguments, and any notion of a
current selection lives with the caller (see session.py). One instance
can be shared freely between threads or tasks.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_theory.constants import DEFAULT_OCTAVE, MAX_KEY_CANDIDATES, ChordIdStrategy
from chuk_mcp_theory.core import chord, identify, interval, key_detection, modulation, pitch
from chuk_mcp_theory.core import progression as progressions
from chuk_mcp_theory.core import scale
from chuk_mcp_theory.core.catalog import ProgressionDef
from chuk_mcp_theory.core.pitch import NoteInput
from chuk_mcp_theory.models.theory import (
    CatalogEntry,
    ChordIdentification,
    ChordResult,
    DiatonicEntry,
    IntervalResult,
    KeyCandidate,
    ModulationSuggestion,
    PivotChord,
    ProgressionStep,
    ScaleResult,
)


class TheoryEngine:
    """
    Music theory engine.

    Example:
        engine = TheoryEngine()
        engine.get_scale_notes("A", "naturalMinor").notes
        engine.identify_chord(["C", "E", "G"]).name  # 'C'
        engine.detect_key(["C", "D", "E", "F", "G", "A", "B"])[0].key
    """

    __slots__ = ()

    # Notes and frequencies

    def note_name_to_index(self, name: str) -> int:
        return pitch.note_name_to_index(name)

    def index_to_note_name(self, index: int, use_flats: bool = False) -> str:
        return pitch.index_to_note_name(index, use_flats)

    def note_to_frequency(self, name: str, octave: int = DEFAULT_OCTAVE) -> float:
        return pitch.note_to_frequency(name, octave)

    def frequency_to_note(self, frequency: float) -> str:
        return pitch.frequency_to_note(frequency)

    # Intervals

    def get_interval(self, note_a: str, note_b: str) -> IntervalResult:
        return interval.get_interval(note_a, note_b)

    def get_compound_interval(
        self, note_a: str, octave_a: int, note_b: str, octave_b: int
    ) -> IntervalResult:
        return interval.get_compound_interval(note_a, octave_a, note_b, octave_b)

    # Scales

    def get_scale_notes(self, root: str, scale_type: str = "major") -> ScaleResult:
        return scale.get_scale_notes(root, scale_type)

    def is_note_in_scale(self, note: str, root: str, scale_type: str) -> bool:
        return scale.is_note_in_scale(note, root, scale_type)

    # Chords

    def build_chord(
        self, root: str, chord_type: str = "major", octave: int = DEFAULT_OCTAVE
    ) -> ChordResult:
        return chord.build_chord(root, chord_type, octave)

    def get_diatonic_chords(
        self, root: str, scale_type: str = "major", use_sevenths: bool = False
    ) -> list[DiatonicEntry] | None:
        return chord.get_diatonic_chords(root, scale_type, use_sevenths)

    # Analysis

    def identify_chord(
        self,
        notes: Iterable[NoteInput],
        strategy: ChordIdStrategy | str = ChordIdStrategy.EXHAUSTIVE,
    ) -> ChordIdentification:
        return identify.identify_chord(notes, strategy)

    def identify_chord_exhaustive(self, notes: Iterable[NoteInput]) -> ChordIdentification:
        return identify.identify_chord_exhaustive(notes)

    def identify_chord_fast_path(self, notes: Iterable[NoteInput]) -> ChordIdentification:
        return identify.identify_chord_fast_path(notes)

    def detect_key(
        self, notes: Iterable[NoteInput], limit: int = MAX_KEY_CANDIDATES
    ) -> list[KeyCandidate]:
        return key_detection.detect_key(notes, limit)

    # Modulation

    def find_pivot_chords(
        self, root_a: str, scale_a: str, root_b: str, scale_b: str, use_sevenths: bool = False
    ) -> list[PivotChord]:
        return modulation.find_pivot_chords(root_a, scale_a, root_b, scale_b, use_sevenths)

    def suggest_modulation(
        self, from_root: str, from_scale: str, to_root: str, to_scale: str
    ) -> ModulationSuggestion:
        return modulation.suggest_modulation(from_root, from_scale, to_root, to_scale)

    # Progressions

    def get_progression(self, name: str) -> ProgressionDef:
        return progressions.get_progression(name)

    def build_progression(
        self,
        progression: str | ProgressionDef,
        root: str,
        scale_type: str = "major",
        use_sevenths: bool = False,
    ) -> list[ProgressionStep] | None:
        return progressions.build_progression(progression, root, scale_type, use_sevenths)

    # Catalog listings

    def list_scales(self) -> list[CatalogEntry]:
        return scale.list_scales()

    def list_chord_types(self) -> list[CatalogEntry]:
        return chord.list_chord_types()

    def list_intervals(self) -> list[CatalogEntry]:
        return interval.list_intervals()

    def list_progressions(self) -> list[CatalogEntry]:
        return progressions.list_progressions()
