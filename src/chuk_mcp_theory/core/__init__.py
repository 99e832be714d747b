"""
Core theory primitives and operations - the engine itself.

Pure functions over the fixed catalog tables:
- PitchClass, Interval, Note: pitch arithmetic and frequency math
- ByName / ByFrequency: the NoteRef union callers hand to the engine
- get_interval: interval analysis
- get_scale_notes / is_note_in_scale: scales
- build_chord / get_diatonic_chords: chords and diatonic harmony
- identify_chord_*: chord identification (exhaustive and fast path)
- detect_key: key detection
- build_progression: named progressions in a key
- find_pivot_chords / suggest_modulation: modulation helpers
"""

from chuk_mcp_theory.core.catalog import (
    CHORD_TYPES,
    DIATONIC_PATTERNS,
    INTERVALS,
    NOTE_NAMES,
    NOTE_NAMES_FLAT,
    PROGRESSIONS,
    SCALES,
    ChordDef,
    DiatonicPattern,
    IntervalDef,
    ProgressionDef,
    ScaleDef,
)
from chuk_mcp_theory.core.chord import (
    build_chord,
    get_diatonic_chords,
    has_diatonic_pattern,
    list_chord_types,
)
from chuk_mcp_theory.core.identify import (
    identify_chord,
    identify_chord_exhaustive,
    identify_chord_fast_path,
)
from chuk_mcp_theory.core.interval import get_compound_interval, get_interval, list_intervals
from chuk_mcp_theory.core.key_detection import detect_key
from chuk_mcp_theory.core.modulation import (
    find_pivot_chords,
    get_key_relationship,
    get_modulation_techniques,
    suggest_modulation,
)
from chuk_mcp_theory.core.pitch import (
    ByFrequency,
    ByName,
    Interval,
    Note,
    NoteInput,
    NoteRef,
    PitchClass,
    canonical_note_name,
    cents_offset,
    coerce_note_ref,
    display_note_name,
    frequency_to_midi,
    frequency_to_note,
    index_to_note_name,
    midi_to_frequency,
    note_name_to_index,
    note_to_frequency,
)
from chuk_mcp_theory.core.progression import build_progression, get_progression, list_progressions
from chuk_mcp_theory.core.scale import get_scale_notes, is_note_in_scale, list_scales

__all__ = [
    # Catalog
    "NOTE_NAMES",
    "NOTE_NAMES_FLAT",
    "INTERVALS",
    "SCALES",
    "CHORD_TYPES",
    "DIATONIC_PATTERNS",
    "PROGRESSIONS",
    "IntervalDef",
    "ScaleDef",
    "ChordDef",
    "DiatonicPattern",
    "ProgressionDef",
    # Pitch
    "PitchClass",
    "Interval",
    "Note",
    "ByName",
    "ByFrequency",
    "NoteRef",
    "NoteInput",
    "coerce_note_ref",
    "note_name_to_index",
    "index_to_note_name",
    "canonical_note_name",
    "display_note_name",
    "note_to_frequency",
    "frequency_to_note",
    "frequency_to_midi",
    "midi_to_frequency",
    "cents_offset",
    # Intervals
    "get_interval",
    "get_compound_interval",
    "list_intervals",
    # Scales
    "get_scale_notes",
    "is_note_in_scale",
    "list_scales",
    # Chords
    "build_chord",
    "get_diatonic_chords",
    "has_diatonic_pattern",
    "list_chord_types",
    # Analysis
    "identify_chord",
    "identify_chord_exhaustive",
    "identify_chord_fast_path",
    "detect_key",
    # Progressions
    "get_progression",
    "build_progression",
    "list_progressions",
    # Modulation
    "find_pivot_chords",
    "suggest_modulation",
    "get_key_relationship",
    "get_modulation_techniques",
]
