"""
Chord construction and diatonic harmony.

Chords are offset stacks from a root. Tones keep the template order and
are pinned to concrete octaves: offsets below 12 sit in the base octave,
each further 12 semitones moves the tone up one octave (a 9th at offset
14 lands an octave above the root's octave).

Diatonic harmony builds one chord per scale degree from the per-scale
pattern tables (Roman numeral + chord type for triads or sevenths).
"""

from __future__ import annotations

from chuk_mcp_theory.constants import DEFAULT_OCTAVE
from chuk_mcp_theory.core.catalog import (
    CHORD_TYPES,
    DIATONIC_PATTERNS,
    resolve_chord_type,
    resolve_scale_type,
)
from chuk_mcp_theory.core.pitch import Note, PitchClass, display_note_name
from chuk_mcp_theory.core.scale import get_scale_notes
from chuk_mcp_theory.models.theory import CatalogEntry, ChordResult, ChordTone, DiatonicEntry


def build_chord(root: str, chord_type: str = "major", octave: int = DEFAULT_OCTAVE) -> ChordResult:
    """
    Build a chord from root and type.

    Args:
        root: Chord root note
        chord_type: Chord catalog key (e.g. 'major', 'dominant7', 'add9')
        octave: Octave of the root (default 4)

    Returns:
        ChordResult with notes, formula, quality and per-tone frequencies

    Raises:
        InvalidNoteNameError: If the root is not a note
        UnknownChordTypeError: If the chord type is not registered
    """
    key = resolve_chord_type(chord_type)
    chord = CHORD_TYPES[key]
    root_pc = PitchClass.parse(root)
    root = display_note_name(root)

    tones = [Note(root_pc.transpose(offset), octave + offset // 12) for offset in chord.intervals]

    return ChordResult(
        root=root,
        type=key,
        name=f"{root}{chord.symbol}",
        full_name=f"{root} {chord.name}",
        notes=[tone.name for tone in tones],
        intervals=list(chord.intervals),
        formula=chord.formula,
        quality=chord.quality,
        frequencies=[
            ChordTone(note=tone.name, octave=tone.octave, frequency=tone.frequency, midi=tone.midi)
            for tone in tones
        ],
    )


def get_diatonic_chords(
    root: str,
    scale_type: str = "major",
    use_sevenths: bool = False,
) -> list[DiatonicEntry] | None:
    """
    Get the chord on every degree of a key.

    Args:
        root: Key root
        scale_type: Scale catalog key
        use_sevenths: Build seventh chords instead of triads

    Returns:
        One DiatonicEntry per degree, or None when the scale has no
        diatonic pattern (e.g. pentatonic or blues scales)

    Raises:
        InvalidNoteNameError: If the root is not a note
        UnknownScaleTypeError: If the scale type is not registered
    """
    key = resolve_scale_type(scale_type)
    pattern = DIATONIC_PATTERNS.get(key)
    if pattern is None:
        return None

    scale = get_scale_notes(root, key)
    chord_types = pattern.sevenths if use_sevenths else pattern.triads

    return [
        DiatonicEntry(
            degree=i + 1,
            numeral=numeral,
            root=note,
            chord_type=chord_type,
            chord=build_chord(note, chord_type),
        )
        for i, (note, numeral, chord_type) in enumerate(
            zip(scale.notes, pattern.numerals, chord_types)
        )
    ]


def has_diatonic_pattern(scale_type: str) -> bool:
    """Whether diatonic harmony is available for a (registered) scale type."""
    return resolve_scale_type(scale_type) in DIATONIC_PATTERNS


def list_chord_types() -> list[CatalogEntry]:
    """All registered chord types in catalog order."""
    return [
        CatalogEntry(key=key, name=chord.name, description=f"{chord.formula} ({chord.quality.value})")
        for key, chord in CHORD_TYPES.items()
    ]
