"""
Chord identification - two strategies behind one result shape.

Exhaustive (theory lookups):
    Every distinct pitch class is tried as the root. The offsets of all
    notes from that root are compared, as a sorted set, against every
    chord template reduced to pitch classes. The first match wins.

    Tie-break: when the input carries pitch height (a frequency or an
    octave), the lowest sounding note is tried as root first. The rest
    are tried in pitch-class order C, C#, ... B. Templates are tried in
    catalog order. Symmetric chords (augmented, diminished 7th) are
    therefore named after the bass when there is one, and after the
    lowest pitch class otherwise.

Fast path (real-time display):
    The lowest-frequency note is the root. Rounded semitone distances to
    it (not reduced mod 12) are looked up in a small fixed table. Two
    pitches are named as an interval. A consonance verdict flags any
    distance of 1, 2, 6, 10 or 11 semitones (mod 12) as dissonant.

Neither strategy raises on a non-match: the result is 'Unknown' with
confidence 0.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from chuk_mcp_theory.constants import (
    DISSONANT_SEMITONES,
    MIN_DISTINCT_NOTES,
    UNKNOWN_CHORD_NAME,
    ChordIdStrategy,
    Stability,
)
from chuk_mcp_theory.core.catalog import CHORD_TYPES, FAST_PATH_CHORDS, FAST_PATH_INTERVALS
from chuk_mcp_theory.core.chord import build_chord
from chuk_mcp_theory.core.pitch import NoteInput, NoteRef, PitchClass, coerce_note_ref
from chuk_mcp_theory.models.theory import ChordIdentification

# Chord templates reduced to sorted pitch-class offsets, in catalog order
_TEMPLATE_SHAPES: tuple[tuple[str, tuple[int, ...]], ...] = tuple(
    (key, tuple(sorted({offset % 12 for offset in chord.intervals})))
    for key, chord in CHORD_TYPES.items()
)


def _stability(semitones: Iterable[int]) -> Stability:
    if any(s % 12 in DISSONANT_SEMITONES for s in semitones):
        return Stability.DISSONANT
    return Stability.CONSONANT


def _unique_pitch_classes(refs: list[NoteRef]) -> list[PitchClass]:
    """Distinct pitch classes in first-seen order."""
    seen: dict[PitchClass, None] = {}
    for ref in refs:
        seen.setdefault(ref.pitch_class, None)
    return list(seen)


def _candidate_roots(refs: list[NoteRef], unique: list[PitchClass]) -> list[PitchClass]:
    """Roots in tie-break order: bass first (if known), then C..B."""
    ordered = sorted(unique)
    pitched = [ref for ref in refs if ref.has_height]
    if pitched:
        bass = min(pitched, key=lambda ref: ref.frequency).pitch_class
        ordered.remove(bass)
        ordered.insert(0, bass)
    return ordered


def _unknown(
    strategy: ChordIdStrategy,
    notes: list[str],
    semitones: list[int] | None = None,
    ratios: list[float] | None = None,
    stability: Stability | None = None,
    root: str | None = None,
    name: str = UNKNOWN_CHORD_NAME,
) -> ChordIdentification:
    return ChordIdentification(
        strategy=strategy,
        name=name,
        root=root,
        notes=notes,
        confidence=0.0,
        semitones=semitones or [],
        ratios=ratios or [],
        stability=stability,
    )


def identify_chord_exhaustive(notes: Iterable[NoteInput]) -> ChordIdentification:
    """
    Identify a chord by trying every note as the root.

    Args:
        notes: Note names, frequencies, {note, freq} mappings or NoteRefs.
               Duplicates (including octave doublings) collapse.

    Returns:
        ChordIdentification with confidence 1.0 on an exact template
        match, otherwise 'Unknown' with confidence 0
    """
    refs = [coerce_note_ref(n) for n in notes]
    unique = _unique_pitch_classes(refs)
    names = [pc.spell() for pc in unique]

    if len(unique) < MIN_DISTINCT_NOTES:
        return _unknown(ChordIdStrategy.EXHAUSTIVE, names)

    for root in _candidate_roots(refs, unique):
        offsets = tuple(sorted(root.interval_to(pc).semitones for pc in unique))
        for chord_type, shape in _TEMPLATE_SHAPES:
            if offsets == shape:
                chord = build_chord(root.spell(), chord_type)
                return ChordIdentification(
                    strategy=ChordIdStrategy.EXHAUSTIVE,
                    name=chord.name,
                    root=chord.root,
                    chord_type=chord_type,
                    notes=chord.notes,
                    confidence=1.0,
                    semitones=list(offsets),
                    ratios=[round(2 ** (s / 12), 2) for s in offsets],
                    stability=_stability(offsets),
                    chord=chord,
                )

    return _unknown(ChordIdStrategy.EXHAUSTIVE, names)


def identify_chord_fast_path(notes: Iterable[NoteInput]) -> ChordIdentification:
    """
    Identify sounding notes relative to the lowest one.

    Cheap enough to run on every analysis frame. Names without an
    octave are placed in octave 4.

    Args:
        notes: Sounding notes; frequencies or {frequency, label} pairs
               are the usual input

    Returns:
        ChordIdentification with ratios to the root and a
        Consonant/Dissonant verdict
    """
    refs = sorted((coerce_note_ref(n) for n in notes), key=lambda ref: ref.frequency)

    if len(refs) < MIN_DISTINCT_NOTES:
        return _unknown(ChordIdStrategy.FAST_PATH, [ref.pitch_class.spell() for ref in refs])

    root = refs[0]
    semitones = [round_half_up(12 * math.log2(ref.frequency / root.frequency)) for ref in refs]
    unique_semitones = list(dict.fromkeys(semitones))
    ratios = [round(ref.frequency / root.frequency, 2) for ref in refs]
    stability = _stability(unique_semitones)
    note_names = [pc.spell() for pc in _unique_pitch_classes(refs)]
    root_name = root.pitch_class.spell()

    match = FAST_PATH_CHORDS.get("-".join(str(s) for s in unique_semitones))
    if match is not None:
        chord_type, display = match
        return ChordIdentification(
            strategy=ChordIdStrategy.FAST_PATH,
            name=display,
            root=root_name,
            chord_type=chord_type,
            notes=note_names,
            confidence=1.0,
            semitones=unique_semitones,
            ratios=ratios,
            stability=stability,
        )

    if len(unique_semitones) == 2:
        interval_name = FAST_PATH_INTERVALS.get(unique_semitones[1])
        if interval_name is not None:
            return ChordIdentification(
                strategy=ChordIdStrategy.FAST_PATH,
                name=interval_name,
                root=root_name,
                notes=note_names,
                confidence=1.0,
                semitones=unique_semitones,
                ratios=ratios,
                stability=stability,
            )
        return _unknown(
            ChordIdStrategy.FAST_PATH,
            note_names,
            unique_semitones,
            ratios,
            stability,
            root=root_name,
            name="Interval",
        )

    return _unknown(
        ChordIdStrategy.FAST_PATH, note_names, unique_semitones, ratios, stability, root=root_name
    )


def identify_chord(
    notes: Iterable[NoteInput],
    strategy: ChordIdStrategy | str = ChordIdStrategy.EXHAUSTIVE,
) -> ChordIdentification:
    """
    Identify a chord with the chosen strategy.

    Args:
        notes: Notes to identify
        strategy: 'exhaustive' (default) or 'fast_path'
    """
    if ChordIdStrategy(strategy) is ChordIdStrategy.FAST_PATH:
        return identify_chord_fast_path(notes)
    return identify_chord_exhaustive(notes)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)
