"""
Catalog - the fixed theory tables.

Everything the engine computes is derived from these tables plus a
caller-supplied root and octave:

- NOTE_NAMES / NOTE_NAMES_FLAT: the 12 pitch-class spellings
- INTERVALS: the 13 canonical intervals (unison through octave)
- SCALES: scale templates as semitone offsets from the root
- CHORD_TYPES: chord templates as semitone offsets from the root
- DIATONIC_PATTERNS: per-degree chord types and Roman numerals
- PROGRESSIONS: named progressions as 1-indexed scale degrees

Tables are read-only mappings built once at import. Entry order is
definition order and is relied on for deterministic iteration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from chuk_mcp_theory.constants import ChordCharacter, IntervalQuality, KeyType
from chuk_mcp_theory.errors import (
    UnknownChordTypeError,
    UnknownProgressionError,
    UnknownScaleTypeError,
)

NOTE_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
NOTE_NAMES_FLAT: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Flat spellings accepted on input, normalized to the canonical sharp name
FLAT_TO_SHARP: Mapping[str, str] = MappingProxyType(
    {
        "Db": "C#",
        "Eb": "D#",
        "Fb": "E",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
        "Cb": "B",
    }
)


@dataclass(frozen=True)
class IntervalDef:
    """
    A canonical interval.

    just_ratio is descriptive only; frequency math always uses the
    equal-tempered multiplier 2^(semitones/12).
    """

    semitones: int
    just_ratio: str
    equal_ratio: float
    name: str
    abbrev: str
    quality: IntervalQuality


@dataclass(frozen=True)
class ScaleDef:
    """A scale template: ascending offsets from the root (5-12 entries)."""

    intervals: tuple[int, ...]
    name: str
    description: str


@dataclass(frozen=True)
class ChordDef:
    """
    A chord template.

    Offsets above 11 sit in a higher octave (14 = compound 9th).
    """

    intervals: tuple[int, ...]
    symbol: str
    name: str
    formula: str
    quality: ChordCharacter


@dataclass(frozen=True)
class DiatonicPattern:
    """Parallel per-degree tables of triads, sevenths and Roman numerals."""

    triads: tuple[str, ...]
    numerals: tuple[str, ...]
    sevenths: tuple[str, ...]


@dataclass(frozen=True)
class ProgressionDef:
    """A named progression of 1-indexed scale degrees (repeats allowed)."""

    degrees: tuple[int, ...]
    name: str
    description: str
    key_type: KeyType = "major"


_P = IntervalQuality.PERFECT
_C = IntervalQuality.CONSONANT
_D = IntervalQuality.DISSONANT

INTERVALS: Mapping[str, IntervalDef] = MappingProxyType(
    {
        "unison": IntervalDef(0, "1:1", 1.000, "Unison", "P1", _P),
        "minorSecond": IntervalDef(1, "16:15", 1.059, "Minor 2nd", "m2", _D),
        "majorSecond": IntervalDef(2, "9:8", 1.122, "Major 2nd", "M2", _D),
        "minorThird": IntervalDef(3, "6:5", 1.189, "Minor 3rd", "m3", _C),
        "majorThird": IntervalDef(4, "5:4", 1.260, "Major 3rd", "M3", _C),
        "perfectFourth": IntervalDef(5, "4:3", 1.335, "Perfect 4th", "P4", _P),
        "tritone": IntervalDef(6, "45:32", 1.414, "Tritone", "TT", _D),
        "perfectFifth": IntervalDef(7, "3:2", 1.498, "Perfect 5th", "P5", _P),
        "minorSixth": IntervalDef(8, "8:5", 1.587, "Minor 6th", "m6", _C),
        "majorSixth": IntervalDef(9, "5:3", 1.682, "Major 6th", "M6", _C),
        "minorSeventh": IntervalDef(10, "9:5", 1.782, "Minor 7th", "m7", _D),
        "majorSeventh": IntervalDef(11, "15:8", 1.888, "Major 7th", "M7", _D),
        "octave": IntervalDef(12, "2:1", 2.000, "Octave", "P8", _P),
    }
)

# Semitone count -> interval entry
INTERVALS_BY_SEMITONES: Mapping[int, IntervalDef] = MappingProxyType(
    {entry.semitones: entry for entry in INTERVALS.values()}
)

SCALES: Mapping[str, ScaleDef] = MappingProxyType(
    {
        # Major and minor
        "major": ScaleDef(
            (0, 2, 4, 5, 7, 9, 11),
            "Major (Ionian)",
            'The "happy" scale. W-W-H-W-W-W-H pattern.',
        ),
        "naturalMinor": ScaleDef(
            (0, 2, 3, 5, 7, 8, 10),
            "Natural Minor (Aeolian)",
            'The "sad" scale. Relative minor of major.',
        ),
        "harmonicMinor": ScaleDef(
            (0, 2, 3, 5, 7, 8, 11),
            "Harmonic Minor",
            "Minor with raised 7th. Creates V7 chord.",
        ),
        "melodicMinor": ScaleDef(
            (0, 2, 3, 5, 7, 9, 11),
            "Melodic Minor",
            "Minor with raised 6th and 7th (ascending).",
        ),
        # Modes of the major scale
        "ionian": ScaleDef((0, 2, 4, 5, 7, 9, 11), "Ionian", "Mode I. Same as Major scale."),
        "dorian": ScaleDef(
            (0, 2, 3, 5, 7, 9, 10),
            "Dorian",
            "Mode II. Minor with raised 6th. Jazz/funk favorite.",
        ),
        "phrygian": ScaleDef(
            (0, 1, 3, 5, 7, 8, 10),
            "Phrygian",
            "Mode III. Spanish/flamenco sound. Flat 2nd.",
        ),
        "lydian": ScaleDef(
            (0, 2, 4, 6, 7, 9, 11),
            "Lydian",
            "Mode IV. Dreamy, ethereal. Raised 4th (#4).",
        ),
        "mixolydian": ScaleDef(
            (0, 2, 4, 5, 7, 9, 10),
            "Mixolydian",
            "Mode V. Dominant sound. Major with flat 7th.",
        ),
        "aeolian": ScaleDef((0, 2, 3, 5, 7, 8, 10), "Aeolian", "Mode VI. Same as Natural Minor."),
        "locrian": ScaleDef(
            (0, 1, 3, 5, 6, 8, 10),
            "Locrian",
            "Mode VII. Diminished feel. Rarely used.",
        ),
        # Pentatonic
        "majorPentatonic": ScaleDef(
            (0, 2, 4, 7, 9),
            "Major Pentatonic",
            'Major without 4th and 7th. Universal "safe" scale.',
        ),
        "minorPentatonic": ScaleDef(
            (0, 3, 5, 7, 10),
            "Minor Pentatonic",
            "Minor without 2nd and 6th. Blues/rock foundation.",
        ),
        # Blues
        "blues": ScaleDef(
            (0, 3, 5, 6, 7, 10),
            "Blues Scale",
            "Minor pentatonic + blue note (flat 5th).",
        ),
        "majorBlues": ScaleDef(
            (0, 2, 3, 4, 7, 9),
            "Major Blues",
            "Major pentatonic + blue note (flat 3rd).",
        ),
        # Symmetric
        "chromatic": ScaleDef(
            (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),
            "Chromatic",
            'All 12 semitones. No "wrong" notes, no "right" ones.',
        ),
        "wholeNote": ScaleDef(
            (0, 2, 4, 6, 8, 10),
            "Whole Tone",
            "All whole steps. Dreamy, ambiguous sound.",
        ),
        "diminished": ScaleDef(
            (0, 2, 3, 5, 6, 8, 9, 11),
            "Diminished (Half-Whole)",
            "Alternating H-W pattern. Tension and mystery.",
        ),
    }
)

_Q = ChordCharacter

CHORD_TYPES: Mapping[str, ChordDef] = MappingProxyType(
    {
        # Triads
        "major": ChordDef((0, 4, 7), "", "Major", "R-M3-P5", _Q.CONSONANT),
        "minor": ChordDef((0, 3, 7), "m", "Minor", "R-m3-P5", _Q.CONSONANT),
        "diminished": ChordDef((0, 3, 6), "dim", "Diminished", "R-m3-d5", _Q.DISSONANT),
        "augmented": ChordDef((0, 4, 8), "aug", "Augmented", "R-M3-A5", _Q.DISSONANT),
        "sus2": ChordDef((0, 2, 7), "sus2", "Suspended 2nd", "R-M2-P5", _Q.OPEN),
        "sus4": ChordDef((0, 5, 7), "sus4", "Suspended 4th", "R-P4-P5", _Q.OPEN),
        # Sevenths
        "major7": ChordDef((0, 4, 7, 11), "maj7", "Major 7th", "R-M3-P5-M7", _Q.JAZZY),
        "minor7": ChordDef((0, 3, 7, 10), "m7", "Minor 7th", "R-m3-P5-m7", _Q.JAZZY),
        "dominant7": ChordDef((0, 4, 7, 10), "7", "Dominant 7th", "R-M3-P5-m7", _Q.TENSION),
        "diminished7": ChordDef(
            (0, 3, 6, 9), "dim7", "Diminished 7th", "R-m3-d5-d7", _Q.TENSION
        ),
        "halfDiminished": ChordDef(
            (0, 3, 6, 10), "m7b5", "Half-Diminished", "R-m3-d5-m7", _Q.TENSION
        ),
        "minorMajor7": ChordDef(
            (0, 3, 7, 11), "mMaj7", "Minor-Major 7th", "R-m3-P5-M7", _Q.EXOTIC
        ),
        "augmented7": ChordDef((0, 4, 8, 10), "aug7", "Augmented 7th", "R-M3-A5-m7", _Q.EXOTIC),
        # Extensions
        "add9": ChordDef((0, 4, 7, 14), "add9", "Add 9", "R-M3-P5-M9", _Q.BRIGHT),
        "minor9": ChordDef((0, 3, 7, 10, 14), "m9", "Minor 9th", "R-m3-P5-m7-M9", _Q.SMOOTH),
        "major9": ChordDef((0, 4, 7, 11, 14), "maj9", "Major 9th", "R-M3-P5-M7-M9", _Q.LUSH),
    }
)

DIATONIC_PATTERNS: Mapping[str, DiatonicPattern] = MappingProxyType(
    {
        "major": DiatonicPattern(
            triads=("major", "minor", "minor", "major", "major", "minor", "diminished"),
            numerals=("I", "ii", "iii", "IV", "V", "vi", "vii°"),
            sevenths=(
                "major7",
                "minor7",
                "minor7",
                "major7",
                "dominant7",
                "minor7",
                "halfDiminished",
            ),
        ),
        "naturalMinor": DiatonicPattern(
            triads=("minor", "diminished", "major", "minor", "minor", "major", "major"),
            numerals=("i", "ii°", "III", "iv", "v", "VI", "VII"),
            sevenths=(
                "minor7",
                "halfDiminished",
                "major7",
                "minor7",
                "minor7",
                "major7",
                "dominant7",
            ),
        ),
        "harmonicMinor": DiatonicPattern(
            triads=("minor", "diminished", "augmented", "minor", "major", "major", "diminished"),
            numerals=("i", "ii°", "III+", "iv", "V", "VI", "vii°"),
            sevenths=(
                "minorMajor7",
                "halfDiminished",
                "augmented7",
                "minor7",
                "dominant7",
                "major7",
                "diminished7",
            ),
        ),
        "dorian": DiatonicPattern(
            triads=("minor", "minor", "major", "major", "minor", "diminished", "major"),
            numerals=("i", "ii", "III", "IV", "v", "vi°", "VII"),
            sevenths=(
                "minor7",
                "minor7",
                "major7",
                "dominant7",
                "minor7",
                "halfDiminished",
                "major7",
            ),
        ),
    }
)

PROGRESSIONS: Mapping[str, ProgressionDef] = MappingProxyType(
    {
        # Pop/rock
        "popCanon": ProgressionDef(
            (1, 5, 6, 4),
            "Pop Canon (I-V-vi-IV)",
            'Most common pop progression ever. "Let It Be", "No Woman No Cry".',
        ),
        "fifties": ProgressionDef(
            (1, 6, 4, 5),
            "Fifties (I-vi-IV-V)",
            'Doo-wop/oldies progression. "Stand By Me".',
        ),
        # Deep house / EDM
        "deepHouse1": ProgressionDef(
            (1, 6, 3, 7),
            "Deep House Classic (i-VI-III-VII)",
            "Haunting, driving progression. Minor key standard.",
            "minor",
        ),
        "deepHouse2": ProgressionDef(
            (1, 4, 7, 3),
            "Emotional Deep (i-iv-VII-III)",
            "Melancholic build. Great for breakdowns.",
            "minor",
        ),
        "deepHouse3": ProgressionDef(
            (1, 4, 6, 5),
            "Uplifting Minor (i-iv-VI-V)",
            "Minor but hopeful. Perfect for drops.",
            "minor",
        ),
        # Jazz
        "twoFiveOne": ProgressionDef(
            (2, 5, 1),
            "ii-V-I",
            "The jazz cadence. Tension → resolution.",
        ),
        # Tension/movement
        "andalusian": ProgressionDef(
            (1, 7, 6, 5),
            "Andalusian Cadence (i-VII-VI-V)",
            'Spanish/dramatic descent. "Hit The Road Jack".',
            "minor",
        ),
        # Blues
        "blues12": ProgressionDef(
            (1, 1, 1, 1, 4, 4, 1, 1, 5, 4, 1, 5),
            "12-Bar Blues",
            "The foundation of blues, rock, and early pop.",
        ),
    }
)


# Real-time identification: unique semitones above the lowest sounding
# note (unreduced, ascending) -> (chord catalog key, display name)
FAST_PATH_CHORDS: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "0-4-7": ("major", "Major Triad"),
        "0-3-7": ("minor", "Minor Triad"),
        "0-4-7-11": ("major7", "Major 7th"),
        "0-3-7-10": ("minor7", "Minor 7th"),
        "0-4-7-10": ("dominant7", "Dominant 7th"),
        "0-3-6": ("diminished", "Diminished"),
        "0-4-8": ("augmented", "Augmented"),
    }
)

# Real-time identification of two sounding pitches
FAST_PATH_INTERVALS: Mapping[int, str] = MappingProxyType(
    {
        3: "Minor Third",
        4: "Major Third",
        5: "Perfect Fourth",
        7: "Perfect Fifth",
        12: "Octave",
    }
)

_T = TypeVar("_T")


def _fold_key(key: str) -> str:
    """Fold a catalog key for lenient matching ('natural_minor' ~ 'naturalMinor')."""
    return key.replace("_", "").replace("-", "").replace(" ", "").lower()


def _resolve(table: Mapping[str, _T], key: str) -> str | None:
    if key in table:
        return key
    folded = _fold_key(key)
    for candidate in table:
        if _fold_key(candidate) == folded:
            return candidate
    return None


def resolve_scale_type(scale_type: str) -> str:
    """
    Resolve a scale type to its canonical catalog key.

    Raises:
        UnknownScaleTypeError: If no registered scale matches
    """
    key = _resolve(SCALES, scale_type)
    if key is None:
        raise UnknownScaleTypeError(scale_type)
    return key


def resolve_chord_type(chord_type: str) -> str:
    """
    Resolve a chord type to its canonical catalog key.

    Raises:
        UnknownChordTypeError: If no registered chord type matches
    """
    key = _resolve(CHORD_TYPES, chord_type)
    if key is None:
        raise UnknownChordTypeError(chord_type)
    return key


def resolve_progression(progression: str) -> str:
    """
    Resolve a progression name to its canonical catalog key.

    Raises:
        UnknownProgressionError: If no built-in progression matches
    """
    key = _resolve(PROGRESSIONS, progression)
    if key is None:
        raise UnknownProgressionError(progression)
    return key
