"""
Constants and enums for the theory engine.

No magic strings - use enums and Literal types for constrained values.
"""

import re
from enum import Enum
from typing import Literal

# Concert pitch: A4 = 440 Hz = MIDI 69
A4_FREQUENCY = 440.0
A4_MIDI_NUMBER = 69

# Octave 4 is the "middle" octave (C4 = MIDI 60)
DEFAULT_OCTAVE = 4

SEMITONES_PER_OCTAVE = 12


class IntervalQuality(str, Enum):
    """Consonance classification of an interval."""

    PERFECT = "perfect"
    CONSONANT = "consonant"
    DISSONANT = "dissonant"
    UNKNOWN = "unknown"  # Only for synthesized fallback entries


class ChordCharacter(str, Enum):
    """
    Character tag of a chord type.

    Triads are consonant/dissonant/open, sevenths and extensions
    carry a looser "colour" tag.
    """

    CONSONANT = "consonant"
    DISSONANT = "dissonant"
    OPEN = "open"
    JAZZY = "jazzy"
    TENSION = "tension"
    EXOTIC = "exotic"
    BRIGHT = "bright"
    SMOOTH = "smooth"
    LUSH = "lush"


class Stability(str, Enum):
    """Real-time consonance verdict for a sounding set of notes."""

    CONSONANT = "Consonant"
    DISSONANT = "Dissonant"


class ChordIdStrategy(str, Enum):
    """Chord identification strategies."""

    EXHAUSTIVE = "exhaustive"  # Every note tried as root (theory lookups)
    FAST_PATH = "fast_path"  # Lowest note is the root (real-time display)


class KeyRelationship(str, Enum):
    """Qualitative relationship between two keys."""

    PARALLEL = "parallel"
    DOMINANT_SUBDOMINANT = "dominant_subdominant"
    RELATIVE = "relative"
    WHOLE_STEP = "whole_step"
    HALF_STEP = "half_step"
    OTHER = "other"


# Scales tried by key detection, in tie-break priority order
KEY_DETECTION_SCALES: tuple[str, ...] = ("major", "naturalMinor", "dorian", "mixolydian")

# Key detection returns at most this many candidates
MAX_KEY_CANDIDATES = 5

# Identification and detection need at least this many distinct pitches
MIN_DISTINCT_NOTES = 2

# Semitone distances (mod 12) that make a sounding set dissonant
DISSONANT_SEMITONES: frozenset[int] = frozenset({1, 2, 6, 10, 11})

# Pivot chords reported by a modulation suggestion
MAX_PIVOT_SUGGESTIONS = 3

# Key type of a progression
KeyType = Literal["major", "minor"]

UNKNOWN_CHORD_NAME = "Unknown"

# Progression keys and export names become file stems
FILE_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note name: '{name}'. Expected one of C, C#/Db, D, ... B."
    INVALID_FREQUENCY = "Invalid frequency: {frequency}. Must be a positive, finite number."
    UNKNOWN_SCALE = "Unknown scale type: '{scale_type}'."
    UNKNOWN_CHORD = "Unknown chord type: '{chord_type}'."
    UNKNOWN_PROGRESSION = "Unknown progression: '{progression}'."
    DIATONIC_UNAVAILABLE = "Diatonic chords are not available for scale '{scale_type}'."
    UNSUPPORTED_NOTE_INPUT = "Cannot interpret {value!r} as a note."
    INVALID_FILE_KEY = "Invalid name: '{name}'. Use letters, digits, '-' and '_' only."


class SuccessMessages:
    """Standardized success messages."""

    KEY_SELECTED = "Selected key {root} {scale_type}."
    MIDI_EXPORTED = "Exported progression '{progression}' to {path}."
