"""
Pitch primitives - PitchClass, Interval, Note and NoteRef.

PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.
Note pins a pitch class to an octave and converts to MIDI and Hz.
NoteRef is the tagged union callers use to hand notes to the engine,
either by name or by measured frequency.

Frequencies are equal-tempered around A4 = 440 Hz (MIDI 69):

    f = 440 * 2^((midi - 69) / 12)
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar, Union

from chuk_mcp_theory.constants import (
    A4_FREQUENCY,
    A4_MIDI_NUMBER,
    DEFAULT_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
    IntervalQuality,
)
from chuk_mcp_theory.core.catalog import (
    FLAT_TO_SHARP,
    INTERVALS_BY_SEMITONES,
    NOTE_NAMES,
    NOTE_NAMES_FLAT,
    IntervalDef,
)
from chuk_mcp_theory.errors import InvalidFrequencyError, InvalidNoteNameError

# Note name with optional octave, e.g. "C", "Db", "F#3", "A-1"
_NOTE_WITH_OCTAVE = re.compile(r"^([A-Ga-g][#b]?)(-?\d+)?$")


def _display_spelling(name: str) -> str:
    """Trim and capitalise: ' db ' -> 'Db' (not yet validated)."""
    if not isinstance(name, str):
        raise InvalidNoteNameError(name)
    stripped = name.strip()
    if not stripped:
        raise InvalidNoteNameError(name)
    return stripped[0].upper() + stripped[1:]


def _canonical_spelling(name: str) -> str:
    """Normalize case and flats: ' db ' -> 'C#'."""
    spelled = _display_spelling(name)
    spelled = FLAT_TO_SHARP.get(spelled, spelled)
    if spelled not in NOTE_NAMES:
        raise InvalidNoteNameError(name)
    return spelled


def note_name_to_index(name: str) -> int:
    """
    Map a spelled note to its pitch-class index (C = 0 ... B = 11).

    Sharps and flats are both accepted; flats are normalized to sharps.

    Raises:
        InvalidNoteNameError: If the name is not a recognised spelling
    """
    return NOTE_NAMES.index(_canonical_spelling(name))


def index_to_note_name(index: int, use_flats: bool = False) -> str:
    """Spell any integer as a pitch class (wraps negatives and values > 11)."""
    normalized = ((index % 12) + 12) % 12
    return NOTE_NAMES_FLAT[normalized] if use_flats else NOTE_NAMES[normalized]


def canonical_note_name(name: str) -> str:
    """Canonical sharp spelling of a note name ('Bb' -> 'A#')."""
    return _canonical_spelling(name)


def display_note_name(name: str) -> str:
    """Caller's spelling, trimmed and capitalised ('bb' -> 'Bb', ' c#' -> 'C#')."""
    _canonical_spelling(name)
    return _display_spelling(name)


def midi_to_frequency(midi: float) -> float:
    """Equal-tempered frequency of a (possibly fractional) MIDI number."""
    return A4_FREQUENCY * 2 ** ((midi - A4_MIDI_NUMBER) / SEMITONES_PER_OCTAVE)


def note_to_frequency(name: str, octave: int = DEFAULT_OCTAVE) -> float:
    """
    Frequency of a note in Hz.

    Octave 4 is the middle octave. No bounds are enforced: very high or
    low octaves extrapolate past the audible range.

    Args:
        name: Note name like 'A', 'C#', 'Db'
        octave: Octave number

    Returns:
        Frequency in Hz (A4 = 440.0 exactly)
    """
    midi = (octave + 1) * SEMITONES_PER_OCTAVE + note_name_to_index(name)
    return midi_to_frequency(midi)


def _validate_frequency(frequency: float) -> float:
    if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
        raise InvalidFrequencyError(frequency)
    if not math.isfinite(frequency) or frequency <= 0:
        raise InvalidFrequencyError(frequency)
    return float(frequency)


def _exact_midi(frequency: float) -> float:
    return SEMITONES_PER_OCTAVE * math.log2(frequency / A4_FREQUENCY) + A4_MIDI_NUMBER


def frequency_to_midi(frequency: float) -> int:
    """
    Nearest MIDI number for a frequency.

    Rounds half up, so a frequency exactly between two semitones snaps
    to the upper one.

    Raises:
        InvalidFrequencyError: If the frequency is not positive and finite
    """
    return math.floor(_exact_midi(_validate_frequency(frequency)) + 0.5)


def frequency_to_note(frequency: float) -> str:
    """
    Nearest pitch-class name for a frequency.

    Octave-lossy: 220, 440 and 880 Hz all return 'A'. Frequencies far
    from any tempered pitch still snap to the nearest class; use
    cents_offset() to see how far off they were.
    """
    return index_to_note_name(frequency_to_midi(frequency))


def cents_offset(frequency: float) -> float:
    """Signed distance in cents from the nearest equal-tempered pitch."""
    exact = _exact_midi(_validate_frequency(frequency))
    return round((exact - math.floor(exact + 0.5)) * 100, 2)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending, 0-11)."""
        return Interval((other.value - self.value) % 12)

    def to_midi(self, octave: int = DEFAULT_OCTAVE) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        return index_to_note_name(self.value, prefer_flats)

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Db'.

        Raises:
            InvalidNoteNameError: If the name is not a recognised spelling
        """
        return cls(note_name_to_index(name))


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Values 0-12 carry the catalog metadata (name, just ratio,
    consonance). Larger values are compound intervals; their metadata
    is that of the reduced interval.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def octaves(self) -> int:
        """Whole octaves spanned (an exact octave counts as 1)."""
        return abs(self._semitones) // 12

    @property
    def simple(self) -> Interval:
        """The interval reduced into 0-11 (an octave becomes unison)."""
        return Interval(self._semitones % 12)

    @property
    def definition(self) -> IntervalDef | None:
        """Catalog entry: exact for 0-12, the reduced entry for compounds."""
        exact = INTERVALS_BY_SEMITONES.get(self._semitones)
        if exact is not None:
            return exact
        return INTERVALS_BY_SEMITONES.get(self._semitones % 12)

    @property
    def name(self) -> str:
        entry = self.definition
        return entry.name if entry else f"{self._semitones} semitones"

    @property
    def abbreviation(self) -> str:
        entry = self.definition
        return entry.abbrev if entry else f"{self._semitones}st"

    @property
    def just_ratio(self) -> str:
        entry = self.definition
        return entry.just_ratio if entry else "N/A"

    @property
    def quality(self) -> IntervalQuality:
        entry = self.definition
        return entry.quality if entry else IntervalQuality.UNKNOWN

    @property
    def equal_ratio(self) -> float:
        """Equal-tempered frequency multiplier, 2^(n/12)."""
        return float(2 ** (self._semitones / 12))

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(12 - (self._semitones % 12))

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Short interval name (P5, m3, M3+1oct)."""
        if self._semitones == 12:
            return "P8"
        base = INTERVALS_BY_SEMITONES[self._semitones % 12].abbrev
        octaves = self._semitones // 12
        if octaves == 0:
            return base
        return f"{base}+{octaves}oct" if octaves > 0 else f"{base}{octaves}oct"


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)


@dataclass(frozen=True)
class Note:
    """
    A pitch class in a specific octave.

    Converts bijectively to and from MIDI numbers (C4 = 60, A4 = 69).
    """

    pitch_class: PitchClass
    octave: int = DEFAULT_OCTAVE

    @property
    def name(self) -> str:
        """Canonical sharp name without octave."""
        return self.pitch_class.spell()

    @property
    def midi(self) -> int:
        return self.pitch_class.to_midi(self.octave)

    @property
    def frequency(self) -> float:
        return midi_to_frequency(self.midi)

    @classmethod
    def from_midi(cls, midi_note: int) -> Note:
        """Note for a MIDI number (60 -> C4)."""
        return cls(PitchClass.from_midi(midi_note), midi_note // 12 - 1)

    @classmethod
    def from_frequency(cls, frequency: float) -> Note:
        """Nearest equal-tempered note, keeping the octave."""
        return cls.from_midi(frequency_to_midi(frequency))

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse 'C#4', 'Bb3' or a bare 'E' (octave 4).

        Raises:
            InvalidNoteNameError: If the text is not a note
        """
        match = _NOTE_WITH_OCTAVE.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise InvalidNoteNameError(text)
        octave = int(match.group(2)) if match.group(2) is not None else DEFAULT_OCTAVE
        return cls(PitchClass.parse(match.group(1)), octave)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"


@dataclass(frozen=True)
class ByName:
    """
    A note given by spelling, optionally with an octave.

    Without an octave the note has no pitch height; strategies that
    need one assume the default octave.
    """

    name: str
    octave: int | None = None

    def __post_init__(self) -> None:
        # Fail fast on bad spellings
        note_name_to_index(self.name)

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass.parse(self.name)

    @property
    def has_height(self) -> bool:
        return self.octave is not None

    @property
    def frequency(self) -> float:
        octave = DEFAULT_OCTAVE if self.octave is None else self.octave
        return note_to_frequency(self.name, octave)

    @property
    def label(self) -> str:
        return self.name.strip() if self.octave is None else f"{self.name.strip()}{self.octave}"


@dataclass(frozen=True)
class ByFrequency:
    """A note given by a measured frequency, with an optional display label."""

    frequency: float
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", _validate_frequency(self.frequency))

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass(frequency_to_midi(self.frequency) % 12)

    @property
    def has_height(self) -> bool:
        return True


NoteRef = Union[ByName, ByFrequency]

# What callers may hand to the boundary before normalization
NoteInput = Union[NoteRef, Note, str, float, int, Mapping[str, object]]


def coerce_note_ref(value: NoteInput) -> NoteRef:
    """
    Normalize a caller-supplied note into a NoteRef.

    Accepts:
        - ByName / ByFrequency (returned unchanged)
        - Note -> ByName with octave
        - 'C', 'Db', 'F#3' -> ByName
        - int/float -> ByFrequency (Hz)
        - {'frequency'|'freq': Hz, 'label'|'note': name} -> ByFrequency
        - {'note': name} -> ByName

    Raises:
        InvalidNoteNameError: For unrecognised spellings
        InvalidFrequencyError: For non-positive frequencies
        TypeError: For anything else
    """
    if isinstance(value, (ByName, ByFrequency)):
        return value
    if isinstance(value, Note):
        return ByName(value.name, value.octave)
    if isinstance(value, bool):
        raise TypeError(ErrorMessages.UNSUPPORTED_NOTE_INPUT.format(value=value))
    if isinstance(value, (int, float)):
        return ByFrequency(float(value))
    if isinstance(value, str):
        match = _NOTE_WITH_OCTAVE.match(value.strip())
        if match is None:
            raise InvalidNoteNameError(value)
        octave = int(match.group(2)) if match.group(2) is not None else None
        return ByName(match.group(1), octave)
    if isinstance(value, Mapping):
        frequency = value.get("frequency", value.get("freq"))
        label = value.get("label", value.get("note"))
        if frequency is not None:
            return ByFrequency(frequency, str(label) if label is not None else None)  # type: ignore[arg-type]
        if isinstance(label, str):
            return coerce_note_ref(label)
    raise TypeError(ErrorMessages.UNSUPPORTED_NOTE_INPUT.format(value=value))
