"""
Result models - what the engine hands back to callers.

Every result is a frozen pydantic model: immutable, comparable by value
and serializable with model_dump(mode="json") for the tool layer.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.constants import (
    ChordCharacter,
    ChordIdStrategy,
    IntervalQuality,
    KeyRelationship,
    KeyType,
    Stability,
)


class CatalogEntry(BaseModel):
    """A catalog listing row (scale, chord type, interval or progression)."""

    key: str = Field(..., description="Catalog key (e.g. 'naturalMinor')")
    name: str = Field(..., description="Display name")
    description: str = Field("", description="Human-readable description")
    key_type: KeyType | None = Field(None, description="Progressions only: major or minor")

    model_config = {"frozen": True}


class IntervalResult(BaseModel):
    """Analysis of the interval from one note to another."""

    semitones: int = Field(..., ge=0, le=11, description="Directional distance, mod 12")
    half_steps: int
    whole_steps: float
    frequency_ratio: float = Field(..., description="2^(n/12), 4 decimal places")
    just_ratio: str = Field(..., description="Just-intonation ratio (reference only)")
    name: str
    abbreviation: str
    quality: IntervalQuality
    octaves: int = Field(0, ge=0, description="Whole octaves spanned (compound intervals)")
    total_semitones: int | None = Field(
        None, description="Unreduced distance when octaves are known"
    )

    model_config = {"frozen": True}


class ScaleResult(BaseModel):
    """A scale built on a root."""

    root: str
    type: str = Field(..., description="Scale catalog key")
    name: str = Field(..., description="Display name, e.g. 'C Major (Ionian)'")
    notes: list[str] = Field(..., description="Pitch classes in template order")
    intervals: list[int] = Field(..., description="Template offsets from the root")
    description: str
    note_indices: list[int] = Field(..., description="Pitch-class indices of the notes")

    model_config = {"frozen": True}


class ChordTone(BaseModel):
    """A chord tone pinned to an octave."""

    note: str
    octave: int
    frequency: float
    midi: int

    model_config = {"frozen": True}


class ChordResult(BaseModel):
    """A chord built on a root."""

    root: str
    type: str = Field(..., description="Chord catalog key")
    name: str = Field(..., description="Root + symbol, e.g. 'Cm7'")
    full_name: str = Field(..., description="e.g. 'C Minor 7th'")
    notes: list[str]
    intervals: list[int]
    formula: str
    quality: ChordCharacter
    frequencies: list[ChordTone]

    model_config = {"frozen": True}


class DiatonicEntry(BaseModel):
    """One scale degree's chord in a key."""

    degree: int = Field(..., ge=1)
    numeral: str
    root: str
    chord_type: str
    chord: ChordResult

    model_config = {"frozen": True}


class ProgressionStep(BaseModel):
    """A progression position resolved against a key."""

    position: int = Field(..., ge=1)
    degree: int = Field(..., ge=1, le=7)
    numeral: str
    root: str
    chord_type: str
    chord: ChordResult

    model_config = {"frozen": True}


class ChordIdentification(BaseModel):
    """
    Result of chord identification, shared by both strategies.

    An unidentified set is a normal result: name 'Unknown', confidence 0.
    """

    strategy: ChordIdStrategy
    name: str = Field(..., description="Chord name or 'Unknown'")
    root: str | None = None
    chord_type: str | None = Field(None, description="Catalog chord key when matched")
    notes: list[str] = Field(default_factory=list, description="Unique pitch classes")
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    semitones: list[int] = Field(default_factory=list)
    ratios: list[float] = Field(default_factory=list, description="Fast path: ratio to root")
    stability: Stability | None = None
    chord: ChordResult | None = Field(None, description="Exhaustive match: the built chord")

    model_config = {"frozen": True}

    @property
    def identified(self) -> bool:
        return self.confidence > 0


class KeyCandidate(BaseModel):
    """A (root, scale) guess from key detection."""

    key: str = Field(..., description="Display label, e.g. 'C Major (Ionian)'")
    root: str
    scale: str = Field(..., description="Scale catalog key")
    score: float
    matched_notes: int
    total_notes: int

    model_config = {"frozen": True}


class PivotChord(BaseModel):
    """A chord shared by two keys."""

    chord: str
    in_key_a: str
    in_key_b: str
    suggestion: str

    model_config = {"frozen": True}


class ModulationSuggestion(BaseModel):
    """How to get from one key to another."""

    from_key: str
    to_key: str
    semitone_distance: int = Field(..., ge=0, le=11)
    relationship: str
    relationship_kind: KeyRelationship
    pivot_chords: list[PivotChord]
    techniques: list[str]

    model_config = {"frozen": True}
