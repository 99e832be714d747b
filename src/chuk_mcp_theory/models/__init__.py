"""
Pydantic models for the theory engine.

This module provides the result shapes returned by the engine:
- ScaleResult, ChordResult, ChordTone: constructed scales and chords
- DiatonicEntry, ProgressionStep: chords resolved against a key
- IntervalResult: interval analysis
- ChordIdentification, KeyCandidate: analysis of played notes
- PivotChord, ModulationSuggestion: key-change helpers
- CatalogEntry: catalog listings
- ProgressionDefinition: YAML shape of a project progression
"""

from chuk_mcp_theory.models.progression import ProgressionDefinition
from chuk_mcp_theory.models.theory import (
    CatalogEntry,
    ChordIdentification,
    ChordResult,
    ChordTone,
    DiatonicEntry,
    IntervalResult,
    KeyCandidate,
    ModulationSuggestion,
    PivotChord,
    ProgressionStep,
    ScaleResult,
)

__all__ = [
    "CatalogEntry",
    "ChordIdentification",
    "ChordResult",
    "ChordTone",
    "DiatonicEntry",
    "IntervalResult",
    "KeyCandidate",
    "ModulationSuggestion",
    "PivotChord",
    "ProgressionDefinition",
    "ProgressionStep",
    "ScaleResult",
]
