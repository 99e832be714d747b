"""
Interval analysis.

get_interval() is directional and reduced mod 12: the distance from A
up to B, wrapped into 0-11. An octave therefore reads as a unison.
get_compound_interval() takes octaves into account and keeps the span.
"""

from __future__ import annotations

from chuk_mcp_theory.core.catalog import INTERVALS
from chuk_mcp_theory.core.pitch import Interval, Note, PitchClass
from chuk_mcp_theory.models.theory import CatalogEntry, IntervalResult


def _result(interval: Interval, octaves: int = 0, total: int | None = None) -> IntervalResult:
    return IntervalResult(
        semitones=interval.semitones,
        half_steps=interval.semitones,
        whole_steps=interval.semitones / 2,
        frequency_ratio=round(interval.equal_ratio, 4),
        just_ratio=interval.just_ratio,
        name=interval.name,
        abbreviation=interval.abbreviation,
        quality=interval.quality,
        octaves=octaves,
        total_semitones=total,
    )


def get_interval(note_a: str, note_b: str) -> IntervalResult:
    """
    Interval from note_a up to note_b, reduced into 0-11.

    Args:
        note_a: Starting note name
        note_b: Target note name

    Returns:
        IntervalResult with semitones, tempered ratio, just ratio,
        name and consonance quality

    Raises:
        InvalidNoteNameError: If either name is not a note
    """
    interval = PitchClass.parse(note_a).interval_to(PitchClass.parse(note_b))
    return _result(interval)


def get_compound_interval(note_a: str, octave_a: int, note_b: str, octave_b: int) -> IntervalResult:
    """
    Interval between two pitched notes, keeping the octave span.

    semitones stays reduced (0-11) for comparison with get_interval();
    total_semitones and octaves carry the full distance. A descending
    pair is measured by its absolute distance. An exact octave is named
    "Octave"; wider exact multiples are named by their octave count
    ("2 Octaves", just ratio 4:1) rather than the unison.
    """
    low = Note(PitchClass.parse(note_a), octave_a)
    high = Note(PitchClass.parse(note_b), octave_b)
    total = abs(high.midi - low.midi)
    compound = Interval(total)
    named = Interval.OCTAVE if total and total % 12 == 0 else compound
    name, just_ratio = named.name, named.just_ratio
    if total > 12 and total % 12 == 0:
        name = f"{compound.octaves} Octaves"
        just_ratio = f"{2 ** compound.octaves}:1"
    reduced = compound.simple
    return IntervalResult(
        semitones=reduced.semitones,
        half_steps=total,
        whole_steps=total / 2,
        frequency_ratio=round(compound.equal_ratio, 4),
        just_ratio=just_ratio,
        name=name,
        abbreviation=str(compound),
        quality=named.quality,
        octaves=compound.octaves,
        total_semitones=total,
    )


def list_intervals() -> list[CatalogEntry]:
    """The 13 canonical intervals, unison through octave."""
    return [
        CatalogEntry(
            key=key,
            name=entry.name,
            description=f"{entry.semitones} semitones, just {entry.just_ratio}, {entry.quality.value}",
        )
        for key, entry in INTERVALS.items()
    ]
