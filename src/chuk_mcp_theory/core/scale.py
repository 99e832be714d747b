"""
Scale construction and membership.

Scales are offset templates from a root. The produced notes keep the
template's order (they are not re-sorted), so a scale's first note is
always its root.
"""

from __future__ import annotations

from chuk_mcp_theory.core.catalog import SCALES, resolve_scale_type
from chuk_mcp_theory.core.pitch import PitchClass, canonical_note_name, display_note_name
from chuk_mcp_theory.models.theory import CatalogEntry, ScaleResult


def get_scale_notes(root: str, scale_type: str = "major") -> ScaleResult:
    """
    Get all notes in a scale.

    Args:
        root: Root note (e.g. 'A', 'Bb')
        scale_type: Scale catalog key (e.g. 'major', 'naturalMinor')

    Returns:
        ScaleResult with notes in template order

    Raises:
        InvalidNoteNameError: If the root is not a note
        UnknownScaleTypeError: If the scale type is not registered
    """
    key = resolve_scale_type(scale_type)
    scale = SCALES[key]
    root_pc = PitchClass.parse(root)
    root = display_note_name(root)
    pitches = [root_pc.transpose(offset) for offset in scale.intervals]

    return ScaleResult(
        root=root,
        type=key,
        name=f"{root} {scale.name}",
        notes=[p.spell() for p in pitches],
        intervals=list(scale.intervals),
        description=scale.description,
        note_indices=[p.value for p in pitches],
    )


def is_note_in_scale(note: str, root: str, scale_type: str) -> bool:
    """
    Check whether a note belongs to a scale.

    Both sides are compared in canonical sharp spelling, so 'Bb' is
    found in a scale displayed with 'A#'.
    """
    return canonical_note_name(note) in get_scale_notes(root, scale_type).notes


def list_scales() -> list[CatalogEntry]:
    """All registered scale types in catalog order."""
    return [
        CatalogEntry(key=key, name=scale.name, description=scale.description)
        for key, scale in SCALES.items()
    ]
