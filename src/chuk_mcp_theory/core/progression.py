"""
Named progressions resolved against a key.

A progression is a list of 1-indexed scale degrees. Resolving it picks
the matching diatonic chord for each position, repeats included.
"""

from __future__ import annotations

from chuk_mcp_theory.core.catalog import PROGRESSIONS, ProgressionDef, resolve_progression
from chuk_mcp_theory.core.chord import get_diatonic_chords
from chuk_mcp_theory.models.theory import CatalogEntry, ProgressionStep


def get_progression(progression: str) -> ProgressionDef:
    """
    Get a built-in progression template.

    Raises:
        UnknownProgressionError: If no built-in progression matches
    """
    return PROGRESSIONS[resolve_progression(progression)]


def list_progressions() -> list[CatalogEntry]:
    """All built-in progressions in catalog order."""
    return [
        CatalogEntry(
            key=key,
            name=progression.name,
            description=progression.description,
            key_type=progression.key_type,
        )
        for key, progression in PROGRESSIONS.items()
    ]


def build_progression(
    progression: str | ProgressionDef,
    root: str,
    scale_type: str = "major",
    use_sevenths: bool = False,
) -> list[ProgressionStep] | None:
    """
    Build a chord progression in a specific key.

    Args:
        progression: Built-in progression key, or a ProgressionDef
        root: Key root
        scale_type: Scale catalog key
        use_sevenths: Use seventh chords instead of triads

    Returns:
        One ProgressionStep per position, or None when the scale has
        no diatonic pattern

    Raises:
        UnknownProgressionError: For an unknown progression key
        UnknownScaleTypeError: For an unknown scale type
        InvalidNoteNameError: For an invalid root
    """
    template = get_progression(progression) if isinstance(progression, str) else progression
    diatonic = get_diatonic_chords(root, scale_type, use_sevenths)
    if diatonic is None:
        return None

    steps = []
    for position, degree in enumerate(template.degrees, start=1):
        entry = diatonic[degree - 1]
        steps.append(
            ProgressionStep(
                position=position,
                degree=degree,
                numeral=entry.numeral,
                root=entry.root,
                chord_type=entry.chord_type,
                chord=entry.chord,
            )
        )
    return steps
