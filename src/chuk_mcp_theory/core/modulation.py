"""
Modulation helpers - pivot chords and key-change suggestions.

A pivot chord is a diatonic chord present in both keys (same root and
symbol), which lets a progression slide from one key into the other.
"""

from __future__ import annotations

from chuk_mcp_theory.constants import MAX_PIVOT_SUGGESTIONS, KeyRelationship
from chuk_mcp_theory.core.catalog import SCALES, resolve_scale_type
from chuk_mcp_theory.core.chord import get_diatonic_chords
from chuk_mcp_theory.core.pitch import PitchClass
from chuk_mcp_theory.models.theory import ModulationSuggestion, PivotChord

# Techniques that apply to every modulation
_BASE_TECHNIQUES: tuple[str, ...] = (
    "Use a pivot chord shared by both keys",
    "Use a ii-V-I in the new key",
)


def find_pivot_chords(
    root_a: str,
    scale_a: str,
    root_b: str,
    scale_b: str,
    use_sevenths: bool = False,
) -> list[PivotChord]:
    """
    Find chords shared by two keys.

    Args:
        root_a: First key root
        scale_a: First key scale type
        root_b: Second key root
        scale_b: Second key scale type
        use_sevenths: Compare seventh chords instead of triads

    Returns:
        Shared chords annotated with their numeral in each key, in
        key-A degree order. Empty when either key has no diatonic pattern.
    """
    chords_a = get_diatonic_chords(root_a, scale_a, use_sevenths)
    chords_b = get_diatonic_chords(root_b, scale_b, use_sevenths)
    if not chords_a or not chords_b:
        return []

    return [
        PivotChord(
            chord=entry_a.chord.name,
            in_key_a=f"{entry_a.numeral} of {root_a} {scale_a}",
            in_key_b=f"{entry_b.numeral} of {root_b} {scale_b}",
            suggestion=f"Play {entry_a.chord.name}, then move to {root_b} {scale_b}",
        )
        for entry_a in chords_a
        for entry_b in chords_b
        if entry_a.chord.name == entry_b.chord.name
    ]


def get_key_relationship(
    semitones: int, from_scale: str, to_scale: str
) -> tuple[KeyRelationship, str]:
    """
    Describe how two keys relate, given the semitone distance between roots.

    Returns:
        (relationship kind, display label)
    """
    if semitones == 0 and from_scale != to_scale:
        return KeyRelationship.PARALLEL, "Parallel (same root, different mode)"
    if semitones in (5, 7):
        return KeyRelationship.DOMINANT_SUBDOMINANT, "Dominant/Subdominant relationship"
    if semitones in (3, 9):
        return KeyRelationship.RELATIVE, "Relative Major/Minor"
    if semitones in (2, 10):
        return KeyRelationship.WHOLE_STEP, "Whole step away"
    if semitones in (1, 11):
        return KeyRelationship.HALF_STEP, "Half step away (dramatic!)"
    return KeyRelationship.OTHER, f"{semitones} semitones apart"


def get_modulation_techniques(semitones: int) -> list[str]:
    """Modulation techniques suited to the distance between roots."""
    techniques = list(_BASE_TECHNIQUES)

    if semitones in (1, 11):
        techniques.append("Direct modulation (bold key change)")
        techniques.append("Chromatic bass line leading to new key")
    if semitones == 7:
        techniques.append("Tonicize V (make V feel like temporary I)")
        techniques.append("Use V/V (secondary dominant)")
    if semitones == 5:
        techniques.append("Plagal cadence to new key")

    return techniques


def suggest_modulation(
    from_root: str,
    from_scale: str,
    to_root: str,
    to_scale: str,
) -> ModulationSuggestion:
    """
    Suggest how to modulate from one key to another.

    Raises:
        InvalidNoteNameError: If either root is not a note
        UnknownScaleTypeError: If either scale type is not registered
    """
    from_key = resolve_scale_type(from_scale)
    to_key = resolve_scale_type(to_scale)
    distance = PitchClass.parse(from_root).interval_to(PitchClass.parse(to_root)).semitones
    kind, label = get_key_relationship(distance, from_key, to_key)
    pivots = find_pivot_chords(from_root, from_key, to_root, to_key)

    return ModulationSuggestion(
        from_key=f"{from_root} {SCALES[from_key].name}",
        to_key=f"{to_root} {SCALES[to_key].name}",
        semitone_distance=distance,
        relationship=label,
        relationship_kind=kind,
        pivot_chords=pivots[:MAX_PIVOT_SUGGESTIONS],
        techniques=get_modulation_techniques(distance),
    )
