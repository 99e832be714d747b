"""
Key detection - best-fit scoring over a fixed candidate set.

Every root (12) is paired with each candidate scale (major, natural
minor, dorian, mixolydian) and scored against the distinct pitch
classes played:

    score = (matched - 2 * unmatched) / total

Non-positive scores are dropped. This is a simple heuristic, not a
probabilistic model: a full diatonic set fits its relative modes
equally well.

Ties are broken explicitly: score descending, then scale priority
(the order above), then root C..B.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_theory.constants import KEY_DETECTION_SCALES, MAX_KEY_CANDIDATES, MIN_DISTINCT_NOTES
from chuk_mcp_theory.core.pitch import NoteInput, PitchClass, coerce_note_ref
from chuk_mcp_theory.core.scale import get_scale_notes
from chuk_mcp_theory.models.theory import KeyCandidate


def detect_key(
    notes: Iterable[NoteInput],
    limit: int = MAX_KEY_CANDIDATES,
) -> list[KeyCandidate]:
    """
    Detect the probable key of a set of notes.

    Args:
        notes: Note names, frequencies, {note, freq} mappings or NoteRefs,
               typically a trailing window of recently played notes
        limit: Maximum number of candidates to return (default 5);
               zero or negative returns no candidates

    Returns:
        Up to `limit` candidates, best first. Empty when fewer than two
        distinct pitch classes were played.
    """
    played = {coerce_note_ref(n).pitch_class for n in notes}
    if len(played) < MIN_DISTINCT_NOTES:
        return []

    total = len(played)
    ranked: list[tuple[float, int, int, KeyCandidate]] = []

    for root in PitchClass:
        for priority, scale_type in enumerate(KEY_DETECTION_SCALES):
            scale = get_scale_notes(root.spell(), scale_type)
            members = set(scale.note_indices)
            matched = sum(1 for pc in played if pc.value in members)
            unmatched = total - matched
            score = (matched - unmatched * 2) / total
            if score <= 0:
                continue
            candidate = KeyCandidate(
                key=scale.name,
                root=root.spell(),
                scale=scale_type,
                score=score,
                matched_notes=matched,
                total_notes=total,
            )
            ranked.append((-score, priority, root.value, candidate))

    ranked.sort(key=lambda item: item[:3])
    return [candidate for *_, candidate in ranked[: max(limit, 0)]]
