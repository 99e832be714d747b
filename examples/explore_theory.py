#!/usr/bin/env python3
"""
Example: Explore the theory engine.

Walks through notes, intervals, scales, diatonic chords, chord
identification and key detection.

Usage:
    python examples/explore_theory.py
"""

from chuk_mcp_theory import TheoryEngine
from chuk_mcp_theory.constants import ChordIdStrategy


def main() -> None:
    """Print a tour of the engine."""
    engine = TheoryEngine()

    print("Notes and frequencies")
    for name, octave in [("A", 4), ("C", 4), ("Bb", 2)]:
        print(f"  {name}{octave}: {engine.note_to_frequency(name, octave):.2f} Hz")
    print(f"  445 Hz is closest to {engine.frequency_to_note(445.0)}")

    print("\nIntervals from C")
    for target in ["E", "G", "F#", "C"]:
        interval = engine.get_interval("C", target)
        print(f"  C -> {target}: {interval.name} ({interval.just_ratio}, {interval.quality.value})")
    octave = engine.get_compound_interval("C", 4, "C", 5)
    print(f"  C4 -> C5: {octave.name} ({octave.total_semitones} semitones)")

    print("\nScales on D")
    for scale_type in ["major", "dorian", "minorPentatonic"]:
        scale = engine.get_scale_notes("D", scale_type)
        print(f"  {scale.name}: {' '.join(scale.notes)}")

    print("\nDiatonic chords in A natural minor")
    entries = engine.get_diatonic_chords("A", "naturalMinor", use_sevenths=True) or []
    for entry in entries:
        print(f"  {entry.numeral:5} {entry.chord.name}")

    print("\nChord identification")
    for notes in (["E", "G", "C"], ["F", "A", "C", "E"], ["C", "C#", "D"]):
        result = engine.identify_chord(notes)
        print(f"  {notes}: {result.name}")
    frequencies = [196.0, 246.94, 293.66, 349.23]
    result = engine.identify_chord(frequencies, ChordIdStrategy.FAST_PATH)
    print(f"  {frequencies} Hz: {result.name} ({result.stability.value if result.stability else '-'})")

    print("\nKey detection for a melody")
    melody = ["E", "F#", "G", "A", "B", "C", "D", "E"]
    for candidate in engine.detect_key(melody, limit=3):
        print(f"  {candidate.key}: {candidate.score:.2f}")


if __name__ == "__main__":
    main()
