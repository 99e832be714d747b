#!/usr/bin/env python3
"""
Example: Build progressions and export them as MIDI.

Builds a few catalog progressions, prints a modulation plan between two
keys and writes each progression as block chords you can open in a DAW.

Usage:
    python examples/export_progression.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_theory import TheoryEngine
from chuk_mcp_theory.compiler import progression_to_midi, save_midi


def main() -> None:
    """Export example progressions."""
    engine = TheoryEngine()
    output_dir = Path(__file__).parent / "output"

    plans = [
        ("popCanon", "G", "major", False, 100),
        ("twoFiveOne", "Bb", "major", True, 90),
        ("deepHouse1", "F", "naturalMinor", True, 122),
        ("andalusian", "E", "harmonicMinor", False, 110),
    ]

    for progression, root, scale_type, sevenths, tempo in plans:
        steps = engine.build_progression(progression, root, scale_type, sevenths) or []
        symbols = " | ".join(step.chord.name for step in steps)
        print(f"{progression} in {root} {scale_type}: {symbols}")

        mid = progression_to_midi(steps, tempo_bpm=tempo, track_name=progression)
        path = save_midi(mid, output_dir / f"{progression}_{root}.mid")
        print(f"  Created: {path}")

    print("\nModulating from C major to E minor")
    plan = engine.suggest_modulation("C", "major", "E", "naturalMinor")
    print(f"  {plan.relationship} ({plan.semitone_distance} semitones)")
    for pivot in plan.pivot_chords:
        print(f"  {pivot.chord}: {pivot.in_key_a} / {pivot.in_key_b}")
    for technique in plan.techniques:
        print(f"  - {technique}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
