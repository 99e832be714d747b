"""
MIDI rendering for chords and progressions.
"""

from chuk_mcp_theory.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    chords_to_events,
    events_to_midi,
    progression_to_midi,
    save_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "chords_to_events",
    "events_to_midi",
    "progression_to_midi",
    "save_midi",
]
