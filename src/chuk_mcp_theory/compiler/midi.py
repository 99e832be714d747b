"""
MIDI rendering - chords and progressions as block chords.

This module turns built chords into note events and writes them as a
single-track MIDI file using mido. All operations are deterministic:
same chords in, same MIDI out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from chuk_mcp_theory.models.theory import ChordResult, ProgressionStep


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 90


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def chords_to_events(
    chords: Sequence[ChordResult],
    beats_per_chord: float = 4,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay chords end to end as block chords.

    Each chord sounds all of its tones (at their built octaves) for
    beats_per_chord beats, starting where the previous chord ends.

    Raises:
        ValueError: If a chord tone falls outside the MIDI range
    """
    length = beats_to_ticks(beats_per_chord, ticks_per_beat)
    return [
        MidiEvent(
            pitch=tone.midi,
            start_ticks=index * length,
            duration_ticks=length,
            velocity=velocity,
            channel=channel,
        )
        for index, chord in enumerate(chords)
        for tone in chord.frequencies
    ]


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    track_name: str | None = None,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        track_name: Optional track name meta message

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    if track_name:
        track.append(MetaMessage("track_name", name=track_name, time=0))
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    # (absolute tick, message) pairs; converted to deltas below
    timeline: list[tuple[int, Message]] = []
    for event in events:
        timeline.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        timeline.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick so repeated chords re-strike
    timeline.sort(key=lambda item: (item[0], item[1].type != "note_off", item[1].note))

    current_time = 0
    for abs_time, msg in timeline:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def progression_to_midi(
    steps: Sequence[ProgressionStep] | Sequence[ChordResult],
    tempo_bpm: int = 120,
    beats_per_chord: float = 4,
    velocity: int = DEFAULT_VELOCITY,
    track_name: str | None = None,
) -> MidiFile:
    """
    Render a resolved progression (or a plain chord list) to MIDI.

    Example:
        steps = build_progression("popCanon", "C")
        progression_to_midi(steps, tempo_bpm=96).save("pop_canon.mid")
    """
    chords = [getattr(step, "chord", step) for step in steps]
    events = chords_to_events(chords, beats_per_chord=beats_per_chord, velocity=velocity)
    return events_to_midi(events, tempo_bpm=tempo_bpm, track_name=track_name)


def save_midi(mid: MidiFile, path: Path) -> Path:
    """Save a MidiFile, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    mid.save(str(path))
    return path
