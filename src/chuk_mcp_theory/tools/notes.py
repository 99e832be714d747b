"""
Note tools - MCP tools for notes, frequencies and intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core.pitch import Note, cents_offset
from chuk_mcp_theory.engine import TheoryEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer, engine: TheoryEngine) -> dict[str, Any]:
    """
    Register note and interval tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The theory engine

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_info(note: str) -> str:
        """
        Describe a note: pitch class, spellings, MIDI number and frequency.

        Args:
            note: Note with optional octave ('A', 'C#3', 'Bb5'); octave defaults to 4

        Returns:
            JSON string with note details

        Example:
            theory_note_info(note="C#4")
        """
        try:
            parsed = Note.parse(note)
            return json.dumps(
                {
                    "status": "success",
                    "note": {
                        "name": parsed.name,
                        "flat_name": parsed.pitch_class.spell(prefer_flats=True),
                        "index": parsed.pitch_class.value,
                        "octave": parsed.octave,
                        "midi": parsed.midi,
                        "frequency": parsed.frequency,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_info"] = theory_note_info

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_to_frequency(note: str, octave: int = 4) -> str:
        """
        Equal-tempered frequency of a note (A4 = 440 Hz).

        Args:
            note: Note name ('A', 'C#', 'Db')
            octave: Octave number (default 4)

        Returns:
            JSON string with the frequency in Hz

        Example:
            theory_note_to_frequency(note="A", octave=4)
        """
        try:
            frequency = engine.note_to_frequency(note, octave)
            return json.dumps(
                {"status": "success", "note": note, "octave": octave, "frequency": frequency}
            )
        except Exception as e:
            logger.exception("Failed to convert note to frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_to_frequency"] = theory_note_to_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def theory_frequency_to_note(frequency: float) -> str:
        """
        Nearest note for a frequency.

        Returns the pitch class, plus the nearest pitched note and how
        many cents the frequency is off it.

        Args:
            frequency: Frequency in Hz

        Returns:
            JSON string with the nearest note

        Example:
            theory_frequency_to_note(frequency=261.63)
        """
        try:
            nearest = Note.from_frequency(frequency)
            return json.dumps(
                {
                    "status": "success",
                    "frequency": frequency,
                    "note": engine.frequency_to_note(frequency),
                    "nearest": str(nearest),
                    "midi": nearest.midi,
                    "cents": cents_offset(frequency),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert frequency to note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_frequency_to_note"] = theory_frequency_to_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval(
        note_a: str,
        note_b: str,
        octave_a: int | None = None,
        octave_b: int | None = None,
    ) -> str:
        """
        Analyze the interval from one note to another.

        Without octaves the distance is reduced to 0-11 semitones (an
        octave reads as a unison). With both octaves the full span is kept.

        Args:
            note_a: Starting note
            note_b: Target note
            octave_a: Optional octave of note_a
            octave_b: Optional octave of note_b

        Returns:
            JSON string with semitones, ratios, name and quality

        Example:
            theory_interval(note_a="C", note_b="G")
        """
        try:
            if octave_a is not None and octave_b is not None:
                result = engine.get_compound_interval(note_a, octave_a, note_b, octave_b)
            else:
                result = engine.get_interval(note_a, note_b)
            return json.dumps({"status": "success", "interval": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to analyze interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval"] = theory_interval

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_intervals() -> str:
        """
        List the 13 canonical intervals (unison through octave).

        Returns:
            JSON string with interval entries

        Example:
            theory_list_intervals()
        """
        try:
            intervals = engine.list_intervals()
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [i.model_dump(mode="json", exclude_none=True) for i in intervals],
                    "count": len(intervals),
                }
            )
        except Exception as e:
            logger.exception("Failed to list intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_intervals"] = theory_list_intervals

    return tools
