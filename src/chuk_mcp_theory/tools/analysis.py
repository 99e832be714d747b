"""
Analysis tools - MCP tools for chord identification and key detection.

Notes may be given as names ('E', 'G#3') or as frequencies in Hz.
Frequencies carry pitch height, so the lowest one is treated as the bass.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import MAX_KEY_CANDIDATES, ChordIdStrategy
from chuk_mcp_theory.engine import TheoryEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_analysis_tools(mcp: ChukMCPServer, engine: TheoryEngine) -> dict[str, Any]:
    """
    Register analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The theory engine

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_identify_chord(
        notes: list[str | float],
        strategy: str = ChordIdStrategy.EXHAUSTIVE.value,
    ) -> str:
        """
        Identify the chord formed by a set of notes.

        Strategies:
        - exhaustive: tries every root against every chord type (any voicing)
        - fast_path: measures intervals above the lowest frequency and
          matches a small table of common chords

        Args:
            notes: Note names and/or frequencies in Hz
            strategy: 'exhaustive' (default) or 'fast_path'

        Returns:
            JSON string with the chord name, root, intervals and stability.
            name is 'Unknown' when nothing matches.

        Example:
            theory_identify_chord(notes=["E", "G", "C"])
            theory_identify_chord(notes=[261.63, 329.63, 392.0], strategy="fast_path")
        """
        try:
            result = engine.identify_chord(notes, ChordIdStrategy(strategy))
            return json.dumps(
                {
                    "status": "success",
                    "identified": result.identified,
                    "result": result.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_identify_chord"] = theory_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_detect_key(
        notes: list[str | float],
        limit: int = MAX_KEY_CANDIDATES,
    ) -> str:
        """
        Rank likely keys for a set of notes.

        Considers major, natural minor, dorian and mixolydian on all
        twelve roots. Needs at least two distinct pitch classes.

        Args:
            notes: Note names and/or frequencies in Hz
            limit: Maximum number of candidates (default 5)

        Returns:
            JSON string with candidates, best first

        Example:
            theory_detect_key(notes=["C", "D", "E", "F", "G"])
        """
        try:
            candidates = engine.detect_key(notes, limit)
            return json.dumps(
                {
                    "status": "success",
                    "candidates": [c.model_dump(mode="json") for c in candidates],
                    "count": len(candidates),
                }
            )
        except Exception as e:
            logger.exception("Failed to detect key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_detect_key"] = theory_detect_key

    return tools
