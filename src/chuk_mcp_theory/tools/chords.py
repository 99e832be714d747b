"""
Chord tools - MCP tools for chord construction and diatonic harmony.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.engine import TheoryEngine
from chuk_mcp_theory.session import DEFAULT_SESSION, SelectionStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(
    mcp: ChukMCPServer,
    engine: TheoryEngine,
    selections: SelectionStore,
) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The theory engine
        selections: Session key selections (defaults for diatonic chords)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_chords() -> str:
        """
        List available chord types.

        Returns:
            JSON string with chord keys, names and formulas

        Example:
            theory_list_chords()
        """
        try:
            chords = engine.list_chord_types()
            return json.dumps(
                {
                    "status": "success",
                    "chords": [c.model_dump(mode="json", exclude_none=True) for c in chords],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chord types")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_chords"] = theory_list_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(
        root: str,
        chord_type: str = "major",
        octave: int = 4,
    ) -> str:
        """
        Build a chord from a root and chord type.

        Tones above the octave (9ths) land in the next octave up.

        Args:
            root: Chord root ('C', 'F#', 'Bb')
            chord_type: Chord type, e.g. 'major', 'minor7', 'sus4', 'add9'
            octave: Octave of the root (default 4)

        Returns:
            JSON string with notes, formula and per-tone frequencies

        Example:
            theory_build_chord(root="A", chord_type="minor7", octave=3)
        """
        try:
            chord = engine.build_chord(root, chord_type, octave)
            return json.dumps({"status": "success", "chord": chord.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_chord"] = theory_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_diatonic_chords(
        root: str | None = None,
        scale_type: str | None = None,
        use_sevenths: bool | None = None,
        session: str = DEFAULT_SESSION,
    ) -> str:
        """
        Get the seven diatonic chords of a key.

        Available for major, naturalMinor, harmonicMinor and dorian.

        Args:
            root: Key root (defaults to the session key)
            scale_type: Scale type (defaults to the session key)
            use_sevenths: Seventh chords instead of triads (defaults to the session key)
            session: Session whose key supplies the defaults

        Returns:
            JSON string with one chord per scale degree

        Example:
            theory_diatonic_chords(root="G", scale_type="major", use_sevenths=True)
        """
        try:
            selected = selections.get(session)
            root = root or selected.root
            scale_type = scale_type or selected.scale_type
            if use_sevenths is None:
                use_sevenths = selected.use_sevenths

            entries = engine.get_diatonic_chords(root, scale_type, use_sevenths)
            if entries is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.DIATONIC_UNAVAILABLE.format(
                            scale_type=scale_type
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "scale_type": scale_type,
                    "use_sevenths": use_sevenths,
                    "chords": [e.model_dump(mode="json") for e in entries],
                }
            )
        except Exception as e:
            logger.exception("Failed to get diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_diatonic_chords"] = theory_diatonic_chords

    return tools
