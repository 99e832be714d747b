"""
Scale tools - MCP tools for scale discovery and membership.

Root and scale type default to the session's selected key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.engine import TheoryEngine
from chuk_mcp_theory.session import DEFAULT_SESSION, SelectionStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(
    mcp: ChukMCPServer,
    engine: TheoryEngine,
    selections: SelectionStore,
) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The theory engine
        selections: Session key selections (defaults for root/scale)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_scales() -> str:
        """
        List available scale types.

        Returns:
            JSON string with scale keys, names and descriptions

        Example:
            theory_list_scales()
        """
        try:
            scales = engine.list_scales()
            return json.dumps(
                {
                    "status": "success",
                    "scales": [s.model_dump(mode="json", exclude_none=True) for s in scales],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_scales"] = theory_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale_notes(
        root: str | None = None,
        scale_type: str | None = None,
        session: str = DEFAULT_SESSION,
    ) -> str:
        """
        Get the notes of a scale.

        Args:
            root: Scale root (defaults to the session key)
            scale_type: Scale type, e.g. 'major', 'naturalMinor', 'blues'
                (defaults to the session key)
            session: Session whose key supplies the defaults

        Returns:
            JSON string with the notes in scale order

        Example:
            theory_scale_notes(root="A", scale_type="naturalMinor")
        """
        try:
            selected = selections.get(session)
            scale = engine.get_scale_notes(root or selected.root, scale_type or selected.scale_type)
            return json.dumps({"status": "success", "scale": scale.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to get scale notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_scale_notes"] = theory_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_in_scale(
        note: str,
        root: str | None = None,
        scale_type: str | None = None,
        session: str = DEFAULT_SESSION,
    ) -> str:
        """
        Check whether a note belongs to a scale.

        Sharp and flat spellings are equivalent ('Bb' is in F major).

        Args:
            note: Note to check
            root: Scale root (defaults to the session key)
            scale_type: Scale type (defaults to the session key)
            session: Session whose key supplies the defaults

        Returns:
            JSON string with in_scale true/false

        Example:
            theory_note_in_scale(note="Bb", root="F", scale_type="major")
        """
        try:
            selected = selections.get(session)
            root = root or selected.root
            scale_type = scale_type or selected.scale_type
            return json.dumps(
                {
                    "status": "success",
                    "note": note,
                    "root": root,
                    "scale_type": scale_type,
                    "in_scale": engine.is_note_in_scale(note, root, scale_type),
                }
            )
        except Exception as e:
            logger.exception("Failed to check scale membership")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_in_scale"] = theory_note_in_scale

    return tools
