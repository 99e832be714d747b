"""
Session tools - MCP tools for the selected key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import SuccessMessages
from chuk_mcp_theory.session import DEFAULT_SESSION, SelectionStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_session_tools(mcp: ChukMCPServer, selections: SelectionStore) -> dict[str, Any]:
    """
    Register key selection tools with the MCP server.

    Args:
        mcp: The MCP server instance
        selections: Session key selections

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_set_key(
        root: str,
        scale_type: str = "major",
        use_sevenths: bool = False,
        session: str = DEFAULT_SESSION,
    ) -> str:
        """
        Select the working key for a session.

        Scale, chord and progression tools fall back to this key when
        their root or scale type is omitted.

        Args:
            root: Key root ('C', 'F#', 'Bb')
            scale_type: Scale type (default 'major')
            use_sevenths: Prefer seventh chords
            session: Session name (default 'default')

        Returns:
            JSON string with the stored selection

        Example:
            theory_set_key(root="D", scale_type="dorian")
        """
        try:
            selection = selections.set(root, scale_type, use_sevenths, session)
            logger.debug("Session %s key set to %s %s", session, selection.root, selection.scale_type)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.KEY_SELECTED.format(
                        root=selection.root, scale_type=selection.scale_type
                    ),
                    "session": session,
                    "key": selection.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to set key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_set_key"] = theory_set_key

    @mcp.tool  # type: ignore[arg-type]
    async def theory_get_key(session: str = DEFAULT_SESSION) -> str:
        """
        Get the working key for a session (C major until one is set).

        Args:
            session: Session name (default 'default')

        Returns:
            JSON string with the current selection

        Example:
            theory_get_key()
        """
        try:
            selection = selections.get(session)
            return json.dumps(
                {"status": "success", "session": session, "key": selection.model_dump(mode="json")}
            )
        except Exception as e:
            logger.exception("Failed to get key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_get_key"] = theory_get_key

    return tools
