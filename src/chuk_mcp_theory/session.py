"""
Session selection - the "current key" a UI works in.

The theory engine never stores a current key or scale. Callers that
need one (a keyboard overlay, the MCP tool surface) keep a KeySelection
here and pass its fields into each engine call.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.core.catalog import resolve_scale_type
from chuk_mcp_theory.core.pitch import note_name_to_index

DEFAULT_SESSION = "default"


class KeySelection(BaseModel):
    """A selected key: root, scale type and triad/seventh preference."""

    root: str = Field("C", description="Key root (e.g. 'C', 'F#', 'Bb')")
    scale_type: str = Field("major", description="Scale catalog key")
    use_sevenths: bool = Field(False, description="Prefer seventh chords for harmony")

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Root must be a recognised note spelling."""
        note_name_to_index(v)
        return v.strip()

    @field_validator("scale_type")
    @classmethod
    def validate_scale_type(cls, v: str) -> str:
        """Scale type is stored as its canonical catalog key."""
        return resolve_scale_type(v)


class SelectionStore:
    """
    Per-session key selections.

    Owned by the caller (one per server); the engine never reads it.
    """

    def __init__(self) -> None:
        self._selections: dict[str, KeySelection] = {}

    def get(self, session: str = DEFAULT_SESSION) -> KeySelection:
        """Current selection for a session (C major until one is set)."""
        return self._selections.get(session, KeySelection())

    def set(
        self,
        root: str,
        scale_type: str,
        use_sevenths: bool = False,
        session: str = DEFAULT_SESSION,
    ) -> KeySelection:
        """
        Replace a session's selection.

        Raises:
            pydantic.ValidationError: If the root or scale type is invalid
        """
        selection = KeySelection(root=root, scale_type=scale_type, use_sevenths=use_sevenths)
        self._selections[session] = selection
        return selection

    def clear(self, session: str = DEFAULT_SESSION) -> None:
        """Forget a session's selection."""
        self._selections.pop(session, None)
