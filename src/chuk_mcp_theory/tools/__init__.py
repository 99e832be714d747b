"""
MCP tool implementations.

Tools are organized by domain:
- notes - Notes, frequencies and intervals
- scales - Scale discovery and membership
- chords - Chord construction and diatonic harmony
- analysis - Chord identification and key detection
- harmony - Progressions, pivot chords, modulation and MIDI export
- session - Selected key per session
"""

from chuk_mcp_theory.tools.analysis import register_analysis_tools
from chuk_mcp_theory.tools.chords import register_chord_tools
from chuk_mcp_theory.tools.harmony import register_harmony_tools
from chuk_mcp_theory.tools.notes import register_note_tools
from chuk_mcp_theory.tools.scales import register_scale_tools
from chuk_mcp_theory.tools.session import register_session_tools

__all__ = [
    "register_analysis_tools",
    "register_chord_tools",
    "register_harmony_tools",
    "register_note_tools",
    "register_scale_tools",
    "register_session_tools",
]
