"""
chuk-mcp-theory - a stateless music theory engine with an MCP tool surface.

Notes, frequencies, intervals, scales, chords, diatonic harmony, chord
identification, key detection, modulation and progressions.
"""

from chuk_mcp_theory.engine import TheoryEngine
from chuk_mcp_theory.errors import (
    InvalidFrequencyError,
    InvalidNoteNameError,
    TheoryError,
    UnknownChordTypeError,
    UnknownProgressionError,
    UnknownScaleTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidFrequencyError",
    "InvalidNoteNameError",
    "TheoryEngine",
    "TheoryError",
    "UnknownChordTypeError",
    "UnknownProgressionError",
    "UnknownScaleTypeError",
    "__version__",
]
