"""
Theory engine errors.

All errors are local validation failures on malformed input. None are
transient - there is no I/O behind the engine to retry.

"No match" outcomes (an unidentified chord, an empty key-candidate list,
a scale without diatonic harmony) are result values, not errors.
"""

from __future__ import annotations

from chuk_mcp_theory.constants import ErrorMessages


class TheoryError(ValueError):
    """Base class for theory engine errors."""


class InvalidNoteNameError(TheoryError):
    """A note spelling is not one of the recognised pitch names."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(ErrorMessages.INVALID_NOTE.format(name=name))


class InvalidFrequencyError(TheoryError):
    """A frequency cannot be mapped onto the equal-tempered grid."""

    def __init__(self, frequency: object) -> None:
        self.frequency = frequency
        super().__init__(ErrorMessages.INVALID_FREQUENCY.format(frequency=frequency))


class UnknownScaleTypeError(TheoryError):
    """The scale type is not registered in the catalog."""

    def __init__(self, scale_type: str) -> None:
        self.scale_type = scale_type
        super().__init__(ErrorMessages.UNKNOWN_SCALE.format(scale_type=scale_type))


class UnknownChordTypeError(TheoryError):
    """The chord type is not registered in the catalog."""

    def __init__(self, chord_type: str) -> None:
        self.chord_type = chord_type
        super().__init__(ErrorMessages.UNKNOWN_CHORD.format(chord_type=chord_type))


class UnknownProgressionError(TheoryError):
    """The progression is not registered in the catalog or project library."""

    def __init__(self, progression: str) -> None:
        self.progression = progression
        super().__init__(ErrorMessages.UNKNOWN_PROGRESSION.format(progression=progression))
