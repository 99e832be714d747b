"""
Progression definition model - the YAML shape of a project progression.

Example file (progressions/minor-lift.yaml):

    name: Minor Lift (i-VI-VII-i)
    description: Rising minor loop.
    key_type: minor
    degrees: [1, 6, 7, 1]
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.constants import KeyType
from chuk_mcp_theory.core.catalog import ProgressionDef


class ProgressionDefinition(BaseModel):
    """A user-defined progression, validated on load."""

    name: str = Field(..., min_length=1, description="Display name")
    degrees: list[int] = Field(..., min_length=1, description="1-indexed scale degrees")
    description: str = Field("", description="What the progression is for")
    key_type: KeyType = Field("major", description="Key type it is written for")

    model_config = {"frozen": True}

    @field_validator("degrees")
    @classmethod
    def validate_degrees(cls, v: list[int]) -> list[int]:
        """Degrees must address a seven-note diatonic scale."""
        for degree in v:
            if not 1 <= degree <= 7:
                raise ValueError(f"Degree must be 1-7, got {degree}")
        return v

    def to_def(self) -> ProgressionDef:
        """Convert to the immutable catalog form."""
        return ProgressionDef(
            degrees=tuple(self.degrees),
            name=self.name,
            description=self.description,
            key_type=self.key_type,
        )

    @classmethod
    def from_def(cls, progression: ProgressionDef) -> ProgressionDefinition:
        return cls(
            name=progression.name,
            degrees=list(progression.degrees),
            description=progression.description,
            key_type=progression.key_type,
        )
