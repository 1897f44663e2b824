"""
Decoding data models.

Core data models for candidate configuration and decode results.

DESIGN DECISIONS:
- All models are frozen (immutable); a decode call creates and discards them
- Candidate order is significant: it is the tie-break priority
- Codec names are validated when the table is built, never at decode time
"""

from __future__ import annotations

import codecs
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

# =============================================================================
# Enums
# =============================================================================


class DecodeStrategy(Enum):
    """How the final text was obtained."""

    UTF16LE = "utf16le"  # Structural UTF-16LE match, scoring skipped
    SCORED = "scored"  # Baseline vs. candidates by penalty
    PASSTHROUGH = "passthrough"  # Nothing to decode (empty or non-text input)


# =============================================================================
# Candidate Table
# =============================================================================


class CandidateEncoding(BaseModel, frozen=True):
    """One entry of the candidate table."""

    id: str = Field(min_length=1, description="Encoding identifier, e.g. 'gb18030'")
    codec: str = Field(description="Python codec name implementing the identifier")
    description: str | None = Field(default=None, description="Human-readable label")

    model_config = {"frozen": True}

    @field_validator("codec")
    @classmethod
    def _codec_must_exist(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown codec: {value!r}") from None
        return value


class CandidateTable(BaseModel, frozen=True):
    """Ordered candidate encodings plus the mojibake marker set."""

    version: str
    candidates: list[CandidateEncoding] = Field(min_length=1)
    mojibake_markers: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("mojibake_markers")
    @classmethod
    def _markers_are_single_chars(cls, value: list[str]) -> list[str]:
        for marker in value:
            if len(marker) != 1:
                raise ValueError(f"marker must be a single character: {marker!r}")
        return value

    @model_validator(mode="after")
    def _ids_are_unique(self) -> CandidateTable:
        seen: set[str] = set()
        for candidate in self.candidates:
            if candidate.id in seen:
                raise ValueError(f"duplicate candidate id: {candidate.id!r}")
            seen.add(candidate.id)
        return self

    @property
    def ids(self) -> list[str]:
        """Candidate identifiers in evaluation order."""
        return [c.id for c in self.candidates]

    def get_by_id(self, encoding_id: str) -> CandidateEncoding | None:
        """Get a candidate by identifier."""
        for candidate in self.candidates:
            if candidate.id == encoding_id:
                return candidate
        return None


# =============================================================================
# Decode Result
# =============================================================================


class CandidateScore(BaseModel, frozen=True):
    """Penalty of one evaluated interpretation."""

    encoding: str
    penalty: int = Field(ge=0)

    model_config = {"frozen": True}


class DecodeResult(BaseModel, frozen=True):
    """
    Outcome of a best-decoding selection.

    `scores` lists the baseline first and then every candidate in table
    order. It is empty when scoring was bypassed.
    """

    text: str
    encoding: str = Field(description="Winning identifier, 'utf-16-le' or 'original'")
    penalty: int = Field(ge=0)
    strategy: DecodeStrategy
    scores: list[CandidateScore] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_clean(self) -> bool:
        """True if no garbling was detected in the chosen text."""
        return self.penalty == 0
