"""Pydantic v2 data models: the data contracts flowing through the engine."""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

SpectrumPosition = Literal["high", "mid-high", "neutral", "mid-low", "low"]

SPECTRUM_POSITIONS: tuple[SpectrumPosition, ...] = (
    "high", "mid-high", "neutral", "mid-low", "low",
)

ValueScore = Literal["high", "medium", "low", "unknown"]

EquityPhilosophy = Literal[
    "equal", "contribution_based", "flexible", "clear_majority", "unknown",
]

CompatibilityLevel = Literal["highly_compatible", "somewhat_compatible"]

DIMENSIONS: tuple[str, ...] = (
    "skills", "stage", "communication", "vision", "values", "geo", "advantages",
)


class DealbreakerKind(StrEnum):
    """Closed set of dealbreaker buckets the filter knows how to check."""

    SKILL = "skill"
    COMMITMENT = "commitment"
    LOCATION = "location"
    DOMAIN = "domain"
    UNCLASSIFIED = "unclassified"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_embedding(raw: Any) -> list[float] | None:
    """Accept a list of numbers or a JSON-encoded list; anything else is None.

    Vector columns often come back from the store serialised as text.
    """
    if raw is None or raw == "" or raw == []:
        return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Ignoring unparseable embedding string (%d chars)", len(raw))
            return None
    if not isinstance(raw, (list, tuple)):
        return None
    try:
        return [float(x) for x in raw]
    except (TypeError, ValueError):
        return None


# ---------------------------------------------------------------------------
# Founder profile (matching view)
# ---------------------------------------------------------------------------

class Location(BaseModel):
    lat: float | None = None
    lng: float | None = None
    city: str | None = None
    country: str | None = None
    timezone_offset: int | None = None  # minutes from UTC
    is_remote_ok: bool = False
    is_remote_only: bool = False
    is_hybrid_ok: bool = False
    willing_to_relocate: bool = False

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None


class FounderProfile(BaseModel):
    """Read-only projection of a founder row as seen by the matcher."""

    id: str
    name: str | None = None

    core_skills: list[str] = Field(default_factory=list)
    seeking_skills: list[str] = Field(default_factory=list)
    weaknesses_blindspots: list[str] = Field(default_factory=list)

    idea_description: str | None = None
    problem_solving: str | None = None
    target_customer: str | None = None
    background: str | None = None
    superpower: str | None = None
    working_style: str | None = None
    equity_thoughts: str | None = None

    stage: str | None = None
    timeline_start: str | None = None
    urgency_level: str | None = None
    commitment_level: str | None = None
    previous_founder: bool | None = None

    location_preference: str | None = None
    location: Location | None = None

    deal_breakers: list[str] = Field(default_factory=list)
    non_negotiables: list[str] = Field(default_factory=list)

    embedding: list[float] | None = None

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator(
        "core_skills", "seeking_skills", "weaknesses_blindspots",
        "deal_breakers", "non_negotiables",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        if v is None:
            return []
        return [s for s in v if s]

    @field_validator("embedding", mode="before")
    @classmethod
    def _parse_embedding(cls, v: Any) -> list[float] | None:
        return parse_embedding(v)

    @property
    def label(self) -> str:
        return self.name or self.id

    @property
    def constraints(self) -> list[str]:
        """Every clause the founder treats as a hard requirement."""
        return [*self.deal_breakers, *self.non_negotiables]


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class DimensionScores(BaseModel):
    skills: float = 0.0
    stage: float = 0.0
    communication: float = 0.0
    vision: float = 0.0
    values: float = 0.0
    geo: float = 0.0
    advantages: float = 0.0

    model_config = {"frozen": True}


class MatchResult(BaseModel):
    founder_a_id: str
    founder_b_id: str
    total_score: float
    compatibility_level: CompatibilityLevel
    dimension_scores: DimensionScores

    model_config = {"frozen": True}


class SimilarityHit(BaseModel):
    """One row returned by the embedding-similarity service."""

    id: str
    similarity: float
    profile: FounderProfile

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> SimilarityHit:
        fields = {k: v for k, v in row.items() if k != "similarity"}
        return cls(
            id=str(row["id"]),
            similarity=float(row["similarity"]),
            profile=FounderProfile(**fields),
        )


class RankedMatch(BaseModel):
    candidate: FounderProfile
    similarity: float
    match: MatchResult
    combined_score: float
    highlights: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    explanation: str = ""


class MatchSummary(BaseModel):
    founder_id: str
    total_checked: int = 0
    dealbreakers_filtered: int = 0
    matches: list[MatchResult] = Field(default_factory=list)

    @property
    def highly_compatible(self) -> int:
        return sum(1 for m in self.matches if m.compatibility_level == "highly_compatible")

    @property
    def somewhat_compatible(self) -> int:
        return sum(1 for m in self.matches if m.compatibility_level == "somewhat_compatible")

    @property
    def top_matches(self) -> list[MatchResult]:
        return self.matches[:5]
