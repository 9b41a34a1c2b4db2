"""Configuration: runtime settings plus the validated matching parameter set.

Two layers:

  - ``Settings`` (pydantic-settings): process knobs read from the environment
    / ``.env``: model names, default retrieval limits, timeouts.
  - ``MatchingConfig``: the tunable weights, matrices and thresholds
    (system parameter ``MATCHING_WEIGHTS``).  Loaded and validated once by
    :func:`load_matching_config`, then passed explicitly to every scorer.
    It is frozen and has no code-level defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings

from src.cofounder_matching.errors import ConfigError
from src.cofounder_matching.models import DIMENSIONS, SPECTRUM_POSITIONS

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"

MATCHING_WEIGHTS_KEY = "MATCHING_WEIGHTS"
WEIGHT_SUM_TOLERANCE = 0.005


def _check_sum(name: str, weights: dict[str, float]) -> None:
    total = sum(weights.values())
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ValueError(f"{name} must sum to 1.0 (got {total:.3f})")


class _Frozen(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}


class _SubWeights(_Frozen):
    @model_validator(mode="after")
    def _sums_to_one(self):
        _check_sum(type(self).__name__, self.model_dump())
        return self


# ---------------------------------------------------------------------------
# Per-dimension blocks
# ---------------------------------------------------------------------------

class SkillsSubWeights(_SubWeights):
    coverage: float
    superpower_boost: float
    semantic_boost: float


class SkillsConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Skills"
    sub_weights: SkillsSubWeights
    overlap_penalty_factor: float = Field(ge=0.0, le=1.0)


class CommitmentScores(_Frozen):
    same: float
    one_fulltime_one_not: float
    different_compatible: float
    unknown: float


class StageConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Stage & Timeline"
    stage_matrix: dict[str, dict[str, float]]
    urgency_matrix: dict[str, dict[str, float]]
    unknown_stage_score: float
    unknown_urgency_score: float
    commitment_scores: CommitmentScores


class CommunicationSubWeights(_SubWeights):
    directness: float
    structure: float
    collaboration: float


class CommunicationConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Communication"
    sub_weights: CommunicationSubWeights
    spectrum_scores: dict[str, dict[str, float]]

    @model_validator(mode="after")
    def _matrix_complete(self) -> CommunicationConfig:
        for row in SPECTRUM_POSITIONS:
            for col in SPECTRUM_POSITIONS:
                if col not in self.spectrum_scores.get(row, {}):
                    raise ValueError(f"spectrum_scores is missing cell {row} x {col}")
        return self


class VisionSubWeights(_SubWeights):
    industry: float
    segment: float
    semantic: float
    vocabulary: float


class IndustryScores(_Frozen):
    overlap_base: float
    overlap_bonus: float
    no_overlap: float
    one_unknown: float
    both_unknown: float


class SegmentScores(_Frozen):
    overlap_base: float
    overlap_bonus: float
    no_overlap: float
    unknown: float


class VisionConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Vision"
    sub_weights: VisionSubWeights
    industry_scores: IndustryScores
    segment_scores: SegmentScores


class ValuesSubWeights(_SubWeights):
    pace: float
    risk: float
    equity: float
    decision: float
    autonomy: float
    worklife: float


class AxisScores(_Frozen):
    same: float
    adjacent: float
    opposite: float
    unknown: float


class EquityCompatibility(_Frozen):
    same: float
    flexible_any: float
    equal_contribution: float
    equal_majority: float
    default: float
    unknown: float


class ValuesConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Values"
    sub_weights: ValuesSubWeights
    dimension_scores: AxisScores
    equity_compatibility: EquityCompatibility


class DistanceBand(_Frozen):
    max_km: float = Field(gt=0)
    score: float


class TimezoneModifiers(_Frozen):
    good_hours: float
    good_bonus: float
    moderate_hours: float
    moderate_bonus: float
    poor_penalty: float


class GeoFallbackScores(_Frozen):
    both_remote_only: float
    both_remote_ok: float
    one_relocate: float
    one_remote_ok: float
    no_data: float
    no_flexibility: float


class GeoConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Geography"
    distance_bands: list[DistanceBand]
    beyond_score: float
    timezone_modifiers: TimezoneModifiers
    fallback_scores: GeoFallbackScores
    relocate_bonus: float
    relocate_min_km: float

    @model_validator(mode="after")
    def _bands_ascending(self) -> GeoConfig:
        limits = [b.max_km for b in self.distance_bands]
        if any(b <= a for a, b in zip(limits, limits[1:])):
            raise ValueError("distance_bands must be strictly ascending by max_km")
        return self


class SynergyScores(_Frozen):
    zero_overlap: float
    one_overlap: float
    high_overlap: float
    one_has: float
    neither_has: float


class AdvantagesConfig(_Frozen):
    weight: float = Field(ge=0.0, le=1.0)
    label: str = "Unfair Advantages"
    synergy_scores: SynergyScores


class DimensionConfigs(_Frozen):
    skills: SkillsConfig
    stage: StageConfig
    communication: CommunicationConfig
    vision: VisionConfig
    values: ValuesConfig
    geo: GeoConfig
    advantages: AdvantagesConfig

    def weights(self) -> dict[str, float]:
        return {name: getattr(self, name).weight for name in DIMENSIONS}


class HybridWeights(_SubWeights):
    ai_similarity: float
    dimension_score: float


class MatchingConfig(_Frozen):
    min_match_score: float = Field(ge=0.0, le=100.0)
    highly_compatible_threshold: float = Field(ge=0.0, le=100.0)
    hybrid_weights: HybridWeights
    dimensions: DimensionConfigs

    @model_validator(mode="after")
    def _dimension_weights_sum(self) -> MatchingConfig:
        _check_sum("dimension weights", self.dimensions.weights())
        return self


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_matching_config(
    path: str | Path | None = None,
    key: str = MATCHING_WEIGHTS_KEY,
) -> MatchingConfig:
    """Read the system-parameters JSON file and validate the ``key`` entry.

    The file maps system keys to values.  Any failure is fatal: a
    :class:`ConfigError` is raised and no fallback weights are substituted.
    """
    source = Path(path) if path is not None else Path(settings.system_parameters_path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError.invalid(str(source), "file not found") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError.invalid(str(source), f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(raw, dict) or key not in raw:
        raise ConfigError.missing(str(source), key)

    try:
        config = MatchingConfig.model_validate(raw[key])
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(p) for p in first["loc"]) or key
        raise ConfigError.invalid(str(source), f"{where}: {first['msg']}") from exc

    logger.info(
        "Loaded %s from %s (min=%.1f, highly=%.1f)",
        key, source, config.min_match_score, config.highly_compatible_threshold,
    )
    return config


# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_fast_model: str = "claude-3-haiku-20240307"

    embedding_model: str = "all-MiniLM-L6-v2"
    system_parameters_path: str = str(DATA_DIR / "system_parameters.json")

    similarity_threshold: float = 0.70
    candidate_limit: int = 20
    hybrid_top_n: int = 10

    search_timeout_seconds: float = 10.0
    search_attempts: int = 2

    explanation_top_k: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
