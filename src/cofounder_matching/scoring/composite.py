"""Match aggregator — seven dimension scores folded into one weighted total."""

from __future__ import annotations

import logging

from src.cofounder_matching.config import MatchingConfig
from src.cofounder_matching.models import DIMENSIONS, DimensionScores, FounderProfile, MatchResult
from src.cofounder_matching.scoring import (
    advantages,
    communication,
    geo,
    skills,
    stage,
    values,
    vision,
)

logger = logging.getLogger(__name__)

_SCORERS = {
    "skills": skills.raw_score,
    "stage": stage.raw_score,
    "communication": communication.raw_score,
    "vision": vision.raw_score,
    "values": values.raw_score,
    "geo": geo.raw_score,
    "advantages": advantages.raw_score,
}


def raw_dimension_scores(a: FounderProfile, b: FounderProfile, config: MatchingConfig) -> DimensionScores:
    """Unrounded per-dimension scores; the weighted total is taken over these."""
    return DimensionScores(**{
        name: _SCORERS[name](a, b, getattr(config.dimensions, name))
        for name in DIMENSIONS
    })


def _rounded(scores: DimensionScores) -> DimensionScores:
    return DimensionScores(**{name: round(getattr(scores, name), 1) for name in DIMENSIONS})


def dimension_scores(a: FounderProfile, b: FounderProfile, config: MatchingConfig) -> DimensionScores:
    return _rounded(raw_dimension_scores(a, b, config))


def weighted_total(scores: DimensionScores, config: MatchingConfig) -> float:
    weights = config.dimensions.weights()
    return sum(getattr(scores, name) * weights[name] for name in DIMENSIONS)


def calculate_match_score(
    a: FounderProfile,
    b: FounderProfile,
    config: MatchingConfig,
) -> MatchResult | None:
    """Score the pair; ``None`` when the total falls below ``min_match_score``."""
    raw = raw_dimension_scores(a, b, config)
    total = weighted_total(raw, config)

    if total < config.min_match_score:
        logger.debug(
            "Match %s<->%s below threshold: %.1f < %.1f",
            a.label, b.label, total, config.min_match_score,
        )
        return None

    rounded = round(total, 1)
    level = (
        "highly_compatible"
        if rounded >= config.highly_compatible_threshold
        else "somewhat_compatible"
    )
    logger.debug("Match %s<->%s: %.1f (%s)", a.label, b.label, rounded, level)
    return MatchResult(
        founder_a_id=a.id,
        founder_b_id=b.id,
        total_score=rounded,
        compatibility_level=level,
        dimension_scores=_rounded(raw),
    )
