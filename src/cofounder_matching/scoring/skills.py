"""Skills complementarity: does each founder bring what the other is seeking?

Components (weights from ``SkillsConfig.sub_weights``):
  - coverage          mean best-match of sought skills, both directions
  - superpower_boost  superpower covers the other's weakness (dropped if unknowable)
  - semantic_boost    word overlap between offers and gaps

The blend is then discounted by how much the two skill sets overlap.
"""

from __future__ import annotations

import logging

from src.cofounder_matching.config import SkillsConfig
from src.cofounder_matching.extraction.skills import (
    calculate_coverage,
    calculate_overlap,
    calculate_superpower_boost,
    semantic_skill_boost,
)
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


def raw_score(a: FounderProfile, b: FounderProfile, config: SkillsConfig) -> float:
    """Skills complementarity for the pair.  [0.0, 100.0]."""
    weights = config.sub_weights

    coverage = (
        calculate_coverage(b.core_skills, a.seeking_skills)
        + calculate_coverage(a.core_skills, b.seeking_skills)
    ) / 2
    superpower = calculate_superpower_boost(a, b)
    semantic = semantic_skill_boost(a, b)

    components = [
        (coverage, weights.coverage),
        (semantic, weights.semantic_boost),
    ]
    if superpower is not None:
        components.append((superpower, weights.superpower_boost))

    used = sum(w for _, w in components)
    raw = sum(value * w for value, w in components) / used if used else 0.0

    overlap = calculate_overlap(a.core_skills, b.core_skills)
    result = raw * 100 * (1 - overlap * config.overlap_penalty_factor)
    result = min(max(result, 0.0), 100.0)

    logger.debug(
        "Skills %s<->%s: coverage=%.3f superpower=%s semantic=%.3f overlap=%.3f -> %.1f",
        a.label, b.label, coverage,
        "n/a" if superpower is None else f"{superpower:.3f}",
        semantic, overlap, result,
    )
    return result


def score(a: FounderProfile, b: FounderProfile, config: SkillsConfig) -> float:
    return round(raw_score(a, b, config), 1)
