"""Values & working style: five behavioural axes plus equity philosophy."""

from __future__ import annotations

import logging

from src.cofounder_matching.config import AxisScores, EquityCompatibility, ValuesConfig
from src.cofounder_matching.extraction.signals import extract_value_profile
from src.cofounder_matching.lexicon import VALUE_AXES
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


def axis_score(a: str, b: str, scores: AxisScores) -> float:
    if a == "unknown" or b == "unknown":
        return scores.unknown
    if a == b:
        return scores.same
    if "medium" in (a, b):
        return scores.adjacent
    return scores.opposite


def equity_score(a: str, b: str, scores: EquityCompatibility) -> float:
    if a == "unknown" or b == "unknown":
        return scores.unknown
    if a == b:
        return scores.same
    pair = {a, b}
    if "flexible" in pair:
        return scores.flexible_any
    if pair == {"equal", "contribution_based"}:
        return scores.equal_contribution
    if pair == {"equal", "clear_majority"}:
        return scores.equal_majority
    return scores.default


def raw_score(a: FounderProfile, b: FounderProfile, config: ValuesConfig) -> float:
    """Values alignment.  [0.0, 100.0]."""
    va, vb = extract_value_profile(a), extract_value_profile(b)
    weights = config.sub_weights.model_dump()

    total = weights["equity"] * equity_score(va["equity"], vb["equity"], config.equity_compatibility)
    for axis in VALUE_AXES:
        total += weights[axis] * axis_score(va[axis], vb[axis], config.dimension_scores)

    result = min(max(total, 0.0), 100.0)
    logger.debug("Values %s<->%s: %s vs %s -> %.1f", a.label, b.label, va, vb, result)
    return result


def score(a: FounderProfile, b: FounderProfile, config: ValuesConfig) -> float:
    return round(raw_score(a, b, config), 1)
