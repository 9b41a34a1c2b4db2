"""Stage & timeline: are both founders at the same point, with the same urgency?"""

from __future__ import annotations

import logging

from src.cofounder_matching.config import StageConfig
from src.cofounder_matching.extraction.signals import keyword_match
from src.cofounder_matching.lexicon import STAGE_CUES, URGENCY_CUES
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)

DEFAULT_STAGE = "idea"
DEFAULT_URGENCY = "flexible"


def _bucket(text: str | None, cues: list[tuple[str, list[str]]], default: str) -> str:
    value = (text or "").lower()
    if not value:
        return default
    for bucket, keywords in cues:
        if any(keyword_match(value, kw) for kw in keywords):
            return bucket
    return default


def normalize_stage(stage: str | None) -> str:
    return _bucket(stage, STAGE_CUES, DEFAULT_STAGE)


def normalize_urgency(urgency: str | None) -> str:
    return _bucket(urgency, URGENCY_CUES, DEFAULT_URGENCY)


def _lookup(matrix: dict[str, dict[str, float]], row: str, col: str, fallback: float) -> float:
    value = matrix.get(row, {}).get(col)
    return fallback if value is None else value


def commitment_score(a: FounderProfile, b: FounderProfile, config: StageConfig) -> float | None:
    """``None`` when neither founder stated a commitment level."""
    ca = (a.commitment_level or "").strip().lower()
    cb = (b.commitment_level or "").strip().lower()
    scores = config.commitment_scores
    if not ca and not cb:
        return None
    if not ca or not cb:
        return scores.unknown
    if ca == cb:
        return scores.same
    if ("full" in ca) != ("full" in cb):
        return scores.one_fulltime_one_not
    return scores.different_compatible


def raw_score(a: FounderProfile, b: FounderProfile, config: StageConfig) -> float:
    """Stage/timeline alignment.  [0.0, 100.0]."""
    stage_a, stage_b = normalize_stage(a.stage), normalize_stage(b.stage)
    urgency_a = normalize_urgency(a.urgency_level or a.timeline_start)
    urgency_b = normalize_urgency(b.urgency_level or b.timeline_start)

    components = [
        _lookup(config.stage_matrix, stage_a, stage_b, config.unknown_stage_score),
        _lookup(config.urgency_matrix, urgency_a, urgency_b, config.unknown_urgency_score),
    ]
    commitment = commitment_score(a, b, config)
    if commitment is not None:
        components.append(commitment)

    result = min(max(sum(components) / len(components), 0.0), 100.0)
    logger.debug(
        "Stage %s<->%s: %s/%s urgency=%s/%s commitment=%s -> %.1f",
        a.label, b.label, stage_a, stage_b, urgency_a, urgency_b, commitment, result,
    )
    return result


def score(a: FounderProfile, b: FounderProfile, config: StageConfig) -> float:
    return round(raw_score(a, b, config), 1)
