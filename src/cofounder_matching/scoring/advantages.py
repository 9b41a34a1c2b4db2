"""Unfair-advantage synergy: different edges add up, identical ones don't."""

from __future__ import annotations

import logging

from src.cofounder_matching.config import AdvantagesConfig
from src.cofounder_matching.extraction.signals import keyword_match
from src.cofounder_matching.lexicon import ADVANTAGE_CUES
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


def extract_advantages(profile: FounderProfile) -> set[str]:
    text = " ".join(p for p in (profile.background, profile.superpower) if p).lower()
    found = {
        kind
        for kind, cues in ADVANTAGE_CUES.items()
        if text and any(keyword_match(text, cue) for cue in cues)
    }
    if profile.previous_founder:
        found.add("founder_experience")
    return found


def raw_score(a: FounderProfile, b: FounderProfile, config: AdvantagesConfig) -> float:
    """Advantage synergy.  [0.0, 100.0]."""
    adv_a, adv_b = extract_advantages(a), extract_advantages(b)
    synergy = config.synergy_scores

    if adv_a and adv_b:
        shared = len(adv_a & adv_b)
        if shared == 0:
            result = synergy.zero_overlap
        elif shared == 1:
            result = synergy.one_overlap
        else:
            result = synergy.high_overlap
    elif adv_a or adv_b:
        result = synergy.one_has
    else:
        result = synergy.neither_has

    result = min(max(result, 0.0), 100.0)
    logger.debug("Advantages %s<->%s: %s vs %s -> %.1f", a.label, b.label, adv_a, adv_b, result)
    return result


def score(a: FounderProfile, b: FounderProfile, config: AdvantagesConfig) -> float:
    return round(raw_score(a, b, config), 1)
