"""Communication & conflict style: three spectra compared cell-by-cell.

  - directness     direct  <-> gentle
  - structure      structured <-> flexible
  - collaboration  async   <-> sync

Placement comes from keyword hits in the founder's style text; the score
for each pair of placements is read from ``spectrum_scores``.
"""

from __future__ import annotations

import logging

from src.cofounder_matching.config import CommunicationConfig
from src.cofounder_matching.extraction.signals import place_on_spectrum
from src.cofounder_matching.lexicon import (
    COLLAB_ASYNC,
    COLLAB_SYNC,
    DIRECTNESS_DIRECT,
    DIRECTNESS_GENTLE,
    STRUCTURE_FLEXIBLE,
    STRUCTURE_STRUCTURED,
)
from src.cofounder_matching.models import FounderProfile, SpectrumPosition

logger = logging.getLogger(__name__)

SPECTRA: dict[str, tuple[list[str], list[str]]] = {
    "directness": (DIRECTNESS_DIRECT, DIRECTNESS_GENTLE),
    "structure": (STRUCTURE_STRUCTURED, STRUCTURE_FLEXIBLE),
    "collaboration": (COLLAB_ASYNC, COLLAB_SYNC),
}


def placements(profile: FounderProfile) -> dict[str, SpectrumPosition]:
    return {name: place_on_spectrum(profile, high, low) for name, (high, low) in SPECTRA.items()}


def raw_score(a: FounderProfile, b: FounderProfile, config: CommunicationConfig) -> float:
    """Communication compatibility.  [0.0, 100.0]."""
    pa, pb = placements(a), placements(b)
    weights = config.sub_weights.model_dump()

    total = sum(
        config.spectrum_scores[pa[name]][pb[name]] * weights[name]
        for name in SPECTRA
    )
    result = min(max(total, 0.0), 100.0)
    logger.debug("Communication %s<->%s: %s vs %s -> %.1f", a.label, b.label, pa, pb, result)
    return result


def score(a: FounderProfile, b: FounderProfile, config: CommunicationConfig) -> float:
    return round(raw_score(a, b, config), 1)
