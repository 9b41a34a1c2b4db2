"""Geography & logistics: distance when known, remote/relocation stance otherwise."""

from __future__ import annotations

import logging

from src.cofounder_matching.config import GeoConfig, TimezoneModifiers
from src.cofounder_matching.extraction.location import (
    distance_between,
    prefs_for,
    timezone_gap_hours,
)
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


def distance_score(km: float, config: GeoConfig) -> float:
    for band in config.distance_bands:
        if km <= band.max_km:
            return band.score
    return config.beyond_score


def timezone_modifier(gap_hours: float | None, mods: TimezoneModifiers) -> float:
    if gap_hours is None:
        return 0.0
    if gap_hours <= mods.good_hours:
        return mods.good_bonus
    if gap_hours <= mods.moderate_hours:
        return mods.moderate_bonus
    return mods.poor_penalty


def raw_score(a: FounderProfile, b: FounderProfile, config: GeoConfig) -> float:
    """Geographic compatibility.  [0.0, 100.0]."""
    pa, pb = prefs_for(a), prefs_for(b)
    fallback = config.fallback_scores
    km = distance_between(a, b)
    tz = timezone_modifier(timezone_gap_hours(a, b), config.timezone_modifiers)
    either_relocates = pa.will_relocate or pb.will_relocate

    if km is not None:
        total = distance_score(km, config)
        if pa.remote_ok and pb.remote_ok:
            total += tz
        if either_relocates and km > config.relocate_min_km:
            total += config.relocate_bonus
        reason = f"{km:.0f}km"
    elif pa.remote_only and pb.remote_only:
        total, reason = fallback.both_remote_only, "both remote-only"
    elif pa.remote_ok and pb.remote_ok:
        total, reason = fallback.both_remote_ok + tz, "both remote-ok"
    elif either_relocates:
        total, reason = fallback.one_relocate, "relocation"
    elif pa.remote_ok or pb.remote_ok:
        total, reason = fallback.one_remote_ok, "one remote-ok"
    elif not a.location_preference and not b.location_preference:
        total, reason = fallback.no_data, "no data"
    else:
        total, reason = fallback.no_flexibility, "no flexibility"

    result = min(max(total, 0.0), 100.0)
    logger.debug("Geo %s<->%s: %s -> %.1f", a.label, b.label, reason, result)
    return result


def score(a: FounderProfile, b: FounderProfile, config: GeoConfig) -> float:
    return round(raw_score(a, b, config), 1)
