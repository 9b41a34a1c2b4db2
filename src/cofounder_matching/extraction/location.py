"""Location helpers: great-circle distance and remote/relocation preferences."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from src.cofounder_matching.models import FounderProfile

EARTH_RADIUS_KM = 6371.0

_REMOTE_RE = re.compile(r"\bremote\b")
_NEGATED_RE = re.compile(
    r"\b(?:no|not|non)[\s-]+remote\b"
    r"|\b(?:not|won't|wont|can't|cannot)\s+(?:willing to\s+|able to\s+)?(?:relocate|move)\b"
)


@dataclass(frozen=True)
class LocationPrefs:
    remote_ok: bool = False
    remote_only: bool = False
    will_relocate: bool = False


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)
    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def parse_location_prefs(text: str | None) -> LocationPrefs:
    pref = _NEGATED_RE.sub(" ", (text or "").lower())
    remote_only = "remote only" in pref or "fully remote" in pref
    return LocationPrefs(
        remote_ok=remote_only or bool(_REMOTE_RE.search(pref)) or "anywhere" in pref,
        remote_only=remote_only,
        will_relocate="relocate" in pref or "willing to move" in pref,
    )


def prefs_for(profile: FounderProfile) -> LocationPrefs:
    """Structured ``Location`` flags win; free text fills whatever they leave unset."""
    parsed = parse_location_prefs(profile.location_preference)
    loc = profile.location
    if loc is None:
        return parsed
    remote_only = loc.is_remote_only or parsed.remote_only
    return LocationPrefs(
        remote_ok=loc.is_remote_ok or remote_only or parsed.remote_ok,
        remote_only=remote_only,
        will_relocate=loc.willing_to_relocate or parsed.will_relocate,
    )


def distance_between(a: FounderProfile, b: FounderProfile) -> float | None:
    if a.location is None or b.location is None:
        return None
    if not (a.location.has_coordinates and b.location.has_coordinates):
        return None
    return haversine_km(a.location.lat, a.location.lng, b.location.lat, b.location.lng)


def timezone_gap_hours(a: FounderProfile, b: FounderProfile) -> float | None:
    if a.location is None or b.location is None:
        return None
    if a.location.timezone_offset is None or b.location.timezone_offset is None:
        return None
    return abs(a.location.timezone_offset - b.location.timezone_offset) / 60
