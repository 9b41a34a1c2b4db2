"""Dealbreaker filter: hard yes/no gate applied before any scoring.

Each clause in a founder's ``deal_breakers`` / ``non_negotiables`` is
classified into a closed set of kinds, then checked against the candidate.
Anything the filter cannot interpret passes: the gate only removes pairs
it can positively show to be incompatible.
"""

from __future__ import annotations

import logging
import re

from src.cofounder_matching.extraction.location import prefs_for
from src.cofounder_matching.lexicon import (
    DEALBREAKER_COMMITMENT_CUES,
    DEALBREAKER_DOMAIN_CUES,
    DEALBREAKER_DOMAINS,
    DEALBREAKER_LOCATION_CUES,
    DEALBREAKER_SKILL_CUES,
    DEALBREAKER_SKILLS,
    KNOWN_CITIES,
)
from src.cofounder_matching.models import DealbreakerKind, FounderProfile

logger = logging.getLogger(__name__)

SHORT_TERM_MAX = 3

CITY_ALIASES = {
    "sf": "san francisco",
    "nyc": "new york",
    "la": "los angeles",
}

# Checked in order; commitment and location phrasing often also contains
# "must have" / "need", so the generic skill cue comes last.
_CLASSIFIERS: list[tuple[DealbreakerKind, list[str]]] = [
    (DealbreakerKind.COMMITMENT, DEALBREAKER_COMMITMENT_CUES),
    (DealbreakerKind.LOCATION, DEALBREAKER_LOCATION_CUES),
    (DealbreakerKind.DOMAIN, DEALBREAKER_DOMAIN_CUES),
    (DealbreakerKind.SKILL, DEALBREAKER_SKILL_CUES),
]


def _contains_term(text: str, term: str) -> bool:
    if len(term) <= SHORT_TERM_MAX:
        return re.search(rf"\b{re.escape(term)}\b", text) is not None
    return term in text


def classify_dealbreaker(text: str) -> DealbreakerKind:
    clause = text.lower()
    for kind, cues in _CLASSIFIERS:
        if any(cue in clause for cue in cues):
            return kind
    return DealbreakerKind.UNCLASSIFIED


def extract_skills(text: str) -> list[str]:
    text = text.lower()
    return [s for s in DEALBREAKER_SKILLS if _contains_term(text, s)]


def extract_domains(text: str) -> list[str]:
    text = text.lower()
    return [d for d in DEALBREAKER_DOMAINS if _contains_term(text, d)]


def extract_city(text: str | None) -> str | None:
    value = (text or "").lower()
    for city in KNOWN_CITIES:
        if re.search(rf"\b{re.escape(city)}\b", value):
            return CITY_ALIASES.get(city, city)
    return None


def _candidate_city(candidate: FounderProfile) -> str | None:
    if candidate.location is not None and candidate.location.city:
        city = candidate.location.city.strip().lower()
        return extract_city(city) or city
    return extract_city(candidate.location_preference)


# ---------------------------------------------------------------------------
# Per-kind checks
# ---------------------------------------------------------------------------

def _check_skill(clause: str, candidate: FounderProfile) -> bool:
    required = extract_skills(clause)
    if not required:
        return True
    skills = [s.lower() for s in candidate.core_skills]
    return any(_contains_term(skill, req) for req in required for skill in skills)


def _check_commitment(candidate: FounderProfile) -> bool:
    commitment = (candidate.commitment_level or "").lower()
    if not commitment:
        return True
    if "not full" in commitment or "part" in commitment:
        return False
    return "full" in commitment


def _check_location(clause: str, candidate: FounderProfile) -> bool:
    if prefs_for(candidate).remote_ok:
        return True
    required = extract_city(clause)
    candidate_city = _candidate_city(candidate)
    if required is None or candidate_city is None:
        return True
    return candidate_city == required


def _check_domain(clause: str, candidate: FounderProfile) -> bool:
    required = extract_domains(clause)
    if not required:
        return True
    text = " ".join(
        p for p in (candidate.background, candidate.idea_description, candidate.superpower) if p
    ).lower()
    return any(_contains_term(text, domain) for domain in required)


def clause_passes(clause: str, candidate: FounderProfile) -> bool:
    kind = classify_dealbreaker(clause)
    if kind is DealbreakerKind.SKILL:
        return _check_skill(clause.lower(), candidate)
    if kind is DealbreakerKind.COMMITMENT:
        return _check_commitment(candidate)
    if kind is DealbreakerKind.LOCATION:
        return _check_location(clause.lower(), candidate)
    if kind is DealbreakerKind.DOMAIN:
        return _check_domain(clause.lower(), candidate)
    return True


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def passes_dealbreakers(founder: FounderProfile, candidate: FounderProfile) -> bool:
    """Does ``candidate`` satisfy every hard requirement ``founder`` stated?"""
    for clause in founder.constraints:
        if not clause_passes(clause, candidate):
            logger.debug(
                "Dealbreaker '%s' (%s) of %s rejects %s",
                clause, classify_dealbreaker(clause), founder.label, candidate.label,
            )
            return False
    return True


def check_dealbreakers(a: FounderProfile, b: FounderProfile) -> bool:
    """Bidirectional gate: both founders' requirements must hold."""
    return passes_dealbreakers(a, b) and passes_dealbreakers(b, a)
