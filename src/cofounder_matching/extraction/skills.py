"""Skill-list helpers: normalisation, fuzzy similarity, coverage and overlap."""

from __future__ import annotations

import re

from src.cofounder_matching.extraction.signals import jaccard
from src.cofounder_matching.lexicon import SKILL_SYNONYM_GROUPS
from src.cofounder_matching.models import FounderProfile

EXACT_MATCH = 1.0
SYNONYM_MATCH = 0.85
CONTAINS_MATCH = 0.7
MATCH_FLOOR = 0.7

_PARENS_RE = re.compile(r"\([^)]*\)")
_SPACES_RE = re.compile(r"\s+")
_SKILL_SPLIT_RE = re.compile(r"[\s,;/]+")
_NON_WORD_RE = re.compile(r"[^a-z0-9-]")


def normalize_skill(skill: str) -> str:
    """``"  Backend (Python) "`` -> ``"backend"``."""
    cleaned = _PARENS_RE.sub("", skill.lower())
    return _SPACES_RE.sub(" ", cleaned).strip()


def synonym_group(skill: str) -> int | None:
    for idx, group in enumerate(SKILL_SYNONYM_GROUPS):
        if any(syn in skill or skill in syn for syn in group):
            return idx
    return None


def skill_similarity(a: str, b: str) -> float:
    na, nb = normalize_skill(a), normalize_skill(b)
    if not na or not nb:
        return 0.0
    if na == nb:
        return EXACT_MATCH
    if na in nb or nb in na:
        return CONTAINS_MATCH
    ga = synonym_group(na)
    if ga is not None and ga == synonym_group(nb):
        return SYNONYM_MATCH
    return 0.0


def best_match(skill: str, pool: list[str]) -> float:
    return max((skill_similarity(skill, other) for other in pool), default=0.0)


def calculate_coverage(has: list[str], seeking: list[str]) -> float:
    """Mean best-match of each sought skill against what the other side has."""
    if not has or not seeking:
        return 0.0
    return sum(best_match(s, has) for s in seeking) / len(seeking)


def calculate_overlap(a: list[str], b: list[str]) -> float:
    """Share of the combined skill set both founders already cover."""
    if not a or not b:
        return 0.0
    shared = sum(1 for skill in a if best_match(skill, b) >= MATCH_FLOOR)
    union = len(set(map(normalize_skill, a)) | set(map(normalize_skill, b)))
    return min(shared / union, 1.0) if union else 0.0


def _skill_words(parts: list[str]) -> set[str]:
    words: set[str] = set()
    for part in parts:
        for raw in _SKILL_SPLIT_RE.split(part.lower()):
            word = _NON_WORD_RE.sub("", raw)
            if len(word) >= 3:
                words.add(word)
    return words


def semantic_skill_boost(a: FounderProfile, b: FounderProfile) -> float:
    """Word-level Jaccard between one side's offer and the other's gaps.

    A's skills + superpower are compared with B's seeking skills + weaknesses
    and vice versa; the two directions are averaged.
    """
    a_offer = _skill_words([*a.core_skills, a.superpower or ""])
    b_offer = _skill_words([*b.core_skills, b.superpower or ""])
    a_gaps = _skill_words([*a.seeking_skills, *a.weaknesses_blindspots])
    b_gaps = _skill_words([*b.seeking_skills, *b.weaknesses_blindspots])
    return (jaccard(a_offer, b_gaps) + jaccard(b_offer, a_gaps)) / 2


def calculate_superpower_boost(a: FounderProfile, b: FounderProfile) -> float | None:
    """Share of directions where one superpower covers the other's weakness.

    ``None`` when neither direction has both a superpower and weaknesses.
    """
    checked = 0
    hits = 0
    for giver, receiver in ((a, b), (b, a)):
        if not giver.superpower or not receiver.weaknesses_blindspots:
            continue
        checked += 1
        if best_match(giver.superpower, receiver.weaknesses_blindspots) >= MATCH_FLOOR:
            hits += 1
    if checked == 0:
        return None
    return hits / checked
