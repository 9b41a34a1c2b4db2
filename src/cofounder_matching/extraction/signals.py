"""Keyword-driven text signals read off interview answers.

Every extractor is pure: lowercase the relevant free text, count lexicon
hits, bucket the counts.  No hit is reported as ``neutral`` / ``unknown``
so the scorers can fall back to their configured middle values.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from src.cofounder_matching.lexicon import (
    CUSTOMER_SEGMENTS,
    EQUITY_PATTERNS,
    INDUSTRY_GROUPS,
    VALUE_AXES,
)
from src.cofounder_matching.models import (
    EquityPhilosophy,
    FounderProfile,
    SpectrumPosition,
    ValueScore,
)

SHORT_WORD_MAX = 6
SHORT_VISION_KEYWORD_MAX = 4
DOMINANCE_RATIO = 1.5

_WORD_SPLIT_RE = re.compile(r"[\s,;/()]+")
_NON_WORD_RE = re.compile(r"[^a-z0-9-]")


def _word_boundary_match(text: str, keyword: str) -> bool:
    return re.search(rf"\b{re.escape(keyword)}\b", text) is not None


def keyword_match(text: str, keyword: str) -> bool:
    """Match a lexicon keyword against lowercased text.

    Phrases (space or hyphen) match as substrings.  Short single words need
    word boundaries so "ai" does not fire inside "said"; long single words
    match as substrings so "collaborative" also hits "collaboratively".
    """
    if " " in keyword or "-" in keyword:
        return keyword in text
    if len(keyword) <= SHORT_WORD_MAX:
        return _word_boundary_match(text, keyword)
    return keyword in text


def count_hits(text: str, keywords: Iterable[str]) -> int:
    return sum(1 for kw in keywords if keyword_match(text, kw))


def _join(parts: Iterable[str | None]) -> str:
    return " ".join(p for p in parts if p).lower()


# ---------------------------------------------------------------------------
# Communication spectra
# ---------------------------------------------------------------------------

def style_text(profile: FounderProfile) -> str:
    return _join([
        profile.working_style,
        profile.commitment_level,
        profile.equity_thoughts,
        *profile.non_negotiables,
        *profile.deal_breakers,
    ])


def place_on_spectrum(
    profile: FounderProfile,
    high_keywords: list[str],
    low_keywords: list[str],
) -> SpectrumPosition:
    text = style_text(profile)
    if not text:
        return "neutral"

    high = count_hits(text, high_keywords)
    low = count_hits(text, low_keywords)
    if high + low == 0:
        return "neutral"

    ratio = high / (high + low)
    if ratio >= 0.8:
        return "high"
    if ratio >= 0.6:
        return "mid-high"
    if ratio <= 0.2:
        return "low"
    if ratio <= 0.4:
        return "mid-low"
    return "neutral"


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def values_text(profile: FounderProfile) -> str:
    return _join([profile.working_style, profile.equity_thoughts])


def detect_dimension(text: str, high_keywords: list[str], low_keywords: list[str]) -> ValueScore:
    high = count_hits(text, high_keywords)
    low = count_hits(text, low_keywords)
    if high == 0 and low == 0:
        return "unknown"
    if high > low * DOMINANCE_RATIO:
        return "high"
    if low > high * DOMINANCE_RATIO:
        return "low"
    return "medium"


def detect_equity_philosophy(equity_thoughts: str | None) -> EquityPhilosophy:
    text = (equity_thoughts or "").lower()
    if not text:
        return "unknown"

    best = "unknown"
    best_hits = 0
    for philosophy, keywords in EQUITY_PATTERNS.items():
        hits = count_hits(text, keywords)
        if hits > best_hits:
            best, best_hits = philosophy, hits
    return best


def extract_value_profile(profile: FounderProfile) -> dict[str, str]:
    """Axis name -> ``high|medium|low|unknown``, plus ``equity``."""
    text = values_text(profile)
    result: dict[str, str] = {}
    for axis, (high_kw, low_kw) in VALUE_AXES.items():
        result[axis] = detect_dimension(text, high_kw, low_kw) if text else "unknown"
    result["equity"] = detect_equity_philosophy(profile.equity_thoughts)
    return result


# ---------------------------------------------------------------------------
# Vision
# ---------------------------------------------------------------------------

def _vision_keyword_match(text: str, keyword: str) -> bool:
    if len(keyword) <= SHORT_VISION_KEYWORD_MAX:
        return _word_boundary_match(text, keyword)
    return keyword in text


def build_vision_text(profile: FounderProfile) -> str:
    return _join([profile.idea_description, profile.problem_solving, profile.target_customer])


def extract_industries(text: str) -> set[str]:
    text = text.lower()
    found: set[str] = set()
    for idx, group in enumerate(INDUSTRY_GROUPS):
        if any(_vision_keyword_match(text, kw) for kw in group):
            found.add(f"industry_{idx}")
    return found


def extract_segments(text: str) -> set[str]:
    text = text.lower()
    return {
        segment
        for segment, keywords in CUSTOMER_SEGMENTS.items()
        if any(_vision_keyword_match(text, kw) for kw in keywords)
    }


def extract_words(text: str) -> set[str]:
    words = set()
    for raw in _WORD_SPLIT_RE.split(text.lower()):
        word = _NON_WORD_RE.sub("", raw)
        if len(word) >= 2:
            words.add(word)
    return words


def jaccard(a: set[str], b: set[str]) -> float:
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)
