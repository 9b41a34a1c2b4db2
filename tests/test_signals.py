"""Tests for the keyword-driven text extractors."""

from __future__ import annotations

from src.cofounder_matching.extraction.location import (
    LocationPrefs,
    haversine_km,
    parse_location_prefs,
    prefs_for,
)
from src.cofounder_matching.extraction.signals import (
    detect_dimension,
    detect_equity_philosophy,
    extract_industries,
    extract_segments,
    extract_value_profile,
    extract_words,
    jaccard,
    keyword_match,
    place_on_spectrum,
)
from src.cofounder_matching.extraction.skills import (
    calculate_coverage,
    calculate_overlap,
    calculate_superpower_boost,
    normalize_skill,
    skill_similarity,
)
from src.cofounder_matching.lexicon import DIRECTNESS_DIRECT, DIRECTNESS_GENTLE
from src.cofounder_matching.models import FounderProfile, Location


def _make_founder(fid: str = "f1", **kwargs) -> FounderProfile:
    return FounderProfile(id=fid, **kwargs)


class TestKeywordMatch:
    def test_short_word_needs_boundary(self):
        assert keyword_match("we use ai daily", "ai")
        assert not keyword_match("she said so", "ai")

    def test_phrase_is_substring(self):
        assert keyword_match("i like to move fast always", "move fast")
        assert keyword_match("non-confrontational person", "non-confrontational")

    def test_long_word_is_substring(self):
        assert keyword_match("very straightforwardness", "straightforward")

    def test_regex_characters_are_escaped(self):
        assert keyword_match("we run a/b tests", "a/b test")
        assert not keyword_match("anything", "a.b")


class TestSpectrum:
    def test_empty_profile_is_neutral(self):
        assert place_on_spectrum(_make_founder(), DIRECTNESS_DIRECT, DIRECTNESS_GENTLE) == "neutral"

    def test_no_hits_is_neutral(self):
        p = _make_founder(working_style="I like coffee")
        assert place_on_spectrum(p, DIRECTNESS_DIRECT, DIRECTNESS_GENTLE) == "neutral"

    def test_all_high(self):
        p = _make_founder(working_style="Direct, blunt and candid")
        assert place_on_spectrum(p, DIRECTNESS_DIRECT, DIRECTNESS_GENTLE) == "high"

    def test_all_low(self):
        p = _make_founder(working_style="gentle and diplomatic")
        assert place_on_spectrum(p, DIRECTNESS_DIRECT, DIRECTNESS_GENTLE) == "low"

    def test_mixed_is_neutral(self):
        p = _make_founder(working_style="direct but gentle")
        assert place_on_spectrum(p, DIRECTNESS_DIRECT, DIRECTNESS_GENTLE) == "neutral"

    def test_dealbreakers_count_as_style_text(self):
        p = _make_founder(deal_breakers=["people who are not direct or candid"])
        assert place_on_spectrum(p, DIRECTNESS_DIRECT, DIRECTNESS_GENTLE) == "high"


class TestValues:
    def test_detect_dimension_rules(self):
        assert detect_dimension("", ["fast"], ["slow"]) == "unknown"
        assert detect_dimension("fast", ["fast"], ["slow"]) == "high"
        assert detect_dimension("slow", ["fast"], ["slow"]) == "low"
        assert detect_dimension("fast slow", ["fast"], ["slow"]) == "medium"

    def test_value_profile_empty(self):
        profile = extract_value_profile(_make_founder())
        assert set(profile.values()) == {"unknown"}

    def test_value_profile_reads_working_style(self):
        profile = extract_value_profile(_make_founder(working_style="We move fast and hustle"))
        assert profile["pace"] == "high"
        assert profile["risk"] == "unknown"

    def test_equity_philosophy(self):
        assert detect_equity_philosophy(None) == "unknown"
        assert detect_equity_philosophy("50/50 split evenly") == "equal"
        assert detect_equity_philosophy("based on contribution and vesting") == "contribution_based"
        assert detect_equity_philosophy("I want majority control") == "clear_majority"
        assert detect_equity_philosophy("no idea") == "unknown"


class TestVisionSignals:
    def test_industries(self):
        assert extract_industries("a fintech payments app") == {"industry_0"}
        assert extract_industries("nothing relevant") == set()

    def test_short_industry_keyword_needs_boundary(self):
        assert "industry_10" not in extract_industries("every evening")
        assert "industry_10" in extract_industries("an ev charging network")

    def test_segments(self):
        assert extract_segments("tools for small businesses and developers") == {"smb", "developer"}

    def test_words_and_jaccard(self):
        words = extract_words("Payments (for SMBs), fast/cheap; a")
        assert words == {"payments", "for", "smbs", "fast", "cheap"}
        assert jaccard({"a", "b"}, {"b", "c"}) == 1 / 3
        assert jaccard(set(), {"a"}) == 0.0


class TestSkillHelpers:
    def test_normalize(self):
        assert normalize_skill("  Backend  (Python) ") == "backend"

    def test_similarity_tiers(self):
        assert skill_similarity("Sales", "sales") == 1.0
        assert skill_similarity("sales", "enterprise sales") == 0.7
        assert skill_similarity("ux", "product design") == 0.85
        assert skill_similarity("sales", "legal") == 0.0

    def test_coverage(self):
        assert calculate_coverage(["engineering"], ["engineering"]) == 1.0
        assert calculate_coverage([], ["engineering"]) == 0.0
        assert calculate_coverage(["sales"], ["engineering", "sales"]) == 0.5

    def test_overlap(self):
        assert calculate_overlap(["sales"], ["sales"]) == 1.0
        assert calculate_overlap(["engineering"], ["sales", "growth"]) == 0.0

    def test_superpower_boost_unknown(self):
        assert calculate_superpower_boost(_make_founder("a"), _make_founder("b")) is None

    def test_superpower_boost_one_direction(self):
        a = _make_founder("a", superpower="sales")
        b = _make_founder("b", weaknesses_blindspots=["sales", "pitching"])
        assert calculate_superpower_boost(a, b) == 1.0


class TestLocationSignals:
    def test_haversine_sf_to_nyc(self):
        km = haversine_km(37.7749, -122.4194, 40.7128, -74.006)
        assert 4100 < km < 4200

    def test_haversine_zero(self):
        assert haversine_km(10, 10, 10, 10) == 0.0

    def test_parse_prefs(self):
        assert parse_location_prefs("remote").remote_ok
        assert not parse_location_prefs("remotely possible").remote_ok
        only = parse_location_prefs("Fully remote please")
        assert only.remote_only and only.remote_ok
        assert parse_location_prefs("willing to move").will_relocate
        for text in ("no remote", "not remote", "non-remote", "No Remote, Austin only"):
            assert not parse_location_prefs(text).remote_ok
        assert not parse_location_prefs("not willing to relocate").will_relocate
        assert not parse_location_prefs("won't move").will_relocate
        assert parse_location_prefs(None) == LocationPrefs()

    def test_structured_flags_win(self):
        p = _make_founder(location_preference="NYC", location=Location(is_remote_ok=True))
        assert prefs_for(p).remote_ok
