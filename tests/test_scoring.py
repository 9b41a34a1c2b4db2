"""Unit tests for the dimension scorers and the aggregator: no network or models."""

from __future__ import annotations

import pytest

from src.cofounder_matching.models import DIMENSIONS, DimensionScores, FounderProfile, Location
from src.cofounder_matching.scoring import (
    advantages,
    communication,
    geo,
    skills,
    stage,
    values,
    vision,
)
from src.cofounder_matching.scoring import composite
from src.cofounder_matching.scoring.composite import (
    calculate_match_score,
    dimension_scores,
    raw_dimension_scores,
    weighted_total,
)


def _make_founder(fid: str = "f1", **kwargs) -> FounderProfile:
    return FounderProfile(id=fid, **kwargs)


def _founder_a() -> FounderProfile:
    return _make_founder(
        "a", core_skills=["engineering"], seeking_skills=["sales"],
        stage="mvp", location_preference="remote",
    )


def _founder_b() -> FounderProfile:
    return _make_founder(
        "b", core_skills=["sales", "growth"], seeking_skills=["engineering"],
        stage="mvp", location_preference="remote",
    )


def _at(fid: str, lat: float, lng: float, **loc) -> FounderProfile:
    return _make_founder(fid, location=Location(lat=lat, lng=lng, **loc))


class TestSkills:
    def test_complementary_pair(self, config):
        assert skills.score(_founder_a(), _founder_b(), config.dimensions.skills) >= 90

    def test_identical_skills_are_penalised(self, config):
        a = _make_founder("a", core_skills=["sales"], seeking_skills=["sales"])
        b = _make_founder("b", core_skills=["sales"], seeking_skills=["sales"])
        cfg = config.dimensions.skills
        assert skills.score(a, b, cfg) < skills.score(_founder_a(), _founder_b(), cfg)

    def test_empty(self, config):
        assert skills.score(_make_founder("a"), _make_founder("b"), config.dimensions.skills) == 0.0

    def test_symmetric(self, config):
        cfg = config.dimensions.skills
        assert skills.score(_founder_a(), _founder_b(), cfg) == skills.score(_founder_b(), _founder_a(), cfg)


class TestStage:
    def test_same_stage(self, config):
        assert stage.score(_founder_a(), _founder_b(), config.dimensions.stage) == 100.0

    def test_stage_buckets(self):
        assert stage.normalize_stage("Building a prototype") == "mvp"
        assert stage.normalize_stage("Series A") == "scaling"
        assert stage.normalize_stage(None) == "idea"
        assert stage.normalize_urgency("ASAP") == "asap"
        assert stage.normalize_urgency("in a few weeks") == "soon"
        assert stage.normalize_urgency(None) == "flexible"
        for text in ("unknown", "not right now", "I don't know", "no timeline yet"):
            assert stage.normalize_urgency(text) == "flexible"
        assert stage.normalize_urgency("right away") == "asap"
        assert stage.normalize_stage("pre-revenue") == "idea"
        assert stage.normalize_stage("Pre revenue, talking to users") == "idea"
        assert stage.normalize_stage("deliverables due") == "idea"
        assert stage.normalize_stage("olive oil") == "idea"
        assert stage.normalize_stage("Live with paying users") == "launched"
        assert stage.normalize_stage("scaling the team") == "scaling"

    def test_distant_stages(self, config):
        a = _make_founder("a", stage="idea")
        b = _make_founder("b", stage="scaling")
        assert stage.score(a, b, config.dimensions.stage) == pytest.approx((30 + 100) / 2)

    def test_commitment(self, config):
        cfg = config.dimensions.stage
        full = _make_founder("a", commitment_level="Full-time")
        part = _make_founder("b", commitment_level="part-time")
        assert stage.commitment_score(full, part, cfg) == cfg.commitment_scores.one_fulltime_one_not
        assert stage.commitment_score(full, full, cfg) == cfg.commitment_scores.same
        assert stage.commitment_score(full, _make_founder("c"), cfg) == cfg.commitment_scores.unknown
        assert stage.commitment_score(_make_founder("c"), _make_founder("d"), cfg) is None


class TestCommunication:
    def test_neutral_pair(self, config):
        assert communication.score(_make_founder("a"), _make_founder("b"), config.dimensions.communication) == 75.0

    def test_same_style(self, config):
        a = _make_founder("a", working_style="direct, structured process, async")
        b = _make_founder("b", working_style="blunt, organized and independent")
        assert communication.score(a, b, config.dimensions.communication) == 100.0

    def test_opposite_style(self, config):
        a = _make_founder("a", working_style="direct and blunt")
        b = _make_founder("b", working_style="gentle and diplomatic")
        # directness 30, the other two spectra neutral (75)
        expected = 0.40 * 30 + 0.35 * 75 + 0.25 * 75
        assert communication.score(a, b, config.dimensions.communication) == pytest.approx(expected, abs=0.05)


class TestVision:
    def test_both_unknown(self, config):
        score = vision.score(_make_founder("a"), _make_founder("b"), config.dimensions.vision)
        assert score == pytest.approx((0.45 * 0.45 + 0.30 * 0.5) * 100, abs=0.1)

    def test_shared_industry_beats_disjoint(self, config):
        cfg = config.dimensions.vision
        a = _make_founder("a", idea_description="fintech payments for small business")
        b = _make_founder("b", idea_description="banking software for small business")
        c = _make_founder("c", idea_description="telehealth for hospital patients")
        assert vision.score(a, b, cfg) > vision.score(a, c, cfg)

    def test_industry_score_rules(self, config):
        scores = config.dimensions.vision.industry_scores
        assert vision.industry_score({"x"}, {"x"}, scores) == pytest.approx(1.0)
        assert vision.industry_score({"x"}, {"y"}, scores) == scores.no_overlap
        assert vision.industry_score({"x"}, set(), scores) == scores.one_unknown

    def test_embedding_cosine_used(self, config):
        cfg = config.dimensions.vision
        a = _make_founder("a", embedding=[1.0, 0.0])
        b = _make_founder("b", embedding=[1.0, 0.0])
        c = _make_founder("c", embedding=[-1.0, 0.0])
        assert vision.score(a, b, cfg) - vision.score(a, c, cfg) == pytest.approx(15.0, abs=0.1)


class TestValues:
    def test_unknown_pair(self, config):
        assert values.score(_make_founder("a"), _make_founder("b"), config.dimensions.values) == 60.0

    def test_axis_rules(self, config):
        scores = config.dimensions.values.dimension_scores
        assert values.axis_score("high", "high", scores) == 100
        assert values.axis_score("high", "medium", scores) == 75
        assert values.axis_score("high", "low", scores) == 40
        assert values.axis_score("unknown", "low", scores) == 60

    def test_equity_rules(self, config):
        table = config.dimensions.values.equity_compatibility
        assert values.equity_score("equal", "equal", table) == 100
        assert values.equity_score("flexible", "clear_majority", table) == 85
        assert values.equity_score("equal", "contribution_based", table) == 65
        assert values.equity_score("clear_majority", "equal", table) == 30
        assert values.equity_score("contribution_based", "clear_majority", table) == 50


class TestGeo:
    def test_both_remote(self, config):
        assert geo.score(_founder_a(), _founder_b(), config.dimensions.geo) == 70.0

    def test_no_data(self, config):
        assert geo.score(_make_founder("a"), _make_founder("b"), config.dimensions.geo) == 50.0

    def test_no_flexibility(self, config):
        a = _make_founder("a", location_preference="Berlin")
        b = _make_founder("b", location_preference="Austin")
        assert geo.score(a, b, config.dimensions.geo) == 30.0

    def test_same_city(self, config):
        assert geo.score(_at("a", 37.77, -122.42), _at("b", 37.80, -122.27), config.dimensions.geo) == 100.0

    def test_far_apart_remote_with_timezone_penalty(self, config):
        a = _at("a", 37.77, -122.42, is_remote_ok=True, timezone_offset=-480)
        b = _at("b", 51.51, -0.13, is_remote_ok=True, timezone_offset=0)
        # ~8600 km band (50), 8h apart (-10)
        assert geo.score(a, b, config.dimensions.geo) == 40.0

    def test_relocation_bonus(self, config):
        a = _at("a", 37.77, -122.42, willing_to_relocate=True)
        b = _at("b", 40.71, -74.01)
        assert geo.score(a, b, config.dimensions.geo) == 65.0


class TestAdvantages:
    def test_extract(self):
        p = _make_founder("a", background="Technical architect with a big network", previous_founder=True)
        assert advantages.extract_advantages(p) == {"technical", "network", "founder_experience"}

    def test_tiers(self, config):
        cfg = config.dimensions.advantages
        tech = _make_founder("a", background="senior engineer")
        biz = _make_founder("b", background="enterprise sales")
        assert advantages.score(tech, biz, cfg) == 80.0
        assert advantages.score(tech, tech, cfg) == 65.0
        assert advantages.score(tech, _make_founder("c"), cfg) == 60.0
        assert advantages.score(_make_founder("c"), _make_founder("d"), cfg) == 50.0


class TestAggregator:
    def test_scenario_complementary_remote_pair(self, config):
        result = calculate_match_score(_founder_a(), _founder_b(), config)
        assert result is not None
        assert result.dimension_scores.skills >= 90
        assert result.dimension_scores.stage == 100.0
        assert result.dimension_scores.geo == 70.0
        assert result.total_score >= 75
        assert result.compatibility_level == "highly_compatible"

    def test_deterministic(self, config):
        first = calculate_match_score(_founder_a(), _founder_b(), config)
        second = calculate_match_score(_founder_a(), _founder_b(), config)
        assert first == second

    def test_threshold_law(self, config):
        a, b = _founder_a(), _founder_b()
        total = weighted_total(raw_dimension_scores(a, b, config), config)
        above = config.model_copy(update={"min_match_score": total - 1e-6})
        below = config.model_copy(update={"min_match_score": total + 1e-6})
        assert calculate_match_score(a, b, above) is not None
        assert calculate_match_score(a, b, below) is None

    def test_tier_law(self, config):
        a, b = _founder_a(), _founder_b()
        result = calculate_match_score(a, b, config)
        strict = config.model_copy(update={"highly_compatible_threshold": result.total_score + 0.1})
        exact = config.model_copy(update={"highly_compatible_threshold": result.total_score})
        assert calculate_match_score(a, b, strict).compatibility_level == "somewhat_compatible"
        assert calculate_match_score(a, b, exact).compatibility_level == "highly_compatible"

    def test_empty_profiles_stay_in_range(self, config):
        scores = dimension_scores(_make_founder("a"), _make_founder("b"), config)
        for name in DIMENSIONS:
            assert 0.0 <= getattr(scores, name) <= 100.0
        assert calculate_match_score(_make_founder("a"), _make_founder("b"), config) is None

    def test_weighted_total(self, config):
        perfect = DimensionScores(**{name: 100.0 for name in DIMENSIONS})
        assert weighted_total(perfect, config) == pytest.approx(100.0)
        assert weighted_total(DimensionScores(), config) == 0.0

    def test_total_sums_unrounded_scores(self, config, monkeypatch):
        for name in DIMENSIONS:
            monkeypatch.setitem(composite._SCORERS, name, lambda a, b, cfg: 59.96)
        a, b = _make_founder("a"), _make_founder("b")
        assert dimension_scores(a, b, config).skills == 60.0
        assert calculate_match_score(a, b, config.model_copy(update={"min_match_score": 60.0})) is None
        result = calculate_match_score(a, b, config.model_copy(update={"min_match_score": 59.9}))
        assert result.total_score == 60.0
        assert result.dimension_scores.skills == 60.0

    def test_total_matches_raw_scores(self, config):
        a, b = _founder_a(), _founder_b()
        raw = raw_dimension_scores(a, b, config)
        result = calculate_match_score(a, b, config)
        assert result.total_score == round(weighted_total(raw, config), 1)
        for name in DIMENSIONS:
            assert getattr(result.dimension_scores, name) == round(getattr(raw, name), 1)
