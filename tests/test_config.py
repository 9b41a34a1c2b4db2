"""Tests for loading and validating the matching parameter set."""

from __future__ import annotations

import copy
import json

import pytest

from src.cofounder_matching.config import DATA_DIR, MatchingConfig, load_matching_config
from src.cofounder_matching.errors import ConfigError, ErrorType


def _raw() -> dict:
    path = DATA_DIR / "system_parameters.json"
    return json.loads(path.read_text(encoding="utf-8"))


def _write(tmp_path, payload) -> str:
    path = tmp_path / "params.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestShippedParameters:
    def test_loads(self, config):
        assert isinstance(config, MatchingConfig)
        assert config.min_match_score == 60
        assert config.highly_compatible_threshold == 75

    def test_dimension_weights_sum_to_one(self, config):
        assert abs(sum(config.dimensions.weights().values()) - 1.0) < 0.005

    def test_frozen(self, config):
        with pytest.raises(Exception):
            config.min_match_score = 10

    def test_neutral_cell_is_configuration(self, config):
        assert config.dimensions.communication.spectrum_scores["neutral"]["neutral"] == 75


class TestRejectedParameters:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_matching_config(tmp_path / "nope.json")
        assert exc_info.value.error_type == ErrorType.CONFIG

    def test_bad_json(self, tmp_path):
        path = tmp_path / "params.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_matching_config(path)

    def test_missing_key(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_matching_config(_write(tmp_path, {"OTHER": {}}))

    def test_dimension_weights_must_sum(self, tmp_path):
        raw = _raw()
        raw["MATCHING_WEIGHTS"]["dimensions"]["skills"]["weight"] = 0.5
        with pytest.raises(ConfigError, match="sum to 1.0"):
            load_matching_config(_write(tmp_path, raw))

    def test_sub_weights_must_sum(self, tmp_path):
        raw = _raw()
        raw["MATCHING_WEIGHTS"]["dimensions"]["values"]["sub_weights"]["pace"] = 0.9
        with pytest.raises(ConfigError):
            load_matching_config(_write(tmp_path, raw))

    def test_hybrid_weights_must_sum(self, tmp_path):
        raw = _raw()
        raw["MATCHING_WEIGHTS"]["hybrid_weights"]["ai_similarity"] = 0.9
        with pytest.raises(ConfigError):
            load_matching_config(_write(tmp_path, raw))

    def test_threshold_out_of_range(self, tmp_path):
        raw = _raw()
        raw["MATCHING_WEIGHTS"]["highly_compatible_threshold"] = 120
        with pytest.raises(ConfigError, match="highly_compatible_threshold"):
            load_matching_config(_write(tmp_path, raw))

    def test_incomplete_spectrum_matrix(self, tmp_path):
        raw = _raw()
        del raw["MATCHING_WEIGHTS"]["dimensions"]["communication"]["spectrum_scores"]["low"]["high"]
        with pytest.raises(ConfigError, match="spectrum_scores"):
            load_matching_config(_write(tmp_path, raw))

    def test_distance_bands_must_ascend(self, tmp_path):
        raw = _raw()
        bands = raw["MATCHING_WEIGHTS"]["dimensions"]["geo"]["distance_bands"]
        bands[0], bands[1] = bands[1], bands[0]
        with pytest.raises(ConfigError, match="ascending"):
            load_matching_config(_write(tmp_path, raw))

    def test_unknown_field_rejected(self, tmp_path):
        raw = _raw()
        raw["MATCHING_WEIGHTS"]["dimensions"]["geo"]["extra_knob"] = 1
        with pytest.raises(ConfigError):
            load_matching_config(_write(tmp_path, raw))

    def test_custom_weight_set_is_accepted(self, tmp_path):
        raw = copy.deepcopy(_raw())
        dims = raw["MATCHING_WEIGHTS"]["dimensions"]
        dims["skills"]["weight"] = 0.25
        dims["geo"]["weight"] = 0.08
        config = load_matching_config(_write(tmp_path, raw))
        assert config.dimensions.geo.weight == 0.08
