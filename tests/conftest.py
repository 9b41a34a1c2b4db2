from __future__ import annotations

import pytest

from src.cofounder_matching.config import MatchingConfig, load_matching_config


@pytest.fixture(scope="session")
def config() -> MatchingConfig:
    return load_matching_config()
