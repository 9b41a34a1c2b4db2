"""Profile store seam and the JSON-backed in-memory implementation."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from src.cofounder_matching.config import DATA_DIR
from src.cofounder_matching.errors import ProfileNotFoundError, ProfileStoreError
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    def get(self, founder_id: str) -> FounderProfile:
        """Raise :class:`ProfileNotFoundError` for unknown ids."""
        ...

    def list_profiles(self, exclude_id: str | None = None) -> list[FounderProfile]:
        ...


class InMemoryProfileStore:
    def __init__(self, profiles: Iterable[FounderProfile] = ()) -> None:
        self._profiles: dict[str, FounderProfile] = {p.id: p for p in profiles}

    def __len__(self) -> int:
        return len(self._profiles)

    def add(self, profile: FounderProfile) -> None:
        self._profiles[profile.id] = profile

    def get(self, founder_id: str) -> FounderProfile:
        try:
            return self._profiles[founder_id]
        except KeyError:
            raise ProfileNotFoundError.for_id(founder_id) from None

    def list_profiles(self, exclude_id: str | None = None) -> list[FounderProfile]:
        return [p for pid, p in self._profiles.items() if pid != exclude_id]


def load_profiles_from_json(data: list[dict]) -> list[FounderProfile]:
    try:
        return [FounderProfile(**p) for p in data]
    except (TypeError, ValidationError) as exc:
        raise ProfileStoreError.failed("load", str(exc)) from exc


def load_sample_profiles(path: str | Path | None = None) -> list[FounderProfile]:
    source = Path(path) if path is not None else DATA_DIR / "sample_founders.json"
    try:
        with open(source, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ProfileStoreError.failed(f"read of {source}", str(exc)) from exc
    profiles = load_profiles_from_json(raw)
    logger.info("Loaded %d founder profiles from %s", len(profiles), source)
    return profiles
