"""Similarity-search seam used by hybrid retrieval.

Production deployments back ``SimilaritySearch`` with a vector database;
``InMemorySimilarityIndex`` is a numpy implementation for offline jobs and
tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

import numpy as np

from src.cofounder_matching.models import FounderProfile, SimilarityHit

logger = logging.getLogger(__name__)


class SimilaritySearch(Protocol):
    def search(
        self,
        vector: list[float],
        threshold: float,
        limit: int,
        exclude_id: str,
    ) -> list[SimilarityHit]:
        """Nearest profiles with cosine similarity ``>= threshold``, best first."""
        ...


class InMemorySimilarityIndex:
    """Brute-force cosine search over profiles that carry an embedding."""

    def __init__(self, profiles: Iterable[FounderProfile] = ()) -> None:
        self._profiles: list[FounderProfile] = []
        self._matrix: np.ndarray | None = None
        self.add(profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def add(self, profiles: Iterable[FounderProfile]) -> None:
        added = [p for p in profiles if p.embedding]
        if not added:
            return
        dims = {len(p.embedding) for p in [*self._profiles, *added]}
        if len(dims) > 1:
            raise ValueError(f"Embeddings must share one dimensionality (got {sorted(dims)})")
        self._profiles.extend(added)
        matrix = np.asarray([p.embedding for p in self._profiles], dtype=float)
        norms = np.linalg.norm(matrix, axis=1, keepdims=True)
        norms[norms == 0] = 1.0
        self._matrix = matrix / norms
        logger.debug("Index holds %d profiles", len(self._profiles))

    def search(
        self,
        vector: list[float],
        threshold: float,
        limit: int,
        exclude_id: str,
    ) -> list[SimilarityHit]:
        if self._matrix is None or limit <= 0:
            return []
        query = np.asarray(vector, dtype=float)
        if query.shape[0] != self._matrix.shape[1]:
            raise ValueError(
                f"Query has {query.shape[0]} dims, index has {self._matrix.shape[1]}"
            )
        norm = np.linalg.norm(query)
        if norm == 0:
            return []
        sims = self._matrix @ (query / norm)

        hits: list[SimilarityHit] = []
        for idx in np.argsort(-sims):
            profile = self._profiles[idx]
            similarity = float(sims[idx])
            if similarity < threshold:
                break
            if profile.id == exclude_id:
                continue
            hits.append(SimilarityHit(id=profile.id, similarity=similarity, profile=profile))
            if len(hits) >= limit:
                break
        return hits
