"""Profile embeddings using sentence-transformers.

The matcher treats vectors as opaque: profiles normally arrive with an
``embedding`` already attached by the similarity service.  ``ProfileEmbedder``
is the local fallback used by offline jobs and the in-memory index.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from src.cofounder_matching.config import settings
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


def profile_text(profile: FounderProfile) -> str:
    """Flatten the parts of a profile that describe who the founder is and wants."""
    parts = [
        profile.idea_description,
        profile.problem_solving,
        profile.target_customer,
        profile.background,
        profile.superpower,
        f"Skills: {', '.join(profile.core_skills)}" if profile.core_skills else None,
        f"Looking for: {', '.join(profile.seeking_skills)}" if profile.seeking_skills else None,
        profile.working_style,
    ]
    return ". ".join(p for p in parts if p)


def cosine_similarity(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    va = np.asarray(a, dtype=float)
    vb = np.asarray(b, dtype=float)
    norm = np.linalg.norm(va) * np.linalg.norm(vb)
    if norm == 0:
        return 0.0
    return float(np.dot(va, vb) / norm)


class ProfileEmbedder:
    """Callable ``FounderProfile -> list[float]`` backed by a sentence-transformer.

    The model is loaded lazily on first use and cached per text.
    """

    def __init__(self, model_name: str | None = None) -> None:
        self.model_name = model_name or settings.embedding_model
        self._model = None
        self._cache: dict[str, np.ndarray] = {}

    def _load_model(self):
        if self._model is None:
            from sentence_transformers import SentenceTransformer
            self._model = SentenceTransformer(self.model_name)
            logger.info("Loaded sentence-transformer model: %s", self.model_name)
        return self._model

    def encode(self, text: str) -> np.ndarray:
        if text in self._cache:
            return self._cache[text]
        vec = self._load_model().encode(text, show_progress_bar=False, normalize_embeddings=True)
        self._cache[text] = vec
        return vec

    def fit(self, profiles: Sequence[FounderProfile]) -> None:
        """Pre-encode a batch of profiles in one model call."""
        texts = [profile_text(p) for p in profiles]
        if not texts:
            return
        vectors = self._load_model().encode(texts, show_progress_bar=False, normalize_embeddings=True)
        for text, vec in zip(texts, vectors):
            self._cache[text] = vec
        logger.info("Pre-encoded %d profiles (%d-dim embeddings)", len(texts), vectors.shape[1])

    def __call__(self, profile: FounderProfile) -> list[float]:
        return self.encode(profile_text(profile)).tolist()

    def reset(self) -> None:
        self._cache.clear()
