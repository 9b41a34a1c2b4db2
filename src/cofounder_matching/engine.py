"""Top-level orchestrator — batch matching and hybrid retrieval/rerank.

Batch (``compute_matches``):
  1. Load the founder and every other profile from the store
  2. Drop pairs failing the bidirectional dealbreaker gate
  3. Score the rest across seven dimensions                (deterministic)
  4. Keep results above ``min_match_score``, best first

Hybrid (``find_hybrid_matches``):
  1. Resolve a query vector (stored embedding, else embedder)
  2. Similarity search with timeout + one retry            (external)
  3. Dealbreaker gate, then full scoring with the floor relaxed to 0
  4. combined = similarity * ai_weight + total/100 * dimension_weight
  5. Sort, truncate, attach highlights/concerns
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from tenacity import Retrying, before_sleep_log, retry_if_exception, stop_after_attempt

from src.cofounder_matching.config import MatchingConfig, settings
from src.cofounder_matching.dealbreakers import check_dealbreakers
from src.cofounder_matching.errors import (
    EmbeddingError,
    MatchingError,
    SearchUnavailableError,
    is_transient,
)
from src.cofounder_matching.explanation.generator import explain_match
from src.cofounder_matching.models import (
    FounderProfile,
    MatchResult,
    MatchSummary,
    RankedMatch,
    SimilarityHit,
)
from src.cofounder_matching.retrieval.index import SimilaritySearch
from src.cofounder_matching.retrieval.store import ProfileStore
from src.cofounder_matching.scoring.composite import calculate_match_score

logger = logging.getLogger(__name__)

Embedder = Callable[[FounderProfile], Sequence[float]]


# ---------------------------------------------------------------------------
# Batch matching
# ---------------------------------------------------------------------------

def score_candidates(
    founder: FounderProfile,
    candidates: Iterable[FounderProfile],
    config: MatchingConfig,
    *,
    apply_dealbreakers: bool = True,
    max_workers: int | None = None,
) -> list[MatchResult]:
    """Score ``founder`` against each candidate; results sorted best first."""
    pool = [c for c in candidates if c.id != founder.id]
    if apply_dealbreakers:
        pool = [c for c in pool if check_dealbreakers(founder, c)]

    def _score(candidate: FounderProfile) -> MatchResult | None:
        return calculate_match_score(founder, candidate, config)

    if max_workers and max_workers > 1 and len(pool) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scored = list(executor.map(_score, pool))
    else:
        scored = [_score(c) for c in pool]

    matches = [m for m in scored if m is not None]
    matches.sort(key=lambda m: m.total_score, reverse=True)
    return matches


def compute_matches(
    founder_id: str,
    store: ProfileStore,
    config: MatchingConfig,
    *,
    max_workers: int | None = None,
) -> MatchSummary:
    founder = store.get(founder_id)
    others = store.list_profiles(exclude_id=founder_id)

    passing = [c for c in others if c.id != founder_id and check_dealbreakers(founder, c)]
    matches = score_candidates(
        founder, passing, config, apply_dealbreakers=False, max_workers=max_workers,
    )
    summary = MatchSummary(
        founder_id=founder_id,
        total_checked=len(others),
        dealbreakers_filtered=len(others) - len(passing),
        matches=matches,
    )
    logger.info(
        "Matches for %s: %d checked, %d filtered by dealbreakers, %d matches "
        "(%d highly compatible)",
        founder.label, summary.total_checked, summary.dealbreakers_filtered,
        len(matches), summary.highly_compatible,
    )
    return summary


# ---------------------------------------------------------------------------
# Hybrid retrieval / rerank
# ---------------------------------------------------------------------------

def _query_vector(founder_id: str, profile: FounderProfile, embedder: Embedder | None) -> list[float]:
    if profile.embedding:
        return list(profile.embedding)
    if embedder is None:
        raise EmbeddingError.no_vector(founder_id)
    try:
        vector = [float(x) for x in embedder(profile)]
    except Exception as exc:
        raise EmbeddingError.failed(founder_id, str(exc)) from exc
    if not vector:
        raise EmbeddingError.no_vector(founder_id)
    return vector


def _call_with_timeout(fn: Callable[[], list], timeout: float) -> list:
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        return executor.submit(fn).result(timeout=timeout)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def _as_hit(row: SimilarityHit | dict) -> SimilarityHit:
    return row if isinstance(row, SimilarityHit) else SimilarityHit.from_row(row)


def search_similar(
    search: SimilaritySearch,
    vector: list[float],
    threshold: float,
    limit: int,
    exclude_id: str,
    *,
    timeout: float | None = None,
    attempts: int | None = None,
) -> list[SimilarityHit]:
    """Run the similarity search; transient failures get retried.

    Raises :class:`SearchUnavailableError` once the attempts are spent.  An
    empty list means the service answered with no candidates.
    """
    timeout = settings.search_timeout_seconds if timeout is None else timeout
    attempts = settings.search_attempts if attempts is None else attempts
    calls = 0

    def _attempt() -> list:
        nonlocal calls
        calls += 1
        return _call_with_timeout(
            lambda: search.search(vector, threshold, limit, exclude_id), timeout,
        )

    retryer = Retrying(
        stop=stop_after_attempt(attempts),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    try:
        rows = retryer(_attempt)
    except MatchingError:
        raise
    except Exception as exc:
        raise SearchUnavailableError.from_exception(exc, attempts=calls) from exc
    return [_as_hit(row) for row in rows or []]


def find_hybrid_matches(
    founder_id: str,
    founder_profile: FounderProfile,
    similarity_threshold: float | None = None,
    candidate_limit: int | None = None,
    *,
    search: SimilaritySearch,
    config: MatchingConfig,
    embedder: Embedder | None = None,
    top_n: int | None = None,
) -> list[RankedMatch]:
    threshold = settings.similarity_threshold if similarity_threshold is None else similarity_threshold
    limit = settings.candidate_limit if candidate_limit is None else candidate_limit
    top_n = settings.hybrid_top_n if top_n is None else top_n

    vector = _query_vector(founder_id, founder_profile, embedder)
    hits = search_similar(search, vector, threshold, limit, founder_id)
    if not hits:
        logger.info("No similarity candidates for %s above %.2f", founder_profile.label, threshold)
        return []

    relaxed = config.model_copy(update={"min_match_score": 0})
    weights = config.hybrid_weights

    ranked: list[RankedMatch] = []
    filtered = 0
    for hit in hits:
        if hit.id == founder_id:
            continue
        if not check_dealbreakers(founder_profile, hit.profile):
            filtered += 1
            continue
        result = calculate_match_score(founder_profile, hit.profile, relaxed)
        if result is None:
            continue
        combined = hit.similarity * weights.ai_similarity + result.total_score / 100 * weights.dimension_score
        highlights, concerns = explain_match(result)
        ranked.append(RankedMatch(
            candidate=hit.profile,
            similarity=hit.similarity,
            match=result,
            combined_score=combined,
            highlights=highlights,
            concerns=concerns,
        ))

    ranked.sort(key=lambda r: r.combined_score, reverse=True)
    ranked = ranked[:top_n]
    logger.info(
        "Hybrid matches for %s: %d hits, %d filtered by dealbreakers, %d returned",
        founder_profile.label, len(hits), filtered, len(ranked),
    )
    return ranked
