"""Vision & problem space: same industry, same customers, similar language?"""

from __future__ import annotations

import logging

from src.cofounder_matching.config import IndustryScores, SegmentScores, VisionConfig
from src.cofounder_matching.embeddings import cosine_similarity
from src.cofounder_matching.extraction.signals import (
    build_vision_text,
    extract_industries,
    extract_segments,
    extract_words,
    jaccard,
)
from src.cofounder_matching.models import FounderProfile

logger = logging.getLogger(__name__)


def industry_score(a: set[str], b: set[str], scores: IndustryScores) -> float:
    if not a and not b:
        return scores.both_unknown
    if not a or not b:
        return scores.one_unknown
    shared = a & b
    if not shared:
        return scores.no_overlap
    ratio = len(shared) / max(len(a), len(b))
    return scores.overlap_base + ratio * scores.overlap_bonus


def segment_score(a: set[str], b: set[str], scores: SegmentScores) -> float:
    if not a or not b:
        return scores.unknown
    overlap = jaccard(a, b)
    if overlap == 0:
        return scores.no_overlap
    return scores.overlap_base + overlap * scores.overlap_bonus


def semantic_score(a: FounderProfile, b: FounderProfile, vocabulary: float) -> float:
    """Embedding cosine when both vectors are usable, otherwise word overlap."""
    if a.embedding and b.embedding and len(a.embedding) == len(b.embedding):
        return max(0.0, cosine_similarity(a.embedding, b.embedding))
    return vocabulary


def raw_score(a: FounderProfile, b: FounderProfile, config: VisionConfig) -> float:
    """Vision alignment.  [0.0, 100.0]."""
    text_a, text_b = build_vision_text(a), build_vision_text(b)
    weights = config.sub_weights

    industry = industry_score(extract_industries(text_a), extract_industries(text_b), config.industry_scores)
    segment = segment_score(extract_segments(text_a), extract_segments(text_b), config.segment_scores)
    vocabulary = jaccard(extract_words(text_a), extract_words(text_b))
    semantic = semantic_score(a, b, vocabulary)

    composite = (
        weights.industry * industry
        + weights.segment * segment
        + weights.semantic * semantic
        + weights.vocabulary * vocabulary
    )
    result = min(max(composite * 100, 0.0), 100.0)
    logger.debug(
        "Vision %s<->%s: industry=%.2f segment=%.2f semantic=%.2f vocab=%.2f -> %.1f",
        a.label, b.label, industry, segment, semantic, vocabulary, result,
    )
    return result


def score(a: FounderProfile, b: FounderProfile, config: VisionConfig) -> float:
    return round(raw_score(a, b, config), 1)
