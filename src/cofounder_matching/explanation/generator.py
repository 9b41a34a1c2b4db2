"""Match explanations: rule-based highlights/concerns plus an optional narrative.

``explain_match`` is deterministic and always available.  The narrative is
an Anthropic call made only for the top few matches of a run; it falls back
to a template sentence when the model gives nothing usable.
"""

from __future__ import annotations

import logging

from anthropic import Anthropic

from src.cofounder_matching.config import settings
from src.cofounder_matching.llm import call_llm_json, default_client
from src.cofounder_matching.models import DIMENSIONS, FounderProfile, MatchResult, RankedMatch

logger = logging.getLogger(__name__)

HIGHLIGHT_AT = 75.0
CONCERN_BELOW = 50.0

_HIGHLIGHTS = {
    "skills": "Complementary skill sets",
    "stage": "Aligned on stage and timeline",
    "communication": "Compatible communication styles",
    "vision": "Shared vision and problem space",
    "values": "Aligned values and working style",
    "geo": "Workable location setup",
    "advantages": "Complementary unfair advantages",
}

_CONCERNS = {
    "skills": "Limited skill complementarity",
    "stage": "Different stages or timelines",
    "communication": "Communication styles may clash",
    "vision": "Different industries or customers",
    "values": "Values may diverge",
    "geo": "Location could be a challenge",
    "advantages": "Overlapping rather than complementary advantages",
}


def explain_match(result: MatchResult) -> tuple[list[str], list[str]]:
    """(highlights, concerns) derived from the per-dimension scores."""
    highlights: list[str] = []
    concerns: list[str] = []
    for name in DIMENSIONS:
        value = getattr(result.dimension_scores, name)
        if value >= HIGHLIGHT_AT:
            highlights.append(_HIGHLIGHTS[name])
        elif value < CONCERN_BELOW:
            concerns.append(_CONCERNS[name])
    return highlights, concerns


# ---------------------------------------------------------------------------
# LLM narrative
# ---------------------------------------------------------------------------

_SYSTEM_PROMPT = """\
You write short co-founder match introductions.
You receive two founder profiles and their compatibility scores (0-100 per
dimension) and must explain to the FIRST founder why the SECOND one is worth
a conversation.

RULES:
- 2-3 sentences, plain language, second person ("you").
- Reference specific skills, stage or ideas from the profiles.
- Mention the weakest dimension honestly if it scores below 50.
- Never fabricate facts not present in the profile data.

Return ONLY valid JSON:
{"explanation": "2-3 sentence explanation"}
"""


def _describe(profile: FounderProfile) -> list[str]:
    parts = [f"  Name: {profile.label}"]
    if profile.core_skills:
        parts.append(f"  Skills: {', '.join(profile.core_skills)}")
    if profile.seeking_skills:
        parts.append(f"  Seeking: {', '.join(profile.seeking_skills)}")
    if profile.idea_description:
        parts.append(f"  Idea: {profile.idea_description}")
    if profile.stage:
        parts.append(f"  Stage: {profile.stage}")
    if profile.superpower:
        parts.append(f"  Superpower: {profile.superpower}")
    if profile.location_preference:
        parts.append(f"  Location: {profile.location_preference}")
    return parts


def _build_user_message(result: MatchResult, founder: FounderProfile, candidate: FounderProfile) -> str:
    parts = ["FOUNDER (who receives this recommendation):", *_describe(founder)]
    parts += ["", "RECOMMENDED CO-FOUNDER:", *_describe(candidate)]
    parts += ["", "SCORES:", f"  Total: {result.total_score:.1f} ({result.compatibility_level})"]
    for name in DIMENSIONS:
        parts.append(f"  {name}: {getattr(result.dimension_scores, name):.1f}")
    return "\n".join(parts)


def _fallback(result: MatchResult, candidate: FounderProfile) -> str:
    highlights, _ = explain_match(result)
    reason = highlights[0].lower() if highlights else "a solid overall fit"
    return f"{candidate.label} scores {result.total_score:.0f}/100 with you, driven by {reason}."


def generate_explanation(
    client: Anthropic,
    result: MatchResult,
    founder: FounderProfile,
    candidate: FounderProfile,
) -> str:
    data = call_llm_json(client, _SYSTEM_PROMPT, _build_user_message(result, founder, candidate), fast=False)
    explanation = data.get("explanation", "")
    if not isinstance(explanation, str) or not explanation.strip():
        logger.warning("Empty explanation for %s -> %s", founder.label, candidate.label)
        return _fallback(result, candidate)
    return explanation.strip()


def explain_top_matches(
    ranked: list[RankedMatch],
    founder: FounderProfile,
    client: Anthropic | None = None,
    top_k: int | None = None,
) -> list[RankedMatch]:
    """Attach narratives to the first ``top_k`` matches; the rest are returned unchanged."""
    k = top_k or settings.explanation_top_k
    if client is None and k > 0 and ranked:
        client = default_client()
    out: list[RankedMatch] = []
    for idx, match in enumerate(ranked):
        if idx < k:
            text = generate_explanation(client, match.match, founder, match.candidate)
            match = match.model_copy(update={"explanation": text})
        out.append(match)
    return out
