"""Centralized helpers for Anthropic LLM calls."""

from __future__ import annotations

import json
import logging
import re

import anthropic
from anthropic import Anthropic
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.cofounder_matching.config import settings

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)```", re.DOTALL)

_RETRYABLE = (
    anthropic.RateLimitError,
    anthropic.APIConnectionError,
    anthropic.InternalServerError,
)


def default_client() -> Anthropic:
    return Anthropic(api_key=settings.anthropic_api_key)


def _strip_fences(text: str) -> str:
    m = _FENCE_RE.search(text)
    return m.group(1).strip() if m else text.strip()


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=20),
    retry=retry_if_exception_type(_RETRYABLE),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
def _create(client: Anthropic, model: str, system: str, user: str, max_tokens: int) -> str:
    resp = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        system=system,
        messages=[{"role": "user", "content": user}],
    )
    if not resp.content:
        return ""
    return getattr(resp.content[0], "text", "") or ""


def call_llm_json(
    client: Anthropic,
    system: str,
    user: str,
    *,
    fast: bool = True,
) -> dict:
    model = settings.anthropic_fast_model if fast else settings.anthropic_model
    raw = _create(client, model, system, user, 1024)
    cleaned = _strip_fences(raw)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        logger.warning("LLM returned non-JSON (%s model): %s", model, raw[:200])
        return {}
    if not isinstance(data, dict):
        logger.warning("LLM returned JSON %s, expected an object", type(data).__name__)
        return {}
    return data
