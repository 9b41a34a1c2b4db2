"""Actionable error hierarchy for the matching engine.

Errors are classified by **recovery path**, not by origin:

  - ``CONFIG``  : the matching parameters could not be loaded or are invalid;
                   fix the parameter set, nothing will score until then.
  - ``EMBEDDING``: no query vector is available for hybrid retrieval.
  - ``SEARCH``  : the similarity service failed (after the retry budget).
  - ``STORE``   : the profile store failed or does not know a founder.

Missing profile data is *never* an error; scorers degrade to neutral values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


class ErrorType(StrEnum):
    """Recovery-path categories: what to *do*, not where it came from."""

    CONFIG = "config"
    EMBEDDING = "embedding"
    SEARCH = "search"
    STORE = "store"


@dataclass
class MatchingError(Exception):
    """Structured error with embedded recovery guidance.

    Prefer the factory classmethods on the subclasses; they keep message
    wording and suggestions consistent.
    """

    error: str
    error_type: ErrorType
    service: str

    suggestion: str | None = None
    context: dict[str, Any] | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self) -> None:
        super().__init__(self.error)

    def __str__(self) -> str:
        return self.error

    def to_dict(self) -> dict[str, Any]:
        """Compact JSON-ready dict: ``None`` values are excluded."""
        result: dict[str, Any] = {
            "success": False,
            "error": self.error,
            "error_type": self.error_type.value,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.suggestion is not None:
            result["suggestion"] = self.suggestion
        if self.context is not None:
            result["context"] = self.context
        return result


class ConfigError(MatchingError):
    @classmethod
    def invalid(cls, source: str, reason: str) -> ConfigError:
        return cls(
            error=f"Matching configuration error in {source}: {reason}",
            error_type=ErrorType.CONFIG,
            service="config",
            suggestion=f"Fix the MATCHING_WEIGHTS parameter set in {source}",
            context={"source": source},
        )

    @classmethod
    def missing(cls, source: str, key: str) -> ConfigError:
        return cls(
            error=f"Matching configuration '{key}' not found in {source}",
            error_type=ErrorType.CONFIG,
            service="config",
            suggestion=f"Add a '{key}' entry to {source}",
            context={"source": source, "key": key},
        )


class EmbeddingError(MatchingError):
    @classmethod
    def no_vector(cls, founder_id: str) -> EmbeddingError:
        return cls(
            error=f"Founder '{founder_id}' has no embedding and no embedder was supplied",
            error_type=ErrorType.EMBEDDING,
            service="embeddings",
            suggestion="Backfill the founder's embedding or pass an embedder",
            context={"founder_id": founder_id},
        )

    @classmethod
    def failed(cls, founder_id: str, raw_error: str) -> EmbeddingError:
        return cls(
            error=f"Embedding failed for founder '{founder_id}': {raw_error}",
            error_type=ErrorType.EMBEDDING,
            service="embeddings",
            suggestion="Verify the embedding model is available",
            context={"founder_id": founder_id},
        )


class SearchUnavailableError(MatchingError):
    """The similarity service could not answer; distinct from zero results."""

    @classmethod
    def from_exception(cls, exc: BaseException, *, attempts: int) -> SearchUnavailableError:
        return cls(
            error=f"Similarity search failed after {attempts} attempt(s): {exc}",
            error_type=ErrorType.SEARCH,
            service="similarity_search",
            suggestion="Check the similarity service and retry the request",
            context={"attempts": attempts, "cause": type(exc).__name__},
        )


class ProfileStoreError(MatchingError):
    @classmethod
    def failed(cls, operation: str, raw_error: str) -> ProfileStoreError:
        return cls(
            error=f"Profile store {operation} failed: {raw_error}",
            error_type=ErrorType.STORE,
            service="profile_store",
            suggestion="Check the profile store connection",
        )


class ProfileNotFoundError(ProfileStoreError):
    @classmethod
    def for_id(cls, founder_id: str) -> ProfileNotFoundError:
        return cls(
            error=f"Founder '{founder_id}' not found",
            error_type=ErrorType.STORE,
            service="profile_store",
            suggestion="Verify the founder id",
            context={"founder_id": founder_id},
        )


class TransientServiceError(Exception):
    """Raised by service adapters for failures worth one more attempt."""


def is_transient(exc: BaseException) -> bool:
    return isinstance(exc, (TransientServiceError, TimeoutError, ConnectionError))
