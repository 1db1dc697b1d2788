"""Pydantic schemas (Model Layer).

``NormalizedError`` is the translator's only output type; the remaining
models shape the HTTP request/response payloads around it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from error_translator.domain.enums import ErrorCategory, Severity
from error_translator.models.catalog import CatalogEntry

# ── Base ──────────────────────────────────────────────────


class TimestampedModel(BaseModel):
    """Shared model base with auto-generated timestamp."""

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


# ── Value objects ─────────────────────────────────────────


class NormalizedError(BaseModel):
    """User-facing error record produced for every translated failure.

    Serialises with camelCase keys (``actionableStep``, ``technicalDetails``)
    for presentation consumers. ``technical_details`` carries raw diagnostic
    text and must only be shown in development/debug contexts.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    message: str
    type: ErrorCategory
    severity: Severity
    actionable_step: Optional[str] = None
    technical_details: Optional[str] = None

    @field_validator("message")
    @classmethod
    def message_must_not_be_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message must not be empty")
        return value

    def to_public_dict(self, include_technical_details: bool = False) -> Dict[str, Any]:
        """Return the camelCase payload, hiding diagnostics unless asked."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not include_technical_details:
            data.pop("technicalDetails", None)
        return data


# ── Requests ──────────────────────────────────────────────


class TranslateRequest(BaseModel):
    """Single failure to translate; ``error`` may be any JSON value."""

    error: Any


class BatchTranslateRequest(BaseModel):
    """Several failures to translate in one call."""

    errors: List[Any]

    @field_validator("errors")
    @classmethod
    def errors_must_not_be_empty(cls, values: List[Any]) -> List[Any]:
        if not values:
            raise ValueError("Errors list must not be empty")
        return values


# ── Responses ─────────────────────────────────────────────


class TranslationResponse(TimestampedModel):
    """Single translation result."""

    result: Dict[str, Any]


class BatchTranslationResponse(TimestampedModel):
    """Batch translation results."""

    results: List[Dict[str, Any]]
    total: int
    by_category: Dict[str, int] = Field(default_factory=dict)


class CatalogResponse(BaseModel):
    """Ordered catalog export."""

    entries: List[CatalogEntry] = Field(default_factory=list)
    count: int = 0


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    environment: str
    catalog_size: int = 0
    version: str = "1.0.0"
