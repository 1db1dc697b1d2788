"""Models package — error catalog and schemas."""

from error_translator.models.catalog import CatalogEntry, ErrorCatalog, default_catalog
from error_translator.models.schemas import (
    BatchTranslateRequest,
    BatchTranslationResponse,
    CatalogResponse,
    HealthResponse,
    NormalizedError,
    TranslateRequest,
    TranslationResponse,
)

__all__ = [
    "BatchTranslateRequest",
    "BatchTranslationResponse",
    "CatalogEntry",
    "CatalogResponse",
    "ErrorCatalog",
    "HealthResponse",
    "NormalizedError",
    "TranslateRequest",
    "TranslationResponse",
    "default_catalog",
]
