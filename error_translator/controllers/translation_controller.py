"""Translation Controller (Controller Layer)."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict

from error_translator.models.schemas import (
    BatchTranslateRequest,
    BatchTranslationResponse,
    CatalogResponse,
    HealthResponse,
    TranslateRequest,
    TranslationResponse,
)
from error_translator.services.translator import ErrorTranslator, get_translator

logger = logging.getLogger(__name__)


class TranslationController:
    """Applies presentation policy (diagnostics visibility) around the translator."""

    def __init__(self, settings: Any = None, translator: ErrorTranslator | None = None) -> None:
        if settings is None:
            from config import get_settings

            settings = get_settings()

        self._settings = settings
        self._translator = translator or get_translator()

    @property
    def environment(self) -> str:
        return self._settings.environment

    @property
    def show_technical_details(self) -> bool:
        return bool(self._settings.show_technical_details)

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            environment=self.environment,
            catalog_size=len(self._translator.catalog),
        )

    def get_catalog(self) -> CatalogResponse:
        entries = list(self._translator.catalog)
        return CatalogResponse(entries=entries, count=len(entries))

    def translate(self, request: TranslateRequest) -> TranslationResponse:
        return TranslationResponse(result=self.translate_value(request.error))

    def batch_translate(self, request: BatchTranslateRequest) -> BatchTranslationResponse:
        results = [self.translate_value(value) for value in request.errors]
        by_category = Counter(result["type"] for result in results)
        return BatchTranslationResponse(
            results=results,
            total=len(results),
            by_category=dict(by_category),
        )

    def translate_value(self, value: Any) -> Dict[str, Any]:
        """Translate one value into its public payload."""
        record = self._translator.translate(value)
        logger.debug(
            "Translated failure into %s/%s",
            record.type.value,
            record.severity.value,
        )
        return record.to_public_dict(include_technical_details=self.show_technical_details)
