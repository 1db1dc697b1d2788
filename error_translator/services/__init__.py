"""Services package — the error translation engine."""

from error_translator.services.translator import (
    ErrorTranslator,
    get_translator,
    translate_error,
)

__all__ = [
    "ErrorTranslator",
    "get_translator",
    "translate_error",
]
