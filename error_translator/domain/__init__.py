"""Domain layer — enums, tagged failure signals, and custom exceptions."""

from error_translator.domain.enums import ErrorCategory, Severity
from error_translator.domain.errors import CatalogError, ConfigurationError
from error_translator.domain.signals import Failure, FailureSignal, Opaque, Text, tag_signal

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "ErrorCategory",
    "Failure",
    "FailureSignal",
    "Opaque",
    "Severity",
    "Text",
    "tag_signal",
]
