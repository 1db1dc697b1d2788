"""Domain enums used across all layers."""

from enum import Enum


class ErrorCategory(str, Enum):
    """Origin of a failure, independent of its message text."""

    NETWORK = "NETWORK"
    CONTRACT = "CONTRACT"
    VALIDATION = "VALIDATION"
    WALLET = "WALLET"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_string(cls, value: str) -> "ErrorCategory":
        try:
            return cls(value.upper().strip())
        except ValueError:
            raise ValueError(
                f"Invalid error category '{value}'. "
                f"Choose from: {[e.value for e in cls]}"
            )


class Severity(str, Enum):
    """Presentation urgency of a translated error."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def is_blocking(self) -> bool:
        return self is Severity.ERROR
