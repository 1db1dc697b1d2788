"""Error translation engine.

Turns any failure signal (raw string, exception, unknown value) into exactly
one ``NormalizedError``. Rules are checked most actionable first and the first
rule that fires wins:

1. Text: catalog code, otherwise the text itself.
2. Failure: network, then user cancellation, then wallet, then catalog code,
   otherwise the exception message with its stack as diagnostics.
3. Opaque: a fixed generic record.

Matching is plain case-insensitive substring containment. An unrelated
message that happens to contain "wallet" or "fetch" is classified by that
word (a known precision trade-off).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Sequence

from error_translator.domain.enums import ErrorCategory, Severity
from error_translator.domain.signals import Failure, Opaque, Text, tag_signal
from error_translator.models.catalog import CatalogEntry, ErrorCatalog, default_catalog
from error_translator.models.schemas import NormalizedError

logger = logging.getLogger(__name__)

NETWORK_MARKERS: tuple[str, ...] = ("fetch", "network", "failed to fetch", "cors")
CANCELLATION_MARKERS: tuple[str, ...] = ("user rejected", "cancelled")
WALLET_MARKERS: tuple[str, ...] = ("freighter", "wallet")

UNEXPECTED_MESSAGE = "An unexpected error occurred."
UNEXPECTED_ACTION = "Refresh the page or contact support if this persists."


def _contains_any(haystack: str, needles: Sequence[str]) -> bool:
    return any(n in haystack for n in needles)


class ErrorTranslator:
    """Stateless translator bound to a read-only catalog."""

    def __init__(self, catalog: ErrorCatalog | None = None) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()

    @property
    def catalog(self) -> ErrorCatalog:
        return self._catalog

    def translate(self, value: Any) -> NormalizedError:
        """Translate ``value`` into a user-facing record. Never raises."""
        try:
            signal = tag_signal(value)
            if isinstance(signal, Text):
                return self._from_text(signal)
            if isinstance(signal, Failure):
                return self._from_failure(signal)
            if isinstance(signal, Opaque):
                return self._unexpected()
            raise TypeError(f"Unhandled failure signal {signal!r}")
        except Exception:
            logger.exception("Error translation failed; using generic record")
            return self._unexpected()

    # ── Rule 1: raw text ──────────────────────────────

    def _from_text(self, signal: Text) -> NormalizedError:
        entry = self._catalog.match(signal.text)
        if entry is not None:
            logger.debug("Text matched catalog code %s", entry.code)
            return self._from_entry(entry, details=signal.text)

        return NormalizedError(
            message=_passthrough(signal.text),
            type=ErrorCategory.UNKNOWN,
            severity=Severity.ERROR,
        )

    # ── Rule 2: exception-shaped failures ─────────────

    def _from_failure(self, signal: Failure) -> NormalizedError:
        lowered = signal.message.lower()

        if _contains_any(lowered, NETWORK_MARKERS):
            logger.debug("Failure classified as network error")
            return NormalizedError(
                message="Network connection error.",
                type=ErrorCategory.NETWORK,
                severity=Severity.ERROR,
                actionable_step="Check your internet connection and RPC settings.",
                technical_details=signal.message,
            )

        if _contains_any(lowered, CANCELLATION_MARKERS):
            logger.debug("Failure classified as user cancellation")
            return NormalizedError(
                message="Transaction cancelled.",
                type=ErrorCategory.WALLET,
                severity=Severity.WARNING,
                actionable_step="You'll need to sign the transaction to proceed.",
            )

        if _contains_any(lowered, WALLET_MARKERS):
            logger.debug("Failure classified as wallet error")
            return NormalizedError(
                message="Wallet communication error.",
                type=ErrorCategory.WALLET,
                severity=Severity.ERROR,
                actionable_step="Ensure your wallet extension is unlocked and active.",
                technical_details=signal.message,
            )

        entry = self._catalog.match(signal.message)
        if entry is not None:
            logger.debug("Failure matched catalog code %s", entry.code)
            return self._from_entry(entry, details=signal.message)

        return NormalizedError(
            message=_passthrough(signal.message),
            type=ErrorCategory.UNKNOWN,
            severity=Severity.ERROR,
            technical_details=signal.stack,
        )

    # ── Rule 3 and shared builders ────────────────────

    @staticmethod
    def _from_entry(entry: CatalogEntry, details: str) -> NormalizedError:
        return NormalizedError(
            message=entry.message,
            type=ErrorCategory.CONTRACT,
            severity=Severity.ERROR,
            actionable_step=entry.action,
            technical_details=details,
        )

    @staticmethod
    def _unexpected() -> NormalizedError:
        return NormalizedError(
            message=UNEXPECTED_MESSAGE,
            type=ErrorCategory.UNKNOWN,
            severity=Severity.ERROR,
            actionable_step=UNEXPECTED_ACTION,
        )


def _passthrough(message: str) -> str:
    # message must stay non-empty
    return message if message.strip() else UNEXPECTED_MESSAGE


@lru_cache(maxsize=1)
def get_translator() -> ErrorTranslator:
    """Return the process-wide translator over the default catalog."""
    return ErrorTranslator()


def translate_error(value: Any) -> NormalizedError:
    """Translate with the default Stellar catalog."""
    return get_translator().translate(value)
