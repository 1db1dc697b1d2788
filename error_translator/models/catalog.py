"""Ordered catalog of known transaction result codes.

Codes come from the Stellar / Soroban transaction pipeline
(https://developers.stellar.org/docs/data/rpc/api-reference/get-transaction#result-codes).
Upstream diagnostics embed a code somewhere inside longer text, so an entry
matches when its code appears anywhere in the text, ignoring case. Entries
are tried in declared order and the first hit wins.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from error_translator.domain.errors import CatalogError


class CatalogEntry(BaseModel):
    """A single known failure code with its user-facing wording."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    action: Optional[str] = None

    @field_validator("code", "message")
    @classmethod
    def must_not_be_blank(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Catalog fields must not be empty")
        return normalized

    def matches(self, lowered_text: str) -> bool:
        return self.code.lower() in lowered_text


class ErrorCatalog:
    """Read-only, ordered list of catalog entries."""

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        ordered = tuple(entries)
        seen: set[str] = set()
        for entry in ordered:
            key = entry.code.lower()
            if key in seen:
                raise CatalogError(f"Duplicate catalog code '{entry.code}'")
            seen.add(key)
        self._entries: Tuple[CatalogEntry, ...] = ordered

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(entry.code for entry in self._entries)

    def get(self, code: str) -> Optional[CatalogEntry]:
        """Exact, case-insensitive lookup by code."""
        wanted = code.strip().lower()
        for entry in self._entries:
            if entry.code.lower() == wanted:
                return entry
        return None

    def match(self, text: str) -> Optional[CatalogEntry]:
        """Return the first entry whose code occurs in ``text``, if any."""
        lowered = text.lower()
        for entry in self._entries:
            if entry.matches(lowered):
                return entry
        return None


STELLAR_RESULT_CODES: Tuple[CatalogEntry, ...] = (
    CatalogEntry(
        code="tx_bad_auth",
        message="Transaction authentication failed.",
        action="Please verify your wallet connection and try again.",
    ),
    CatalogEntry(
        code="tx_insufficient_balance",
        message="Insufficient XLM to pay for transaction fees.",
        action="Add more XLM to your account and try again.",
    ),
    CatalogEntry(
        code="tx_too_late",
        message="Transaction expired.",
        action="The network was too busy. Please try again.",
    ),
    CatalogEntry(
        code="tx_not_supported",
        message="Transaction version not supported.",
        action="Please update your wallet or try a different one.",
    ),
    CatalogEntry(
        code="tx_bad_seq",
        message="Outdated account sequence number.",
        action="Refresh the page and try again.",
    ),
    CatalogEntry(
        code="op_underfunded",
        message="Insufficient funds to complete this operation.",
        action="Verify your token balances and try again.",
    ),
    CatalogEntry(
        code="op_no_destination",
        message="Destination account does not exist.",
        action="Ensure the worker address is valid and funded.",
    ),
    CatalogEntry(
        code="op_cross_self",
        message="Cannot stream tokens to yourself.",
        action="Enter a different worker address.",
    ),
)

_DEFAULT_CATALOG = ErrorCatalog(STELLAR_RESULT_CODES)


def default_catalog() -> ErrorCatalog:
    """Return the process-wide catalog of Stellar result codes."""
    return _DEFAULT_CATALOG
