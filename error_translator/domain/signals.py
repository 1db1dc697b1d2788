"""Tagged failure signals.

Whatever a caller hands to the translator is inspected exactly once, here,
and turned into one of three shapes:

- ``Text``: a raw string (usually a result code with surrounding prose).
- ``Failure``: something exception-shaped, with a textual message and an
  optional stack trace.
- ``Opaque``: anything else (``None``, numbers, containers, plain objects).

The matching logic only ever dispatches on these tags.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Failure:
    message: str
    stack: Optional[str] = None


@dataclass(frozen=True)
class Opaque:
    pass


FailureSignal = Union[Text, Failure, Opaque]


def tag_signal(value: Any) -> FailureSignal:
    """Tag an arbitrary value. Never raises; unreadable values are ``Opaque``."""
    try:
        return _tag(value)
    except Exception as exc:
        logger.debug("Could not inspect %s failure value: %s", type(value).__name__, exc)
        return Opaque()


def _tag(value: Any) -> FailureSignal:
    if isinstance(value, str):
        return Text(value)

    if isinstance(value, BaseException):
        return Failure(message=str(value), stack=_format_stack(value))

    if isinstance(value, Mapping):
        message = value.get("message")
        if isinstance(message, str):
            return Failure(message=message, stack=_text_or_none(value.get("stack")))
        return Opaque()

    message = getattr(value, "message", None)
    if isinstance(message, str):
        return Failure(message=message, stack=_text_or_none(getattr(value, "stack", None)))

    return Opaque()


def _format_stack(exc: BaseException) -> Optional[str]:
    if exc.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None
