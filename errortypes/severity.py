# errortypes/severity.py
"""
Severity model for error values.

An error may declare how bad it is by exposing a ``severity()`` method
(or a ``severity`` attribute holding a Severity member). Anything that
does not is unclassified and counts as FATAL: an unknown error must never
be silently downgraded to a warning.

No side effects on import.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class Severity(IntEnum):
    """
    Error severity.

    - FATAL: processing must halt
    - WARNING: non-halting, log and continue
    """
    FATAL = 1
    WARNING = 2


@runtime_checkable
class ClassifiableError(Protocol):
    """Error that reports its own severity. Message comes from str(error)."""

    def severity(self) -> Severity:
        ...


def _reported_severity(error: Any) -> Any:
    """Return the severity the error declares, or None when it declares none."""
    try:
        attr = getattr(error, "severity")
    except Exception:
        return None

    if callable(attr):
        try:
            reported = attr()
        except Exception:
            logger.warning(
                "severity() of %s raised, treating as unclassified",
                type(error).__name__,
                exc_info=True,
            )
            return None
        # Future integer members pass through unclamped, anything else is unknown
        return reported if isinstance(reported, int) else None
    if isinstance(attr, Severity):
        return attr
    return None


def classify(error: Any) -> Severity:
    """
    Classify a single error value.

    Classified errors get whatever they report, unchanged. Everything else
    is FATAL.
    """
    reported = _reported_severity(error)
    if reported is not None:
        return reported

    logger.debug(
        "Unclassified error %s treated as FATAL: %s",
        type(error).__name__,
        error,
    )
    return Severity.FATAL


def is_fatal(error: Any) -> bool:
    return classify(error) == Severity.FATAL


def is_warning(error: Any) -> bool:
    return classify(error) == Severity.WARNING
