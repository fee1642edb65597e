# errortypes/filters.py
"""
Queries over an ordered batch of errors.

All functions are read-only: the input is never mutated or retained, and
list results are always new lists in input order.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from .severity import Severity, classify


def contains_fatal_error(errors: Iterable[Any]) -> bool:
    """True if at least one error classifies as FATAL."""
    return any(classify(err) == Severity.FATAL for err in errors)


def first_fatal_error(errors: Iterable[Any]) -> Optional[Any]:
    """
    Return the first FATAL error in sequence order, or None.

    The returned object is the element itself (identity preserved), so two
    equal errors at different positions are told apart by position.
    """
    for err in errors:
        if classify(err) == Severity.FATAL:
            return err
    return None


def fatal_only(errors: Iterable[Any]) -> List[Any]:
    """Stable filter keeping FATAL errors, including unclassified ones."""
    return [err for err in errors if classify(err) == Severity.FATAL]


def warning_only(errors: Iterable[Any]) -> List[Any]:
    """Stable filter keeping WARNING errors. Unclassified errors never match."""
    return [err for err in errors if classify(err) == Severity.WARNING]


def partition(errors: Iterable[Any]) -> Tuple[List[Any], List[Any]]:
    """
    Split errors into (fatal, warning) in one pass.

    Equivalent to (fatal_only(errors), warning_only(errors)). A classified
    error reporting some other value lands in neither list.
    """
    fatal: List[Any] = []
    warning: List[Any] = []
    for err in errors:
        severity = classify(err)
        if severity == Severity.FATAL:
            fatal.append(err)
        elif severity == Severity.WARNING:
            warning.append(err)
    return fatal, warning
