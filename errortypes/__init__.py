# errortypes/__init__.py
"""
errortypes - severity triage for batches of errors

Decide whether a batch of accumulated errors should halt processing
(FATAL) or merely be logged (WARNING).

Basic usage:
    >>> from errortypes import Severity, contains_fatal_error, warning_only
    >>> class StaleCache(Exception):
    ...     def severity(self):
    ...         return Severity.WARNING
    >>> errs = [StaleCache("cache is 5m old"), ValueError("bad input")]
    >>> contains_fatal_error(errs)  # ValueError declares nothing -> FATAL
    True
    >>> [str(e) for e in warning_only(errs)]
    ['cache is 5m old']
"""

__version__ = "0.1.0"

from .severity import Severity, ClassifiableError, classify, is_fatal, is_warning
from .filters import (
    contains_fatal_error,
    first_fatal_error,
    fatal_only,
    warning_only,
    partition,
)

__all__ = [
    # Version
    "__version__",

    # Severity model
    "Severity",
    "ClassifiableError",
    "classify",
    "is_fatal",
    "is_warning",

    # Queries
    "contains_fatal_error",
    "first_fatal_error",
    "fatal_only",
    "warning_only",
    "partition",
]
