"""
Allow-list validation for tracker queries.
"""

from __future__ import annotations

import re

QUERY_PATTERN = re.compile(r"[A-Za-z0-9\s/-]*")
INVALID_QUERY_MESSAGE = (
    "Invalid characters detected. Only letters, numbers, spaces, '/' and '-' are permitted."
)
EMPTY_QUERY_MESSAGE = "Enter a CNR, case number, or party name to search."


class QueryValidationError(ValueError):
    """Raised when a query must not be dispatched to the gateway."""


def validate_query(value: str) -> str | None:
    """Return the error message for ``value``, or None when it is acceptable.

    The empty string passes; emptiness is checked by :func:`require_query`.
    """
    if QUERY_PATTERN.fullmatch(value) is None:
        return INVALID_QUERY_MESSAGE
    return None


def is_valid_query(value: str) -> bool:
    return validate_query(value) is None


def require_query(value: str) -> str:
    """Final check before dispatch; returns the query untouched."""
    if not value or not value.strip():
        raise QueryValidationError(EMPTY_QUERY_MESSAGE)
    message = validate_query(value)
    if message:
        raise QueryValidationError(message)
    return value
