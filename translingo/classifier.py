#!/usr/bin/env python3
# ABOUTME: Decides whether a failed translation call is worth retrying.
# ABOUTME: Only rate-limit and quota responses from the API are retryable.

import json
from enum import Enum
from typing import List

from translingo.errors import ApiError

RETRYABLE_STATUS_CODES = frozenset({403, 429})

# Case-insensitive markers of a rate-limit or quota response body
RETRYABLE_MARKERS = ("rate limit", "ratelimit", "userrate", "quota")

# Google API error reasons that signal quota exhaustion
RETRYABLE_REASONS = frozenset(
    {
        "ratelimitexceeded",
        "userratelimitexceeded",
        "dailylimitexceeded",
        "quotaexceeded",
        "resource_exhausted",
    }
)


class FailureKind(str, Enum):
    """Outcome of classifying a failure."""

    RETRYABLE = "retryable"
    TERMINAL = "terminal"


def _error_fields(body: str) -> List[str]:
    """Pull the message, status and reason fields out of a Google error body.

    Falls back to the raw body when it is not the JSON error schema.
    """
    try:
        data = json.loads(body)
    except ValueError:
        return [body]

    error = data.get("error") if isinstance(data, dict) else None
    if not isinstance(error, dict):
        return [body]

    fields = [error.get("message"), error.get("status")]
    details = error.get("errors")
    if isinstance(details, list):
        for detail in details:
            if isinstance(detail, dict):
                fields.extend([detail.get("message"), detail.get("reason")])
    return [str(value) for value in fields if value]


def classify(error: BaseException) -> FailureKind:
    """Classify a failure as retryable or terminal.

    Matching is done on the structured fields of an ``ApiError``: its
    numeric status code and its parsed error body. Transport, decode and
    empty-result errors are always terminal, whatever their message says.
    """
    if not isinstance(error, ApiError):
        return FailureKind.TERMINAL

    if error.status in RETRYABLE_STATUS_CODES:
        return FailureKind.RETRYABLE

    for value in _error_fields(error.body):
        lowered = value.lower()
        if lowered in RETRYABLE_REASONS:
            return FailureKind.RETRYABLE
        if any(marker in lowered for marker in RETRYABLE_MARKERS):
            return FailureKind.RETRYABLE

    return FailureKind.TERMINAL


def is_retryable(error: BaseException) -> bool:
    """Return True if ``error`` is a transient rate-limit or quota failure."""
    return classify(error) is FailureKind.RETRYABLE
