#!/usr/bin/env python3
# ABOUTME: Exception hierarchy for translation failures.
# ABOUTME: Each error type maps to one layer of the API-call pipeline.

from typing import Optional


class TranslatorError(Exception):
    """Base exception for all translation failures."""


class ConfigurationError(TranslatorError):
    """Bad configuration: missing API key, malformed endpoint URL, etc.

    Never retried - fix the configuration first.
    """


class TransportError(TranslatorError):
    """Network-level failure (connection refused, DNS, timeout)."""


class ApiError(TranslatorError):
    """The API answered with a non-2xx HTTP status.

    Attributes:
        status: Numeric HTTP status code
        body: Response body text, verbatim
    """

    def __init__(self, status: int, body: str, reason: Optional[str] = None):
        self.status = status
        self.body = body
        self.reason = reason
        status_text = f"{status} {reason}" if reason else str(status)
        super().__init__(
            f"Translation API request failed with status {status_text}: {body}"
        )


class DecodeError(TranslatorError):
    """The response body was not valid JSON or lacked required fields."""


class EmptyResultError(TranslatorError):
    """A well-formed response contained no translations."""

    def __init__(self, message: str = "No translation returned from API"):
        super().__init__(message)
