#!/usr/bin/env python3
# ABOUTME: Tests for the failure classifier.
# ABOUTME: Verifies which API failures are treated as retryable.

import json

import pytest

from translingo.classifier import FailureKind, classify, is_retryable
from translingo.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    EmptyResultError,
    TransportError,
)


def google_error(code, message, reason=None, status=None):
    error = {"code": code, "message": message}
    if reason:
        error["errors"] = [{"message": message, "domain": "usageLimits", "reason": reason}]
    if status:
        error["status"] = status
    return json.dumps({"error": error})


@pytest.mark.parametrize("status", [403, 429])
def test_rate_limit_status_codes_are_retryable(status):
    """Test 403 and 429 responses are retried regardless of body."""
    assert classify(ApiError(status, "")) is FailureKind.RETRYABLE


@pytest.mark.parametrize(
    "body",
    [
        google_error(400, "User Rate Limit Exceeded", "userRateLimitExceeded"),
        google_error(400, "Daily Limit Exceeded", "dailyLimitExceeded"),
        google_error(400, "Something", status="RESOURCE_EXHAUSTED"),
        google_error(503, "Quota exceeded for quota metric"),
        "RATE LIMIT hit, slow down",
        "userRateLimit",
    ],
)
def test_quota_bodies_are_retryable(body):
    """Test rate-limit and quota markers in the error body are retried."""
    assert is_retryable(ApiError(400, body))


@pytest.mark.parametrize(
    "status,body",
    [
        (400, google_error(400, "Invalid Value", "invalid")),
        (401, "Unauthorized"),
        (404, "Not Found"),
        (500, "Internal Server Error"),
        (503, "Service Unavailable"),
    ],
)
def test_other_api_errors_are_terminal(status, body):
    """Test other HTTP failures propagate immediately."""
    assert classify(ApiError(status, body)) is FailureKind.TERMINAL


def test_transport_error_mentioning_429_is_terminal():
    """Test a network error whose text contains 429 is not retried."""
    error = TransportError("Failed to connect to proxy.example.com:4290 (quota)")
    assert classify(error) is FailureKind.TERMINAL


def test_api_error_with_403_in_body_only_is_terminal():
    """Test a stray 403 in a 400 body does not trigger a retry."""
    assert not is_retryable(ApiError(400, "request id 403-abc is invalid"))


@pytest.mark.parametrize(
    "error",
    [
        DecodeError("Failed to parse translation response"),
        EmptyResultError(),
        ConfigurationError("Failed to parse API URL"),
        ValueError("429"),
    ],
)
def test_non_api_errors_are_terminal(error):
    """Test decode, empty-result and configuration errors are terminal."""
    assert classify(error) is FailureKind.TERMINAL


@pytest.mark.parametrize(
    "body",
    [
        '{"error": {"errors": 5}}',
        '{"error": {"errors": true, "message": "Invalid Value"}}',
        '{"error": {"errors": {"reason": "quotaExceeded"}}}',
    ],
)
def test_malformed_errors_field_is_terminal(body):
    """Test a non-list errors field is ignored instead of crashing."""
    assert classify(ApiError(400, body)) is FailureKind.TERMINAL


def test_malformed_errors_field_keeps_message():
    """Test the message is still matched when errors is malformed."""
    body = '{"error": {"errors": 5, "message": "Quota exceeded"}}'
    assert classify(ApiError(400, body)) is FailureKind.RETRYABLE
