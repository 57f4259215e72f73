#!/usr/bin/env python3
# ABOUTME: Tests for the HTTP transport client.
# ABOUTME: Verifies request construction and failure mapping with a mocked session.

import pytest
import requests

from helpers import TEST_API_KEY, make_response, success_body
from translingo.client import TRANSLATE_API_URL, TranslationClient
from translingo.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    EmptyResultError,
    TransportError,
)
from translingo.models import TranslateRequest


def test_requires_api_key():
    """Test an empty API key is rejected."""
    with pytest.raises(ConfigurationError):
        TranslationClient("")


def test_build_url(client):
    """Test the API key is attached as a query parameter."""
    url = client.build_url()
    assert url.startswith(TRANSLATE_API_URL)
    assert f"key={TEST_API_KEY}" in url


def test_redacted_url_hides_key(client):
    """Test the redacted URL never contains the key."""
    url = client.redacted_url()
    assert TEST_API_KEY not in url
    assert "key=***" in url


def test_repr_hides_key(client):
    """Test the client repr does not leak the key."""
    assert TEST_API_KEY not in repr(client)


def test_build_url_invalid_endpoint(mock_session):
    """Test a malformed endpoint is a configuration error."""
    client = TranslationClient(TEST_API_KEY, endpoint="not a url", session=mock_session)
    with pytest.raises(ConfigurationError):
        client.build_url()


def test_send_success(client, mock_session):
    """Test a successful request posts the JSON body and parses the reply."""
    mock_session.post.return_value = make_response(200, success_body("Hola", "en"))

    response = client.send(TranslateRequest.create("Hello", "es"))

    assert response.first_result().translated_text == "Hola"
    assert response.first_result().detected_source_language == "en"
    mock_session.post.assert_called_once()
    args, kwargs = mock_session.post.call_args
    assert args[0] == client.build_url()
    assert kwargs["json"] == {"q": "Hello", "target": "es", "format": "text"}
    assert kwargs["headers"] == {"Accept": "application/json"}
    assert kwargs["timeout"] == client.timeout


def test_send_with_source_language(client, mock_session):
    """Test the source language is sent when given."""
    mock_session.post.return_value = make_response(200, success_body())

    client.send(TranslateRequest.create("Hello", "es", "en"))

    assert mock_session.post.call_args.kwargs["json"]["source"] == "en"


def test_send_http_error(client, mock_session):
    """Test non-2xx responses become ApiError with status and body."""
    body = '{"error": {"code": 400, "message": "Invalid Value"}}'
    mock_session.post.return_value = make_response(400, body)

    with pytest.raises(ApiError) as exc_info:
        client.send(TranslateRequest.create("Hello", "es"))

    assert exc_info.value.status == 400
    assert exc_info.value.body == body
    assert "400" in str(exc_info.value)


@pytest.mark.parametrize(
    "status,body",
    [
        (302, "Moved"),
        (304, success_body("Hola")),
    ],
)
def test_send_redirect_status_is_api_error(client, mock_session, status, body):
    """Test 3xx replies are not treated as success, even with a valid body."""
    mock_session.post.return_value = make_response(status, body)

    with pytest.raises(ApiError) as exc_info:
        client.send(TranslateRequest.create("Hello", "es"))

    assert exc_info.value.status == status


def test_send_connection_error(client, mock_session):
    """Test network failures become TransportError without leaking the key."""
    mock_session.post.side_effect = requests.ConnectionError(
        f"Max retries exceeded with url: /v2?key={TEST_API_KEY}"
    )

    with pytest.raises(TransportError) as exc_info:
        client.send(TranslateRequest.create("Hello", "es"))

    assert TEST_API_KEY not in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_send_timeout(client, mock_session):
    """Test timeouts become TransportError."""
    mock_session.post.side_effect = requests.Timeout("read timed out")

    with pytest.raises(TransportError):
        client.send(TranslateRequest.create("Hello", "es"))


def test_send_invalid_url_error(client, mock_session):
    """Test requests URL errors become ConfigurationError."""
    mock_session.post.side_effect = requests.exceptions.InvalidURL("bad url")

    with pytest.raises(ConfigurationError):
        client.send(TranslateRequest.create("Hello", "es"))


def test_send_malformed_body(client, mock_session):
    """Test an unparseable body becomes DecodeError."""
    mock_session.post.return_value = make_response(200, "<html>oops</html>")

    with pytest.raises(DecodeError):
        client.send(TranslateRequest.create("Hello", "es"))


def test_send_empty_translations(client, mock_session):
    """Test an empty translation list becomes EmptyResultError."""
    mock_session.post.return_value = make_response(200, {"data": {"translations": []}})

    with pytest.raises(EmptyResultError):
        client.send(TranslateRequest.create("Hello", "es"))


def test_context_manager_closes_session(mock_session):
    """Test leaving the context closes the session."""
    with TranslationClient(TEST_API_KEY, session=mock_session):
        pass
    mock_session.close.assert_called_once()
