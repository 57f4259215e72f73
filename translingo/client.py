#!/usr/bin/env python3
# ABOUTME: HTTP transport for the Google Translate v2 API.
# ABOUTME: Sends exactly one request per call and turns failures into typed errors.

import logging
from typing import Optional
from urllib.parse import urlencode, urlsplit

import requests

from translingo.errors import (
    ApiError,
    ConfigurationError,
    EmptyResultError,
    TransportError,
)
from translingo.models import TranslateRequest, TranslateResponse

logger = logging.getLogger(__name__)

TRANSLATE_API_URL = "https://translation.googleapis.com/language/translate/v2"
DEFAULT_TIMEOUT = 30.0
REDACTED = "***"


class TranslationClient:
    """Single-shot client for the translate endpoint.

    The API key is passed as the ``key`` query parameter on every request.
    It is set once at construction and never shows up in reprs, log
    records or error messages produced by this class.

    Retries are not handled here; see ``translingo.retry``.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = TRANSLATE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Google Cloud API key
            endpoint: Translate endpoint base URL
            timeout: Per-request timeout in seconds
            session: Optional pre-built requests session

        Raises:
            ConfigurationError: If the API key is empty
        """
        if not api_key:
            raise ConfigurationError("Google Translate API key is required")
        self._api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session or requests.Session()

    def __repr__(self):
        return f"TranslationClient(endpoint={self.endpoint!r}, api_key={REDACTED!r})"

    def __enter__(self) -> "TranslationClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def build_url(self) -> str:
        """Return the endpoint URL with the API key attached.

        Raises:
            ConfigurationError: If the endpoint is not an absolute http(s) URL
        """
        parts = urlsplit(self.endpoint)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"Failed to parse API URL: {self.endpoint}")
        separator = "&" if parts.query else "?"
        return f"{self.endpoint}{separator}{urlencode({'key': self._api_key})}"

    def redacted_url(self) -> str:
        """Return the request URL with the API key masked."""
        return self.redact(self.build_url())

    def redact(self, text: str) -> str:
        """Mask every occurrence of the API key in ``text``."""
        text = text.replace(urlencode({"key": self._api_key}), f"key={REDACTED}")
        return text.replace(self._api_key, REDACTED)

    def send(self, request: TranslateRequest) -> TranslateResponse:
        """POST one translation request and parse the reply.

        Args:
            request: The request to send

        Returns:
            The parsed response, guaranteed to hold at least one translation

        Raises:
            ConfigurationError: If the endpoint URL is unusable
            TransportError: On connection, DNS or timeout failures
            ApiError: If the API answers with a non-2xx status
            DecodeError: If the body is not a valid translate response
            EmptyResultError: If the response lists no translations
        """
        url = self.build_url()
        logger.debug("POST %s", self.redact(url))

        try:
            response = self._session.post(
                url,
                json=request.to_payload(),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
        ) as e:
            raise ConfigurationError(
                f"Invalid API URL: {self.redact(str(e))}"
            ) from e
        except requests.RequestException as e:
            raise TransportError(
                f"Failed to send translation request: {self.redact(str(e))}"
            ) from e

        logger.debug("Response status %s", response.status_code)
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, response.text, response.reason)

        parsed = TranslateResponse.from_json(response.text)
        if not parsed.translations:
            raise EmptyResultError()
        return parsed
