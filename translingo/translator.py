#!/usr/bin/env python3
# ABOUTME: Core translation entry point for the Google Translate API.
# ABOUTME: Combines the transport client with rate-limit retries and progress output.

import time
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from translingo.client import TranslationClient
from translingo.models import TranslateRequest, TranslationResult
from translingo.retry import RetryPolicy, call_with_retry

console = Console()


class Translator:
    """Translate text through the Google Translate v2 API.

    Rate-limit and quota failures are retried with capped exponential
    backoff (1s, 2s, 4s, 8s, 16s). Any other failure is raised to the
    caller unchanged. Retry state is local to each ``translate`` call, so
    one instance can be reused for many calls.
    """

    def __init__(
        self,
        client: TranslationClient,
        policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the translator.

        Args:
            client: Transport client holding the API key
            policy: Backoff settings (defaults to 5 retries, 1s to 32s)
            sleep: Blocking wait used between retries
        """
        self.client = client
        self.policy = policy or RetryPolicy()
        self._sleep = sleep

    @classmethod
    def from_api_key(cls, api_key: str, **client_options) -> "Translator":
        """Build a translator with a fresh client for ``api_key``."""
        return cls(TranslationClient(api_key, **client_options))

    def translate(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None,
        verbose: bool = False,
    ) -> TranslationResult:
        """Translate text into the target language.

        Args:
            text: The text to translate
            target_language: Target language code, e.g. "es"
            source_language: Source language code, or None to auto-detect
            verbose: If True, print progress and retry notices

        Returns:
            The translated text and the detected source language, if any

        Raises:
            ConfigurationError: If the endpoint URL is unusable
            TransportError: On network failures
            ApiError: On non-2xx responses, after retries for rate limits
            DecodeError: If the response body is malformed
            EmptyResultError: If the API returned no translations
        """
        request = TranslateRequest.create(text, target_language, source_language)

        if verbose:
            self._print_translation_info(source_language, target_language)

        on_retry = self._print_retry_notice if verbose else None
        response = call_with_retry(
            lambda: self.client.send(request),
            policy=self.policy,
            on_retry=on_retry,
            sleep=self._sleep,
        )
        result = response.first_result()

        if verbose:
            self._print_translation_complete(result)

        return result

    def _print_translation_info(
        self, source_language: Optional[str], target_language: str
    ) -> None:
        console.print("🌐 Sending translation request to Google Translate API...")
        console.print(f"   [dim]Endpoint:[/] {escape(self.client.redacted_url())}")
        if source_language:
            console.print(f"   Source language: {escape(source_language)}")
        else:
            console.print("   Source language: auto-detect")
        console.print(f"   Target language: {escape(target_language)}")

    def _print_retry_notice(self, delay: float, attempt: int, max_retries: int) -> None:
        console.print(
            f"   [bold yellow]⚠️  Rate limit exceeded.[/] Waiting {delay:g} seconds "
            f"before retry... (Attempt {attempt}/{max_retries})"
        )

    def _print_translation_complete(self, result: TranslationResult) -> None:
        if result.detected_source_language:
            console.print(
                f"   [green]✓[/] Detected source language: "
                f"{escape(result.detected_source_language)}"
            )
        console.print("   [green]✓[/] Translation complete")
        console.print()
