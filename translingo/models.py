#!/usr/bin/env python3
# ABOUTME: Request and response models for the Google Translate v2 API.
# ABOUTME: Handles the JSON wire shape and the domain result handed to callers.

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from translingo.errors import DecodeError, EmptyResultError

TEXT_FORMAT = "text"


@dataclass(frozen=True)
class TranslateRequest:
    """Outbound translation request.

    ``source_language`` of None means the API should auto-detect the
    source language. ``format`` is always plain text.
    """

    text: str
    target_language: str
    source_language: Optional[str] = None
    format: str = field(default=TEXT_FORMAT, init=False)

    def __post_init__(self):
        if not self.text:
            raise ValueError("text must not be empty")
        if not self.target_language:
            raise ValueError("target_language must not be empty")

    @classmethod
    def create(
        cls, text: str, target_language: str, source_language: Optional[str] = None
    ) -> "TranslateRequest":
        """Build a request from caller arguments."""
        return cls(
            text=text, target_language=target_language, source_language=source_language
        )

    def to_payload(self) -> Dict[str, str]:
        """Serialize to the JSON body sent to the API.

        The ``source`` key is left out entirely when no source language
        is given; the API treats a missing source differently from an
        empty one.
        """
        payload = {
            "q": self.text,
            "target": self.target_language,
            "format": self.format,
        }
        if self.source_language is not None:
            payload["source"] = self.source_language
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "TranslateRequest":
        """Rebuild a request from a serialized payload."""
        try:
            return cls(
                text=payload["q"],
                target_language=payload["target"],
                source_language=payload.get("source"),
            )
        except KeyError as e:
            raise DecodeError(f"Request payload is missing field {e}") from e


@dataclass(frozen=True)
class TranslationResult:
    """Translated text plus the source language the API detected, if any."""

    translated_text: str
    detected_source_language: Optional[str] = None


@dataclass(frozen=True)
class Translation:
    """One entry of the ``data.translations`` list."""

    translated_text: str
    detected_source_language: Optional[str] = None

    @classmethod
    def from_dict(cls, entry: Any) -> "Translation":
        if not isinstance(entry, dict) or not isinstance(
            entry.get("translatedText"), str
        ):
            raise DecodeError("Translation entry is missing 'translatedText'")
        detected = entry.get("detectedSourceLanguage")
        return cls(
            translated_text=entry["translatedText"],
            detected_source_language=detected if isinstance(detected, str) else None,
        )


@dataclass(frozen=True)
class TranslateResponse:
    """Parsed success body of the translate endpoint."""

    translations: List[Translation]

    @classmethod
    def from_dict(cls, data: Any) -> "TranslateResponse":
        """Parse the ``{"data": {"translations": [...]}}`` mapping.

        Raises:
            DecodeError: If the mapping does not have the expected shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
            raise DecodeError("Failed to parse translation response: missing 'data'")
        entries = data["data"].get("translations")
        if not isinstance(entries, list):
            raise DecodeError(
                "Failed to parse translation response: missing 'translations'"
            )
        return cls(translations=[Translation.from_dict(entry) for entry in entries])

    @classmethod
    def from_json(cls, body: str) -> "TranslateResponse":
        """Parse a raw JSON response body."""
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Failed to parse translation response: {e}") from e
        return cls.from_dict(data)

    def first_result(self) -> TranslationResult:
        """Return the first translation as a domain result.

        Raises:
            EmptyResultError: If the API returned no translations
        """
        if not self.translations:
            raise EmptyResultError()
        first = self.translations[0]
        return TranslationResult(
            translated_text=first.translated_text,
            detected_source_language=first.detected_source_language,
        )
