#!/usr/bin/env python3
# ABOUTME: Language code utilities for handling ISO-639 language codes.
# ABOUTME: Normalizes user-supplied language names or codes for the API.

import re
from typing import Dict, Optional

import pycountry

# Matches codes the API accepts as-is, e.g. "es", "haw", "zh-TW", "pt-BR"
LANGUAGE_CODE_PATTERN = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z]{2,4})?$")


class LanguageHandler:
    """Language code utilities for handling ISO-639 language codes."""

    # Direct lookup for common language names and variations
    LANGUAGE_CODES: Dict[str, str] = {
        "chinese": "zh",
        "mandarin": "zh",
        "simplified chinese": "zh-CN",
        "traditional chinese": "zh-TW",
        "spanish": "es",
        "español": "es",
        "english": "en",
        "hindi": "hi",
        "arabic": "ar",
        "portuguese": "pt",
        "brazilian": "pt",
        "bengali": "bn",
        "russian": "ru",
        "japanese": "ja",
        "punjabi": "pa",
        "german": "de",
        "deutsch": "de",
        "javanese": "jv",
        "korean": "ko",
        "french": "fr",
        "français": "fr",
        "turkish": "tr",
        "vietnamese": "vi",
        "thai": "th",
        "italian": "it",
        "italiano": "it",
        "persian": "fa",
        "farsi": "fa",
        "polish": "pl",
        "polski": "pl",
        "romanian": "ro",
        "dutch": "nl",
        "greek": "el",
        "czech": "cs",
        "swedish": "sv",
        "hebrew": "he",
        "danish": "da",
        "finnish": "fi",
        "hungarian": "hu",
        "norwegian": "no",
    }

    @classmethod
    def is_language_code(cls, value: str) -> bool:
        """Check whether a value already looks like an API language code."""
        if not LANGUAGE_CODE_PATTERN.match(value):
            return False
        primary = value.split("-", 1)[0].lower()
        lookup = {"alpha_2": primary} if len(primary) == 2 else {"alpha_3": primary}
        return pycountry.languages.get(**lookup) is not None

    @classmethod
    def get_language_code(cls, language: str) -> Optional[str]:
        """Convert a language name or code to the code sent to the API.

        Codes such as "es" or "zh-TW" are returned unchanged, and three-letter
        codes with a two-letter equivalent are shortened to it. Names are
        looked up first in LANGUAGE_CODES, then by exact name in pycountry.

        Args:
            language: Language name ("Spanish") or code ("es")

        Returns:
            The language code, or None if the language is not recognized
        """
        value = language.strip()
        if cls.is_language_code(value):
            primary, _, region = value.partition("-")
            if len(primary) == 3:
                # Google expects ISO-639-1 where one exists (spa -> es).
                lang = pycountry.languages.get(alpha_3=primary.lower())
                alpha_2 = getattr(lang, "alpha_2", None)
                if alpha_2:
                    return f"{alpha_2}-{region}" if region else alpha_2
            return value

        # Normalize input: lowercase and collapse non-letter characters
        normalized = re.sub(r"[^\w]+", " ", value.lower()).strip()

        if normalized in cls.LANGUAGE_CODES:
            return cls.LANGUAGE_CODES[normalized]

        lang = pycountry.languages.get(name=normalized.title())
        if lang is not None:
            return getattr(lang, "alpha_2", None) or lang.alpha_3

        return None
