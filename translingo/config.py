#!/usr/bin/env python3
# ABOUTME: Runtime configuration for a translation run.
# ABOUTME: Locates the API key in the environment or in .env files.

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from translingo.client import DEFAULT_TIMEOUT

API_KEY_ENV_VAR = "GOOGLE_TRANSLATE_API_KEY"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


@dataclass(frozen=True)
class TranslatorConfig:
    """Everything one run of the CLI needs."""

    input_path: str
    output_path: str
    target_language: str
    api_key: str
    source_language: Optional[str] = None
    verbose: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self):
        return (
            f"TranslatorConfig(input_path={self.input_path!r}, "
            f"output_path={self.output_path!r}, "
            f"target_language={self.target_language!r}, "
            f"source_language={self.source_language!r}, "
            f"verbose={self.verbose!r}, timeout={self.timeout!r}, api_key='***')"
        )


def get_config_paths() -> List[str]:
    """Get a list of possible .env file paths in order of precedence."""
    home_dir = os.path.expanduser("~")
    return [
        os.path.join(os.getcwd(), ".env"),
        os.path.join(home_dir, ".translingo", ".env"),
        os.path.join(home_dir, ".config", "translingo", ".env"),
    ]


def load_environment() -> None:
    """Load .env files without overriding variables already set.

    Earlier paths win because load_dotenv never overrides by default.
    """
    for env_path in get_config_paths():
        if os.path.exists(env_path):
            load_dotenv(env_path)


def find_api_key(explicit_key: Optional[str] = None) -> Optional[str]:
    """Find the Google Translate API key.

    Looks in the following locations (in order of precedence):
    1. The explicit value (the --api-key option)
    2. The GOOGLE_TRANSLATE_API_KEY environment variable
    3. .env file in the current working directory
    4. .env file in ~/.translingo/
    5. .env file in ~/.config/translingo/
    """
    if explicit_key:
        return explicit_key

    api_key = os.getenv(API_KEY_ENV_VAR)
    if api_key:
        return api_key

    load_environment()
    return os.getenv(API_KEY_ENV_VAR) or None
