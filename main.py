#!/usr/bin/env python3
# ABOUTME: Command-line entry point for translating text files.
# ABOUTME: Uses the Google Translate API with rate-limit aware retries.

from translingo.cli import TranslatorCLI


def main() -> None:
    """Main entry point for the translator CLI."""
    TranslatorCLI.run()


if __name__ == "__main__":
    main()
