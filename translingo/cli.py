#!/usr/bin/env python3
# ABOUTME: Command-line interface for the translator.
# ABOUTME: Handles arguments, console output, and exit codes.

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from translingo import __version__
from translingo.client import DEFAULT_TIMEOUT
from translingo.config import API_KEY_ENV_VAR, TranslatorConfig, find_api_key
from translingo.errors import TranslatorError
from translingo.file_handler import FileHandler
from translingo.language import LanguageHandler
from translingo.log import setup_logging
from translingo.translator import Translator

console = Console()
error_console = Console(stderr=True)


def positive_float(value: str) -> float:
    """argparse type for strictly positive numbers of seconds."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if not number > 0 or number == float("inf"):
        raise argparse.ArgumentTypeError(f"must be a positive number of seconds: '{value}'")
    return number


class TranslatorCLI:
    """Command-line interface for the translator."""

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """Build the argument parser."""
        parser = argparse.ArgumentParser(
            prog="translingo",
            description="Translate text files to different languages using Google Translate.",
        )
        parser.add_argument(
            "-i", "--input", required=True, help="Path to the text file to translate"
        )
        parser.add_argument(
            "-o", "--output", required=True, help="Path to write the translation to"
        )
        parser.add_argument(
            "-l",
            "--output-language",
            required=True,
            help="Target language code or name (e.g. es, Spanish)",
        )
        parser.add_argument(
            "-s",
            "--source-language",
            help="Source language code or name (default: auto-detect)",
        )
        parser.add_argument(
            "--api-key",
            help=f"Google Translate API key (default: ${API_KEY_ENV_VAR})",
        )
        parser.add_argument(
            "--timeout",
            type=positive_float,
            default=DEFAULT_TIMEOUT,
            help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
        )
        parser.add_argument(
            "-v", "--verbose", action="store_true", help="Show detailed progress"
        )
        parser.add_argument(
            "--version", action="version", version=f"%(prog)s {__version__}"
        )
        return parser

    @classmethod
    def parse_arguments(cls, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Returns:
            Parsed arguments
        """
        return cls.build_parser().parse_args(argv)

    @staticmethod
    def _resolve_language(value: str, option: str) -> str:
        code = LanguageHandler.get_language_code(value)
        if code is None:
            error_console.print(
                f"[bold red]Error:[/] Unknown language for {option}: '{escape(value)}'"
            )
            sys.exit(1)
        return code

    @classmethod
    def build_config(cls, args: argparse.Namespace) -> TranslatorConfig:
        """Validate arguments and assemble the run configuration.

        Raises:
            SystemExit: If the API key is missing or a language is unknown
        """
        api_key = find_api_key(args.api_key)
        if not api_key:
            error_console.print(
                f"[bold red]Error:[/] {API_KEY_ENV_VAR} not found in environment "
                "variables or .env files."
            )
            error_console.print("Pass --api-key or set it in one of the following locations:")
            error_console.print(f"1. Environment variable: export {API_KEY_ENV_VAR}=your_api_key")
            error_console.print("2. Current directory .env file")
            error_console.print("3. ~/.translingo/.env file")
            error_console.print("4. ~/.config/translingo/.env file")
            sys.exit(1)

        source_language = None
        if args.source_language:
            source_language = cls._resolve_language(
                args.source_language, "--source-language"
            )

        return TranslatorConfig(
            input_path=args.input,
            output_path=args.output,
            target_language=cls._resolve_language(
                args.output_language, "--output-language"
            ),
            source_language=source_language,
            api_key=api_key,
            verbose=args.verbose,
            timeout=args.timeout,
        )

    @staticmethod
    def print_header(config: TranslatorConfig) -> None:
        if config.verbose:
            console.print("[bold]translingo - File Translation Tool[/]")
            console.print("=====================================")
            console.print(f"📄 Input:  {escape(config.input_path)}")
            console.print(f"📝 Output: {escape(config.output_path)}")
            console.print()

    @staticmethod
    def print_verbose(config: TranslatorConfig, message: str) -> None:
        if config.verbose:
            console.print(message)

    @classmethod
    def translate_file(cls, config: TranslatorConfig, translator: Translator) -> None:
        """Read the input file, translate it, and write the output file.

        The output file is only written after the translation succeeds.

        Raises:
            TranslatorError: If the translation fails
        """
        cls.print_verbose(config, "📖 Reading input file...")
        if not FileHandler.file_exists(config.input_path):
            error_console.print(
                f"[bold red]Error:[/] Input file '{escape(config.input_path)}' does not exist."
            )
            sys.exit(1)
        content = FileHandler.read_file(config.input_path)
        if not content.strip():
            error_console.print(
                f"[bold red]Error:[/] Input file '{escape(config.input_path)}' is empty."
            )
            sys.exit(1)
        size = FileHandler.get_file_size(config.input_path)
        cls.print_verbose(
            config, f"   [green]✓[/] Read {len(content):,} characters ({size:,} bytes)"
        )
        cls.print_verbose(config, "")

        result = translator.translate(
            content,
            config.target_language,
            config.source_language,
            verbose=config.verbose,
        )

        cls.print_verbose(config, "💾 Writing output file...")
        FileHandler.write_file(config.output_path, result.translated_text)
        cls.print_verbose(config, f"   [green]✓[/] Saved to {escape(config.output_path)}")
        cls.print_verbose(config, "")

        console.print("[bold green]✨ Translation successful![/]")
        console.print(
            f"   {escape(config.input_path)} → {escape(config.output_path)}"
        )

    @classmethod
    def run(cls, argv: Optional[List[str]] = None) -> None:
        """Run the translator command-line interface."""
        args = cls.parse_arguments(argv)
        setup_logging(args.verbose)
        config = cls.build_config(args)
        cls.print_header(config)

        try:
            translator = Translator.from_api_key(config.api_key, timeout=config.timeout)
            with translator.client:
                cls.translate_file(config, translator)
        except TranslatorError as e:
            error_console.print(f"[bold red]Error:[/] {escape(str(e))}")
            sys.exit(1)
        except KeyboardInterrupt:
            error_console.print("\n[bold red]Interrupted.[/]")
            sys.exit(130)


def main() -> None:
    """Console script entry point."""
    TranslatorCLI.run()
