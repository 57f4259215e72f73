#!/usr/bin/env python3
# ABOUTME: File input/output utilities for the translator.
# ABOUTME: Reads source text and writes translations without leaving partial files.

import os
import stat
import sys
import tempfile
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class FileHandler:
    """File input/output utilities for the translator."""

    @staticmethod
    def read_file(file_path: str) -> str:
        """Read UTF-8 content from a file.

        Args:
            file_path: The path to the file to read

        Returns:
            The content of the file as a string

        Raises:
            SystemExit: If the file cannot be read
        """
        try:
            with open(file_path, "r", encoding="utf-8") as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as e:
            console.print(
                f"[bold red]Error:[/] Failed to read input file "
                f"{escape(str(file_path))}: {escape(str(e))}"
            )
            sys.exit(1)

    @staticmethod
    def write_file(file_path: str, content: str) -> None:
        """Write UTF-8 content to a file, creating parent directories.

        The content goes to a temporary file in the target directory which
        then replaces the destination, so readers never see a partial file.

        Args:
            file_path: The path to the file to write
            content: The content to write to the file

        Raises:
            SystemExit: If the file cannot be written
        """
        path = Path(file_path)
        tmp_path = None
        try:
            if str(path.parent) not in ("", "."):
                path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as file:
                file.write(content)
            os.chmod(tmp_path, FileHandler._target_mode(path))
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            console.print(
                f"[bold red]Error:[/] Failed to write output file "
                f"{escape(str(file_path))}: {escape(str(e))}"
            )
            sys.exit(1)

    @staticmethod
    def _target_mode(path: Path) -> int:
        # mkstemp creates 0600 files; match what open() would have produced.
        try:
            return stat.S_IMODE(os.stat(path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    @staticmethod
    def file_exists(file_path: str) -> bool:
        """Check whether a path exists."""
        return Path(file_path).exists()

    @staticmethod
    def get_file_size(file_path: str) -> int:
        """Return the size of a file in bytes.

        Raises:
            SystemExit: If the file metadata cannot be read
        """
        try:
            return os.path.getsize(file_path)
        except OSError as e:
            console.print(
                f"[bold red]Error:[/] Failed to get file metadata "
                f"{escape(str(file_path))}: {escape(str(e))}"
            )
            sys.exit(1)
