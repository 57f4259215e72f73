"""Translate text files through the Google Translate API."""

__version__ = "0.1.0"
