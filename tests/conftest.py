#!/usr/bin/env python3
# ABOUTME: Shared fixtures for the translingo tests.
# ABOUTME: Provides a client with a mocked session and a sleep recorder.

from unittest.mock import MagicMock

import pytest
import requests

from helpers import TEST_API_KEY
from translingo.client import TranslationClient


@pytest.fixture
def mock_session():
    """A mocked requests.Session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(mock_session):
    """A TranslationClient whose HTTP calls go to mock_session."""
    return TranslationClient(TEST_API_KEY, session=mock_session)


@pytest.fixture
def sleeps():
    """Records the waits requested by the retry loop."""
    return []
