"""
Shared fixtures for the JW Player API client tests
"""

import os
from unittest.mock import patch

import pytest

from jwplayer_api import Client

API_KEY = 'XOqEAfxj'
API_SECRET = 'uA96CFtJa138E2T5GhKfngml'


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep real JWPLAYER_API_* variables out of the tests."""
    environ = {k: v for k, v in os.environ.items() if not k.startswith('JWPLAYER_API_')}
    with patch.dict(os.environ, environ, clear=True):
        yield


@pytest.fixture
def client():
    """Client with test credentials and default options."""
    return Client(key=API_KEY, secret=API_SECRET)


@pytest.fixture
def example_client():
    """Client matching the documented signature example."""
    return Client(key=API_KEY, secret=API_SECRET, format='xml', scheme='http')
