"""
Configuration management for the JW Player API client

This module provides the typed client configuration and the credential
providers used for default API keys and secrets.
"""

from .client_config import (
    ClientConfig,
    DEFAULT_HOST,
    DEFAULT_SCHEME,
    DEFAULT_VERSION,
    DEFAULT_FORMAT,
    parse_options_json,
    load_options_file,
)
from .credentials import (
    CredentialProvider,
    EnvironmentCredentialProvider,
    KeyringCredentialProvider,
    ChainedCredentialProvider,
    default_credential_provider,
)

__all__ = [
    'ClientConfig',
    'DEFAULT_HOST',
    'DEFAULT_SCHEME',
    'DEFAULT_VERSION',
    'DEFAULT_FORMAT',
    'parse_options_json',
    'load_options_file',
    'CredentialProvider',
    'EnvironmentCredentialProvider',
    'KeyringCredentialProvider',
    'ChainedCredentialProvider',
    'default_credential_provider',
]
