"""
Client configuration

Recognized options are named fields of an immutable ``ClientConfig``. Any
other option is kept in ``extras`` so that signing can reject unknown keys.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import ConfigurationError, ErrorCodes, MissingCredentialError
from ..signing.types import NonceGenerator, TimestampGenerator
from .credentials import CredentialProvider, default_credential_provider

DEFAULT_HOST = "api.jwplatform.com"
DEFAULT_SCHEME = "https"
DEFAULT_VERSION = "v1"
DEFAULT_FORMAT = "json"

DEFAULTS = {
    "host": DEFAULT_HOST,
    "scheme": DEFAULT_SCHEME,
    "version": DEFAULT_VERSION,
    "format": DEFAULT_FORMAT,
}

CREDENTIAL_KEYS = ("key", "secret")


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration of a JW Player API client
    
    Attributes:
        key: API key, sent as ``api_key``
        secret: API secret, only used to salt the signature
        host: URL authority
        scheme: URL scheme
        version: Path segment between host and request path
        format: Response format, sent as ``api_format``
        extras: Any other supplied option
        nonce_generator: Optional custom nonce generator function
        timestamp_generator: Optional custom timestamp generator function
    """
    key: str
    secret: str = field(repr=False)
    host: str = DEFAULT_HOST
    scheme: str = DEFAULT_SCHEME
    version: Any = DEFAULT_VERSION
    format: Any = DEFAULT_FORMAT
    extras: Mapping[str, Any] = field(default_factory=dict)
    nonce_generator: Optional[NonceGenerator] = field(default=None, repr=False, compare=False)
    timestamp_generator: Optional[TimestampGenerator] = field(default=None, repr=False, compare=False)
    
    def __post_init__(self):
        """Validate credentials and freeze extras"""
        for name in CREDENTIAL_KEYS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise MissingCredentialError(
                    f"Missing '{name}' option",
                    {"option": name}
                )
        
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))
    
    @classmethod
    def from_mapping(
        cls,
        options: Optional[Mapping[str, Any]] = None,
        credential_provider: Optional[CredentialProvider] = None,
        nonce_generator: Optional[NonceGenerator] = None,
        timestamp_generator: Optional[TimestampGenerator] = None
    ) -> 'ClientConfig':
        """
        Build a configuration from an options mapping.
        
        ``key`` and ``secret`` that are absent or ``None`` are looked up with
        the credential provider (environment variables by default). Unknown
        options are kept in ``extras``.
        
        Raises:
            MissingCredentialError: If key or secret is still missing
        """
        remaining: Dict[str, Any] = dict(options or {})
        provider = credential_provider or default_credential_provider()
        
        credentials = {}
        for name in CREDENTIAL_KEYS:
            value = remaining.pop(name, None)
            if value is None:
                value = provider.get_key() if name == "key" else provider.get_secret()
            if not value:
                raise MissingCredentialError(
                    f"Missing '{name}' option or {provider.describe(name)}",
                    {"option": name}
                )
            credentials[name] = value
        
        settings = {}
        for name, default in DEFAULTS.items():
            value = remaining.pop(name, None)
            settings[name] = default if value is None else value
        
        return cls(
            extras=remaining,
            nonce_generator=nonce_generator,
            timestamp_generator=timestamp_generator,
            **credentials,
            **settings
        )
    
    @classmethod
    def from_json(
        cls,
        json_string: str,
        credential_provider: Optional[CredentialProvider] = None
    ) -> 'ClientConfig':
        """Load configuration from a JSON object string"""
        return cls.from_mapping(parse_options_json(json_string), credential_provider)
    
    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        credential_provider: Optional[CredentialProvider] = None
    ) -> 'ClientConfig':
        """Load configuration from a JSON file"""
        return cls.from_mapping(load_options_file(file_path), credential_provider)
    
    def to_mapping(self) -> Dict[str, Any]:
        """
        Options as an ordered mapping, used for attribute classification.
        
        Returns:
            dict: host, scheme, version, key, secret, format, then extras
        """
        options = {
            "host": self.host,
            "scheme": self.scheme,
            "version": self.version,
            "key": self.key,
            "secret": self.secret,
            "format": self.format,
        }
        options.update(self.extras)
        return options


def parse_options_json(json_string: str) -> Dict[str, Any]:
    """
    Parse a JSON object of client options.
    
    Raises:
        ConfigurationError: If the text is not a JSON object
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Failed to parse configuration JSON: {e}",
            ErrorCodes.PARSE_ERROR
        )
    
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration format: expected an object, got {type(data).__name__}",
            ErrorCodes.INVALID_FORMAT
        )
    
    return data


def load_options_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON file of client options.
    
    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        path = Path(file_path)
        with open(path, 'r', encoding='utf-8') as f:
            json_string = f.read()
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            ErrorCodes.FILE_ERROR,
            {"path": str(file_path)}
        )
    
    return parse_options_json(json_string)
