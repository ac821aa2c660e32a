"""
Credential providers for the API key and secret

Credentials given explicitly to the client always win; providers are only
consulted for values that were not supplied.
"""

import logging
import os
from typing import Mapping, Optional

import keyring
from keyring.errors import KeyringError

from ..exceptions import CredentialStorageError, ErrorCodes

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "JWPLAYER"
DEFAULT_KEYRING_SERVICE = "jwplayer-api"


class CredentialProvider:
    """Source of default API credentials"""
    
    def get_key(self) -> Optional[str]:
        raise NotImplementedError
    
    def get_secret(self) -> Optional[str]:
        raise NotImplementedError
    
    def describe(self, name: str) -> str:
        """Human readable location of a credential, used in error messages"""
        return self.__class__.__name__


class EnvironmentCredentialProvider(CredentialProvider):
    """Reads ``<PREFIX>_API_KEY`` and ``<PREFIX>_API_SECRET``"""
    
    def __init__(self, prefix: str = DEFAULT_ENV_PREFIX, environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        self._environ = environ
    
    def variable_name(self, name: str) -> str:
        return f"{self.prefix}_API_{name.upper()}"
    
    def _lookup(self, name: str) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(self.variable_name(name))
    
    def get_key(self) -> Optional[str]:
        return self._lookup("key")
    
    def get_secret(self) -> Optional[str]:
        return self._lookup("secret")
    
    def describe(self, name: str) -> str:
        return f"'{self.variable_name(name)}' environment variable"


class KeyringCredentialProvider(CredentialProvider):
    """
    Reads credentials stored in the OS keyring.
    
    The key and secret are stored under the usernames ``key`` and ``secret``
    of the given service name.
    """
    
    def __init__(self, service: str = DEFAULT_KEYRING_SERVICE):
        self.service = service
    
    def _lookup(self, name: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service, name)
        except KeyringError as e:
            logger.warning(f"Keyring lookup failed for {self.service}/{name}: {e}")
            return None
    
    def get_key(self) -> Optional[str]:
        return self._lookup("key")
    
    def get_secret(self) -> Optional[str]:
        return self._lookup("secret")
    
    def store(self, key: str, secret: str) -> None:
        """
        Save credentials to the OS keyring.
        
        Raises:
            CredentialStorageError: If the keyring rejects the credentials
        """
        try:
            keyring.set_password(self.service, "key", key)
            keyring.set_password(self.service, "secret", secret)
        except KeyringError as e:
            raise CredentialStorageError(
                f"Failed to store credentials in keyring: {e}",
                ErrorCodes.KEYRING_STORAGE_FAILED,
                {"service": self.service, "original_error": str(e)}
            )
        logger.info(f"Stored API credentials in keyring service: {self.service}")
    
    def describe(self, name: str) -> str:
        return f"keyring entry '{self.service}/{name}'"


class ChainedCredentialProvider(CredentialProvider):
    """Returns the first non-empty value of the given providers"""
    
    def __init__(self, *providers: CredentialProvider):
        self.providers = providers
    
    def get_key(self) -> Optional[str]:
        for provider in self.providers:
            value = provider.get_key()
            if value:
                return value
        return None
    
    def get_secret(self) -> Optional[str]:
        for provider in self.providers:
            value = provider.get_secret()
            if value:
                return value
        return None
    
    def describe(self, name: str) -> str:
        return " or ".join(provider.describe(name) for provider in self.providers)


def default_credential_provider(use_keyring: bool = False) -> CredentialProvider:
    """Environment lookup, optionally followed by the OS keyring"""
    if use_keyring:
        return ChainedCredentialProvider(
            EnvironmentCredentialProvider(),
            KeyringCredentialProvider()
        )
    return EnvironmentCredentialProvider()
