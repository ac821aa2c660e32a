"""
JW Player API client
Signed URL generation for the JW Player platform API
"""

from .version import __version__
from .exceptions import (
    JWPlayerSDKError,
    MissingCredentialError,
    ConfigurationError,
    CredentialStorageError,
    SignatureVerificationError,
    ErrorCodes,
)
from .signing import (
    SignableKey,
    IgnoredKey,
    SigningOptions,
    SignedURLAuth,
    create_signing_session,
    escape,
)
from .config import (
    ClientConfig,
    EnvironmentCredentialProvider,
    KeyringCredentialProvider,
    ChainedCredentialProvider,
)
from .client import (
    Client,
    create_client,
    sign_url,
)
from .verification import (
    SignedURLVerifier,
    VerificationResult,
    VerificationStatus,
    verify_signed_url,
)

__all__ = [
    '__version__',
    # Client
    'Client',
    'create_client',
    'sign_url',
    # Configuration
    'ClientConfig',
    'EnvironmentCredentialProvider',
    'KeyringCredentialProvider',
    'ChainedCredentialProvider',
    # Signing
    'SignableKey',
    'IgnoredKey',
    'SigningOptions',
    'SignedURLAuth',
    'create_signing_session',
    'escape',
    # Verification
    'SignedURLVerifier',
    'VerificationResult',
    'VerificationStatus',
    'verify_signed_url',
    # Exceptions
    'JWPlayerSDKError',
    'MissingCredentialError',
    'ConfigurationError',
    'CredentialStorageError',
    'SignatureVerificationError',
    'ErrorCodes',
]
