"""
JW Player API client - URL Signing Module

Signature generation for the JW Player platform API: UTF-8 text parameters
are URL-encoded, sorted, concatenated into a query string, salted with the
API secret and digested with SHA-1.
"""

from .types import (
    SignableKey,
    IgnoredKey,
    ALLOWED_KEYS,
    IGNORED_KEYS,
    SIGNATURE_PARAM,
    SigningContext,
    SigningOptions,
)

from .utils import (
    escape,
    generate_nonce,
    generate_timestamp,
    validate_nonce,
    validate_timestamp,
    normalize_params,
)

from .attributes import classify_attributes

from .canonical_message import (
    sorted_params,
    to_query,
    build_canonical_query,
)

from .signer import (
    QuerySigner,
    SignedQuery,
    salted_params,
    signature,
)

from .integration import (
    SignedURLAuth,
    create_signing_session,
)

# Public API exports
__all__ = [
    # Types
    'SignableKey',
    'IgnoredKey',
    'ALLOWED_KEYS',
    'IGNORED_KEYS',
    'SIGNATURE_PARAM',
    'SigningContext',
    'SigningOptions',
    # Utilities
    'escape',
    'generate_nonce',
    'generate_timestamp',
    'validate_nonce',
    'validate_timestamp',
    'normalize_params',
    # Signature generation steps
    'classify_attributes',
    'sorted_params',
    'to_query',
    'build_canonical_query',
    'QuerySigner',
    'SignedQuery',
    'salted_params',
    'signature',
    # HTTP Integration
    'SignedURLAuth',
    'create_signing_session',
]
