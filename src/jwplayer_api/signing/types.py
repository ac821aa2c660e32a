"""
Type definitions for URL signing

This module provides the key enumerations, per-call signing context and type
aliases used by the JW Player platform API signature generation.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum


class SignableKey(str, Enum):
    """Configuration keys sent as ``api_<key>`` and covered by the signature"""
    FORMAT = "format"
    KEY = "key"
    NONCE = "nonce"
    TIMESTAMP = "timestamp"


class IgnoredKey(str, Enum):
    """Configuration keys that are legal but never sent"""
    HOST = "host"
    SCHEME = "scheme"
    SECRET = "secret"
    SIGNATURE = "signature"
    VERSION = "version"


ALLOWED_KEYS = frozenset(key.value for key in SignableKey)
IGNORED_KEYS = frozenset(key.value for key in IgnoredKey)

ATTRIBUTE_PREFIX = "api_"
SIGNATURE_PARAM = "api_signature"


@dataclass(frozen=True)
class SigningOptions:
    """
    Signing options for individual requests
    
    Attributes:
        nonce: Custom nonce for this request
        timestamp: Custom timestamp for this request
    """
    nonce: Optional[str] = None
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class SigningContext:
    """
    Call-local state of one signing operation
    
    Attributes:
        nonce: Nonce generated (or injected) for this call
        timestamp: Unix timestamp in seconds, as text
        params: Caller supplied query parameters, in caller order
    """
    nonce: str
    timestamp: str
    params: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate context values"""
        if not self.nonce:
            raise ValueError("Nonce cannot be empty")
        
        if not self.timestamp:
            raise ValueError("Timestamp cannot be empty")

    def signable_values(self) -> Dict[str, str]:
        """Per-call values merged over the client configuration"""
        return {
            SignableKey.NONCE.value: self.nonce,
            SignableKey.TIMESTAMP.value: self.timestamp,
        }


# Type aliases for convenience
Attribute = Tuple[str, Any]
CanonicalEntry = Tuple[str, Any]
RequestParams = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]
NonceGenerator = Callable[[], str]
TimestampGenerator = Callable[[], str]
AttributeList = List[Attribute]
