"""
Utility functions for URL signing

This module provides value escaping, nonce and timestamp generation, and
parameter normalization for the JW Player platform API signature scheme.
"""

import re
import secrets
import time
from enum import Enum
from typing import Any, Mapping, Tuple
from urllib.parse import quote

from .types import RequestParams

NONCE_DIGITS = 8

_NONCE_PATTERN = re.compile(r'^\d{8}$')


def to_text(value: Any) -> str:
    """
    Convert an opaque parameter value to the text that gets signed.
    
    Args:
        value: Any parameter value
        
    Returns:
        str: Text form of the value (``None`` becomes an empty string)
    """
    if value is None:
        return ""
    
    if isinstance(value, Enum):
        return to_text(value.value)
    
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='surrogateescape')
    
    return str(value)


def escape(value: Any) -> str:
    """
    Percent-encode a value for the canonical query string.
    
    Every byte of the UTF-8 form (or of a raw ``bytes`` value) other than
    ASCII letters, digits, ``-``, ``.``, ``_`` and ``~`` is encoded as ``%XX`` with uppercase hex digits.
    
    Args:
        value: Value to encode (converted with ``to_text``)
        
    Returns:
        str: Escaped value
    """
    return quote(to_text(value), safe='', encoding='utf-8', errors='surrogateescape')


def generate_nonce() -> str:
    """
    Generate a zero-padded 8 digit decimal nonce.
    
    Returns:
        str: Random nonce for replay protection
    """
    return f"{secrets.randbelow(10 ** NONCE_DIGITS):0{NONCE_DIGITS}d}"


def generate_timestamp() -> str:
    """
    Generate current Unix timestamp.
    
    Returns:
        str: Seconds since epoch, as text
    """
    return str(int(time.time()))


def validate_nonce(nonce: Any) -> bool:
    """
    Validate nonce format (8 decimal digits).
    
    Args:
        nonce: Nonce string to validate
        
    Returns:
        bool: True if nonce is valid
    """
    if not isinstance(nonce, str):
        return False
    
    return bool(_NONCE_PATTERN.match(nonce))


def validate_timestamp(timestamp: Any) -> bool:
    """
    Validate timestamp (should be reasonable Unix timestamp in text form).
    
    Args:
        timestamp: Timestamp text to validate
        
    Returns:
        bool: True if timestamp is valid
    """
    if not isinstance(timestamp, str) or not timestamp.isdigit():
        return False
    
    # Check if it's a valid Unix timestamp (after 2000 and before 2100)
    year_2000 = 946684800  # 2000-01-01 00:00:00 UTC
    year_2100 = 4102444800  # 2100-01-01 00:00:00 UTC
    
    return year_2000 <= int(timestamp) <= year_2100


def normalize_params(params: RequestParams) -> Tuple[Tuple[str, Any], ...]:
    """
    Normalize request parameters to an ordered tuple of pairs.
    
    Args:
        params: Mapping, iterable of pairs, or None
        
    Returns:
        tuple: ``(key, value)`` pairs in caller order
    """
    if params is None:
        return ()
    
    if isinstance(params, Mapping):
        items = params.items()
    else:
        items = params
    
    return tuple((to_text(key), value) for key, value in items)
