"""
Classification of configuration keys into signed attributes
"""

from typing import Any, List, Mapping

from ..exceptions import ConfigurationError, ErrorCodes
from .types import ALLOWED_KEYS, ATTRIBUTE_PREFIX, IGNORED_KEYS, AttributeList


def unknown_keys(options: Mapping[str, Any]) -> List[str]:
    """Keys that are neither signable nor ignored, in mapping order"""
    return [
        key for key in options
        if key not in ALLOWED_KEYS and key not in IGNORED_KEYS
    ]


def classify_attributes(options: Mapping[str, Any]) -> AttributeList:
    """
    Build the ``api_*`` attributes of a configuration mapping.
    
    Args:
        options: Configuration mapping (client options merged with the
            per-call nonce and timestamp)
        
    Returns:
        list: ``(api_<key>, value)`` pairs for every signable key, in
        mapping order
        
    Raises:
        ConfigurationError: If any key is neither signable nor ignored
    """
    extra_keys = unknown_keys(options)
    if extra_keys:
        listed = ', '.join(repr(key) for key in extra_keys)
        raise ConfigurationError(
            f"Unknown extra option keys [{listed}]",
            ErrorCodes.UNKNOWN_OPTION_KEYS,
            {"unknown_keys": extra_keys}
        )
    
    return [
        (f"{ATTRIBUTE_PREFIX}{key}", value)
        for key, value in options.items()
        if key in ALLOWED_KEYS
    ]
