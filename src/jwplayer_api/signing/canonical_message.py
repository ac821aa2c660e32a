"""
Canonical query string construction

Implements steps 1 to 4 of the JW Player platform API signature generation:
text parameters are UTF-8 encoded and URL-encoded, sorted by name in
lexicographical byte value order, and concatenated into a single query string.
"""

from typing import Iterable, List, Sequence

from .types import Attribute, CanonicalEntry
from .utils import escape, to_text


def sorted_params(params: Iterable[CanonicalEntry]) -> List[CanonicalEntry]:
    """
    Sort entries by their raw key name.
    
    The sort is stable, so a key present in both the request parameters and
    the attributes keeps its original relative order.
    
    Args:
        params: ``(key, value)`` entries
        
    Returns:
        list: Sorted entries
    """
    # Code point order of str equals UTF-8 byte order
    return sorted(params, key=lambda entry: to_text(entry[0]))


def to_query(params: Iterable[CanonicalEntry]) -> str:
    """
    Serialize entries as ``key=value`` pairs joined with ``&``.
    
    Values are escaped, keys are emitted as-is.
    
    Args:
        params: ``(key, value)`` entries
        
    Returns:
        str: Query string
    """
    return '&'.join(f"{to_text(key)}={escape(value)}" for key, value in params)


def signature_params(
    params: Sequence[CanonicalEntry],
    attributes: Sequence[Attribute]
) -> List[CanonicalEntry]:
    """Request parameters followed by attributes, sorted for signing"""
    return sorted_params(list(params) + list(attributes))


def build_canonical_query(
    params: Sequence[CanonicalEntry],
    attributes: Sequence[Attribute]
) -> str:
    """
    Build the canonical query string that gets salted and digested.
    
    Args:
        params: Request parameters
        attributes: Classified ``api_*`` attributes (without the signature)
        
    Returns:
        str: Canonical query string
    """
    return to_query(signature_params(params, attributes))
