"""
Signature generation for the JW Player platform API

Implements steps 5 and 6 of the signature generation: the shared secret is
appended to the canonical query string and the SHA-1 hex digest of the result
is the ``api_signature`` value.
"""

import hashlib
import logging
from dataclasses import dataclass
from typing import Sequence

from .canonical_message import build_canonical_query, to_query
from .types import SIGNATURE_PARAM, Attribute, CanonicalEntry

logger = logging.getLogger(__name__)


def salted_params(query_string: str, secret: str) -> str:
    """
    Append the secret to the end of the canonical query string.
    
    Args:
        query_string: Canonical query string
        secret: Shared API secret, appended verbatim
        
    Returns:
        str: Salted string
    """
    return query_string + (secret or "")


def signature(token: str) -> str:
    """
    Calculate the SHA-1 hex digest of a salted string.
    
    Args:
        token: Salted canonical query string
        
    Returns:
        str: 40 character lowercase hex digest
    """
    return hashlib.sha1(token.encode('utf-8')).hexdigest()


@dataclass(frozen=True)
class SignedQuery:
    """
    Result of signing a set of parameters
    
    Attributes:
        canonical_query: Sorted query string that was signed
        signature: Hex digest sent as ``api_signature``
        query: Query string to put on the request URL
    """
    canonical_query: str
    signature: str
    query: str


class QuerySigner:
    """
    Signs request parameters and attributes with a shared secret.
    """
    
    def __init__(self, secret: str):
        self._secret = secret
    
    def compute_signature(
        self,
        params: Sequence[CanonicalEntry],
        attributes: Sequence[Attribute]
    ) -> str:
        """Signature over the canonical form of ``params`` and ``attributes``"""
        canonical_query = build_canonical_query(params, attributes)
        return signature(salted_params(canonical_query, self._secret))
    
    def sign(
        self,
        params: Sequence[CanonicalEntry],
        attributes: Sequence[Attribute]
    ) -> SignedQuery:
        """
        Sign parameters and build the request query string.
        
        The request query keeps the parameters in caller order, followed by
        the attributes and finally ``api_signature``.
        
        Args:
            params: Request parameters
            attributes: Classified ``api_*`` attributes
            
        Returns:
            SignedQuery: Canonical string, signature and request query
        """
        canonical_query = build_canonical_query(params, attributes)
        digest = signature(salted_params(canonical_query, self._secret))
        logger.debug(f"Canonical query string: {canonical_query}")
        
        query = to_query(list(params) + list(attributes) + [(SIGNATURE_PARAM, digest)])
        return SignedQuery(
            canonical_query=canonical_query,
            signature=digest,
            query=query
        )
