"""
Signed URL verification

Recomputes the signature of a URL produced by ``Client.sign`` and compares it
in constant time with the ``api_signature`` it carries.
"""

import logging
import time
from typing import Callable, List, Optional, Tuple
from urllib.parse import unquote, urlsplit

from cryptography.hazmat.primitives import constant_time

from ..exceptions import ErrorCodes, SignatureVerificationError
from ..signing.signer import QuerySigner
from ..signing.types import ATTRIBUTE_PREFIX, SIGNATURE_PARAM, SignableKey
from .types import VerificationResult, VerificationStatus

logger = logging.getLogger(__name__)

TIMESTAMP_PARAM = f"{ATTRIBUTE_PREFIX}{SignableKey.TIMESTAMP.value}"


def parse_query(query: str) -> List[Tuple[str, str]]:
    """
    Split a signed query string back into pairs.
    
    Keys are kept raw and values are percent-decoded (``+`` stays a plus
    sign), mirroring how ``to_query`` writes them. Bytes that are not valid
    UTF-8 survive as surrogate escapes so re-escaping restores them.
    """
    pairs = []
    for piece in query.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        pairs.append((key, unquote(value, errors="surrogateescape")))
    return pairs


class SignedURLVerifier:
    """
    Verifier for URLs signed with a shared API secret.
    """
    
    def __init__(
        self,
        secret: str,
        max_age_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize the verifier.
        
        Args:
            secret: Shared API secret
            max_age_seconds: Reject URLs whose ``api_timestamp`` is older
            clock: Source of the current Unix time
        """
        if not secret:
            raise ValueError("Secret cannot be empty")
        
        if max_age_seconds is not None and max_age_seconds < 0:
            raise ValueError("Maximum age must be non-negative")
        
        self._signer = QuerySigner(secret)
        self.max_age_seconds = max_age_seconds
        self._clock = clock
    
    def verify(self, url: str) -> VerificationResult:
        """
        Verify a signed URL.
        
        Args:
            url: Fully qualified signed URL
            
        Returns:
            VerificationResult: Status with provided and expected signatures
            
        Raises:
            SignatureVerificationError: If the URL is malformed or carries no
                ``api_signature``
        """
        provided, params = self._split_signature(url)
        expected = self._signer.compute_signature(params, [])
        
        if not constant_time.bytes_eq(provided.encode("utf-8", "surrogateescape"), expected.encode("utf-8")):
            logger.debug(f"Signature mismatch for {urlsplit(url).path}")
            return VerificationResult(
                status=VerificationStatus.INVALID,
                signature=provided,
                expected_signature=expected,
                message="Signature does not match the URL parameters"
            )
        
        if self.max_age_seconds is not None:
            expired_message = self._check_timestamp(params)
            if expired_message:
                return VerificationResult(
                    status=VerificationStatus.EXPIRED,
                    signature=provided,
                    expected_signature=expected,
                    message=expired_message
                )
        
        return VerificationResult(
            status=VerificationStatus.VALID,
            signature=provided,
            expected_signature=expected
        )
    
    def _split_signature(self, url: str) -> Tuple[str, List[Tuple[str, str]]]:
        """Separate ``api_signature`` from the other query parameters"""
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise SignatureVerificationError(
                f"Invalid URL format: {url}",
                ErrorCodes.INVALID_URL,
                {"url": url}
            )
        
        pairs = parse_query(parts.query)
        signatures = [value for key, value in pairs if key == SIGNATURE_PARAM]
        if len(signatures) != 1:
            raise SignatureVerificationError(
                f"Expected exactly one {SIGNATURE_PARAM} parameter, found {len(signatures)}",
                ErrorCodes.MISSING_SIGNATURE,
                {"url": url}
            )
        
        params = [(key, value) for key, value in pairs if key != SIGNATURE_PARAM]
        return signatures[0], params
    
    def _check_timestamp(self, params: List[Tuple[str, str]]) -> Optional[str]:
        """Explanation when the timestamp is missing or too old, else None"""
        timestamps = [value for key, value in params if key == TIMESTAMP_PARAM]
        if not timestamps or not timestamps[0].isdigit():
            return f"Missing or invalid {TIMESTAMP_PARAM}"
        
        age = self._clock() - int(timestamps[0])
        if age > self.max_age_seconds:
            return f"Signature is {int(age)}s old (maximum {self.max_age_seconds}s)"
        
        return None


def verify_signed_url(
    url: str,
    secret: str,
    max_age_seconds: Optional[int] = None
) -> VerificationResult:
    """
    Verify a signed URL with the given secret.
    
    Args:
        url: Signed URL
        secret: Shared API secret
        max_age_seconds: Optional maximum signature age
        
    Returns:
        VerificationResult: Verification outcome
    """
    return SignedURLVerifier(secret, max_age_seconds).verify(url)
