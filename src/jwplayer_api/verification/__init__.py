"""
Signed URL verification for the JW Player API client
"""

from .types import VerificationResult, VerificationStatus
from .verifier import SignedURLVerifier, verify_signed_url

__all__ = [
    'VerificationResult',
    'VerificationStatus',
    'SignedURLVerifier',
    'verify_signed_url',
]
