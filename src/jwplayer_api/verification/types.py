"""
Type definitions for signed URL verification
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VerificationStatus(str, Enum):
    """Verification result status"""
    VALID = "valid"
    INVALID = "invalid"
    EXPIRED = "expired"


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of checking a signed URL
    
    Attributes:
        status: Verification status
        signature: ``api_signature`` found on the URL
        expected_signature: Signature recomputed from the URL parameters
        message: Human readable explanation for non valid results
    """
    status: VerificationStatus
    signature: str
    expected_signature: str
    message: Optional[str] = None
    
    @property
    def is_valid(self) -> bool:
        return self.status == VerificationStatus.VALID
