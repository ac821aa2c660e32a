"""
Exception classes for the JW Player API client
"""

from typing import Optional, Dict, Any


class ErrorCodes:
    """Standard error codes for client operations"""

    # Credential errors
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    KEYRING_STORAGE_FAILED = "KEYRING_STORAGE_FAILED"

    # Configuration errors
    UNKNOWN_OPTION_KEYS = "UNKNOWN_OPTION_KEYS"
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    FILE_ERROR = "FILE_ERROR"

    # Verification errors
    INVALID_URL = "INVALID_URL"
    MISSING_SIGNATURE = "MISSING_SIGNATURE"


class JWPlayerSDKError(Exception):
    """Base exception for all JW Player API client errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code}')"


class MissingCredentialError(JWPlayerSDKError):
    """Exception raised when the API key or secret is absent or empty"""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCodes.MISSING_CREDENTIAL, details)


class CredentialStorageError(JWPlayerSDKError):
    """Exception raised when credentials cannot be saved to the OS keyring"""
    pass


class ConfigurationError(JWPlayerSDKError):
    """Exception raised for unknown option keys and unreadable configuration"""
    pass


class SignatureVerificationError(JWPlayerSDKError):
    """Exception raised when a URL cannot be checked for a signature at all"""
    pass
