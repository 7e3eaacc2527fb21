"""
External API-related exceptions.
"""

from .base import EasyDoctorError


class ExternalAPIError(EasyDoctorError):
    """Base exception for external API errors."""
    pass


class AuthProviderError(ExternalAPIError):
    """Exception raised when the authentication API call fails."""
    pass


class DocumentStoreError(ExternalAPIError):
    """Exception raised when a document store call fails."""
    pass


class DocumentNotFoundError(DocumentStoreError):
    """Exception raised when a document targeted for deletion is missing."""
    pass
