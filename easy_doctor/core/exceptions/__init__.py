"""
Custom exceptions for the Easy Doctor core.
"""

from .base import EasyDoctorError, CapabilityTimeoutError
from .session import CredentialValidationError, InvalidCredentialsError, ProfileMissingError
from .booking import BookingNotFoundError, StoreUnavailableError
from .external import ExternalAPIError, AuthProviderError, DocumentStoreError, DocumentNotFoundError

__all__ = [
    "EasyDoctorError",
    "CapabilityTimeoutError",
    "CredentialValidationError",
    "InvalidCredentialsError",
    "ProfileMissingError",
    "BookingNotFoundError",
    "StoreUnavailableError",
    "ExternalAPIError",
    "AuthProviderError",
    "DocumentStoreError",
    "DocumentNotFoundError",
]
