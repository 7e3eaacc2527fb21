"""
Session-related exceptions.
"""

from .base import EasyDoctorError


class CredentialValidationError(EasyDoctorError):
    """Exception raised when the login form is incomplete."""
    pass


class InvalidCredentialsError(EasyDoctorError):
    """Exception raised when the authentication provider rejects a sign-in."""
    pass


class ProfileMissingError(EasyDoctorError):
    """Exception raised when valid credentials have no doctor profile."""
    pass
