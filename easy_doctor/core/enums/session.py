"""
Session-related enums.
"""

from enum import Enum


class SessionStatus(str, Enum):
    """Outcome of a resume or login attempt."""

    RESUMED = "resumed"
    NO_SESSION = "no_session"
    EXPIRED = "expired"
    INVALID_CREDENTIALS = "invalid_credentials"
    PROFILE_MISSING = "profile_missing"
    VALIDATION_ERROR = "validation_error"
    TIMEOUT = "timeout"
