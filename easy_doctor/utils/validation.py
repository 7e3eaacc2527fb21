"""
Validation utilities for user input.
"""

from typing import Optional, Tuple


class ValidationUtils:
    """Validation utilities for credential input."""

    @staticmethod
    def is_blank(value: Optional[str]) -> bool:
        return value is None or value == ""

    @staticmethod
    def validate_credentials(email: Optional[str], password: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate the login form before any network call.

        Args:
            email: Email entered by the doctor
            password: Password entered by the doctor

        Returns:
            Tuple of (is_valid, error_message)
        """
        if ValidationUtils.is_blank(email) or ValidationUtils.is_blank(password):
            return False, "Please enter both email and password."
        return True, None
