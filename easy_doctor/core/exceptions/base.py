"""
Base exceptions.
"""


class EasyDoctorError(Exception):
    """Base exception for the Easy Doctor core."""
    pass


class CapabilityTimeoutError(EasyDoctorError):
    """Exception raised when an auth or store call exceeds its timeout."""
    pass
