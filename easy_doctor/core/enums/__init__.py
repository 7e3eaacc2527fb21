"""
Enums for the Easy Doctor core.
"""

from .booking import PaymentStatus
from .session import SessionStatus

__all__ = [
    "PaymentStatus",
    "SessionStatus",
]
