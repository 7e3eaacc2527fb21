"""
Core data models for the Easy Doctor core.
"""

from .document import StoreDocument, AuthProof
from .doctor import DoctorIdentity, NavigationContext
from .session import SessionRecord, SessionResult
from .booking import Booking, PatientSnapshot, RosterEntry, RosterSnapshot

__all__ = [
    "StoreDocument",
    "AuthProof",
    "DoctorIdentity",
    "NavigationContext",
    "SessionRecord",
    "SessionResult",
    "Booking",
    "PatientSnapshot",
    "RosterEntry",
    "RosterSnapshot",
]
