"""
Service layer for the Easy Doctor core.
"""

from .session import SessionGate, KeyValueStore, InMemoryKeyValueStore, SQLiteKeyValueStore
from .roster import BookingRoster
from .external import FirebaseAuthService, FirestoreService
from .container import ServiceContainer

__all__ = [
    "SessionGate",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "BookingRoster",
    "FirebaseAuthService",
    "FirestoreService",
    "ServiceContainer",
]
