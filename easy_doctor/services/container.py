"""
Wiring of capability adapters into gates and rosters.
"""

import weakref
from typing import Optional

from ..config import ExternalAPIConfig, Settings, get_settings
from ..utils.date import Clock
from .external import FirebaseAuthService, FirestoreService
from .roster import BookingRoster
from .session import KeyValueStore, SessionGate, SQLiteKeyValueStore


class ServiceContainer:
    """Holds the shared adapters and builds per-session and per-screen services."""

    def __init__(
        self,
        auth: Optional[FirebaseAuthService] = None,
        documents: Optional[FirestoreService] = None,
        storage: Optional[KeyValueStore] = None,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        config = ExternalAPIConfig.from_settings(self.settings)
        self.auth = auth or FirebaseAuthService(config)
        self.documents = documents or FirestoreService(config)
        self.storage = storage or SQLiteKeyValueStore(self.settings.kv_db_path)
        self.clock = clock
        # Per-email login write locks shared by every gate this container builds
        self.write_locks = weakref.WeakValueDictionary()

    def session_gate(self) -> SessionGate:
        return SessionGate(
            self.auth,
            self.documents,
            self.storage,
            clock=self.clock,
            settings=self.settings,
            write_locks=self.write_locks,
        )

    def booking_roster(self, doctor_id: Optional[str] = None) -> BookingRoster:
        return BookingRoster(self.documents, doctor_id, settings=self.settings)
