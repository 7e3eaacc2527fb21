"""
Session gate: resume a recent doctor session or log in with credentials.
"""

import asyncio
import weakref
from datetime import timedelta
from typing import MutableMapping, Optional

from pydantic import ValidationError

from ...config import Settings, get_settings
from ...core.enums import SessionStatus
from ...core.exceptions import CapabilityTimeoutError, StoreUnavailableError
from ...core.models import DoctorIdentity, SessionRecord, SessionResult
from ...utils.date import Clock, system_clock
from ...utils.logging import get_logger
from ...utils.timeouts import call_with_timeout
from ...utils.validation import ValidationUtils
from ..external import FirebaseAuthService, FirestoreService
from .storage import KeyValueStore

logger = get_logger("easy_doctor.session")


class SessionGate:
    """
    Decides between the credential form and a resumed session.

    Only a last-login timestamp and the doctor's email are kept locally.
    A record older than the session TTL is reported as expired and left in
    place; the next successful login overwrites it.
    """

    INVALID_CREDENTIALS_MESSAGE = "Failed to login. Please check your credentials and try again."
    PROFILE_MISSING_MESSAGE = "Doctor profile not found."
    TIMEOUT_MESSAGE = "The server took too long to respond. Please try again."

    def __init__(
        self,
        auth: FirebaseAuthService,
        documents: FirestoreService,
        storage: KeyValueStore,
        *,
        clock: Optional[Clock] = None,
        session_ttl: Optional[timedelta] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
        write_locks: Optional[MutableMapping[str, asyncio.Lock]] = None,
    ):
        self.settings = settings or get_settings()
        self.auth = auth
        self.documents = documents
        self.storage = storage
        self.clock = clock or system_clock
        self.session_ttl = session_ttl or timedelta(seconds=self.settings.session_ttl_seconds)
        self.timeout = timeout if timeout is not None else self.settings.capability_timeout
        # Shared between gates by the container; an entry lives while a login holds or awaits it
        self._write_locks = write_locks if write_locks is not None else weakref.WeakValueDictionary()

    @property
    def ttl_ms(self) -> int:
        return int(self.session_ttl.total_seconds() * 1000)

    def _lock_for(self, email: str) -> asyncio.Lock:
        lock = self._write_locks.get(email)
        if lock is None:
            lock = asyncio.Lock()
            self._write_locks[email] = lock
        return lock

    async def read_record(self) -> Optional[SessionRecord]:
        """Read the stored session record, or None if it is absent or partial."""
        last_login_raw = await call_with_timeout(
            self.storage.get(SessionRecord.LAST_LOGIN_KEY), self.timeout
        )
        email_raw = await call_with_timeout(
            self.storage.get(SessionRecord.EMAIL_KEY), self.timeout
        )
        return SessionRecord.from_storage(last_login_raw, email_raw)

    async def resolve_doctor(self, email: str) -> Optional[DoctorIdentity]:
        """
        Look up the doctor profile registered under ``email``.

        Returns:
            DoctorIdentity if a Doctor document matches, None otherwise

        Raises:
            CapabilityTimeoutError: the store did not answer in time
            StoreUnavailableError: the store query failed or returned an
                unreadable Doctor document
        """
        try:
            documents = await call_with_timeout(
                self.documents.query_where(self.settings.doctor_collection, "email", email),
                self.timeout,
            )
        except CapabilityTimeoutError:
            raise
        except Exception as e:
            logger.error(f"session: doctor lookup failed: {type(e).__name__}: {e}")
            raise StoreUnavailableError("Doctor lookup failed")

        if not documents:
            return None
        try:
            return DoctorIdentity.from_document(documents[0], email=email)
        except ValidationError as e:
            logger.error(f"session: doctor document {documents[0].id} is invalid: {e.error_count()} error(s)")
            raise StoreUnavailableError("Doctor lookup failed")

    async def check_resumable_session(self) -> SessionResult:
        """Resume the cached session if it is younger than the TTL and the doctor still exists."""
        try:
            record = await self.read_record()
        except CapabilityTimeoutError:
            return SessionResult.failure(SessionStatus.TIMEOUT, self.TIMEOUT_MESSAGE)
        except Exception as e:
            logger.error(f"session: reading local record failed: {type(e).__name__}: {e}")
            return SessionResult.failure(SessionStatus.NO_SESSION)

        if record is None:
            logger.info("session: no cached session")
            return SessionResult.failure(SessionStatus.NO_SESSION)

        now_ms = self.clock()
        if record.is_expired(now_ms, self.ttl_ms):
            logger.info(
                f"session: cached session expired ({record.elapsed_ms(now_ms) // 1000}s old)"
            )
            return SessionResult.failure(SessionStatus.EXPIRED)

        try:
            identity = await self.resolve_doctor(record.remembered_email)
        except CapabilityTimeoutError:
            return SessionResult.failure(SessionStatus.TIMEOUT, self.TIMEOUT_MESSAGE)
        except StoreUnavailableError:
            return SessionResult.failure(SessionStatus.NO_SESSION)

        if identity is None:
            logger.info(f"session: remembered email {record.remembered_email} has no doctor profile")
            return SessionResult.failure(SessionStatus.NO_SESSION)

        logger.info(f"session: resumed for doctor {identity.id}")
        return SessionResult.resume(identity)

    async def login(self, email: str, password: str) -> SessionResult:
        """
        Verify credentials, resolve the doctor profile and cache the session.

        Args:
            email: Doctor email
            password: Doctor password; never stored or logged

        Returns:
            SessionResult with status resumed, validation_error,
            invalid_credentials, profile_missing or timeout
        """
        is_valid, error = ValidationUtils.validate_credentials(email, password)
        if not is_valid:
            return SessionResult.failure(SessionStatus.VALIDATION_ERROR, error)

        try:
            await call_with_timeout(self.auth.sign_in(email, password), self.timeout)
        except CapabilityTimeoutError:
            return SessionResult.failure(SessionStatus.TIMEOUT, self.TIMEOUT_MESSAGE)
        except Exception as e:
            logger.warning(f"session: sign-in failed for {email}: {type(e).__name__}")
            return SessionResult.failure(
                SessionStatus.INVALID_CREDENTIALS, self.INVALID_CREDENTIALS_MESSAGE
            )

        try:
            identity = await self.resolve_doctor(email)
        except CapabilityTimeoutError:
            return SessionResult.failure(SessionStatus.TIMEOUT, self.TIMEOUT_MESSAGE)
        except StoreUnavailableError:
            return SessionResult.failure(
                SessionStatus.INVALID_CREDENTIALS, self.INVALID_CREDENTIALS_MESSAGE
            )

        if identity is None:
            logger.info(f"session: {email} signed in without a doctor profile")
            return SessionResult.failure(SessionStatus.PROFILE_MISSING, self.PROFILE_MISSING_MESSAGE)

        try:
            await self._remember(email)
        except CapabilityTimeoutError:
            return SessionResult.failure(SessionStatus.TIMEOUT, self.TIMEOUT_MESSAGE)
        except Exception as e:
            logger.error(f"session: writing local record failed: {type(e).__name__}: {e}")
            return SessionResult.failure(
                SessionStatus.INVALID_CREDENTIALS, self.INVALID_CREDENTIALS_MESSAGE
            )

        logger.info(f"session: logged in doctor {identity.id}")
        return SessionResult.resume(identity)

    async def _remember(self, email: str) -> None:
        """Write both record keys for ``email`` while holding its lock."""
        async with self._lock_for(email):
            record = SessionRecord(last_login_at=self.clock(), remembered_email=email)
            await call_with_timeout(self.storage.set_many(record.to_storage()), self.timeout)
