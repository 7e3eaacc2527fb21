"""
Session models and result variants.
"""

from typing import ClassVar, Dict, Optional
from pydantic import BaseModel, ConfigDict

from ..enums import SessionStatus
from ..exceptions import (
    CapabilityTimeoutError,
    CredentialValidationError,
    InvalidCredentialsError,
    ProfileMissingError,
)
from ...utils.date import parse_epoch_ms
from .doctor import DoctorIdentity, NavigationContext


class SessionRecord(BaseModel):
    """Locally cached proof of a recent login. Never holds credentials."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    LAST_LOGIN_KEY: ClassVar[str] = "lastLoginTime"
    EMAIL_KEY: ClassVar[str] = "doctorEmail"

    last_login_at: int
    remembered_email: str

    @classmethod
    def from_storage(cls, last_login_raw: Optional[str], email_raw: Optional[str]) -> Optional["SessionRecord"]:
        """Rebuild the record from stored values; None unless both are usable."""
        if not last_login_raw or not email_raw:
            return None
        last_login_at = parse_epoch_ms(last_login_raw)
        if last_login_at is None:
            return None
        return cls(last_login_at=last_login_at, remembered_email=email_raw)

    def to_storage(self) -> Dict[str, str]:
        return {
            self.LAST_LOGIN_KEY: str(self.last_login_at),
            self.EMAIL_KEY: self.remembered_email,
        }

    def elapsed_ms(self, now_ms: int) -> int:
        return now_ms - self.last_login_at

    def is_expired(self, now_ms: int, ttl_ms: int) -> bool:
        return self.elapsed_ms(now_ms) >= ttl_ms


class SessionResult(BaseModel):
    """Tagged outcome of ``check_resumable_session`` and ``login``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: SessionStatus
    identity: Optional[DoctorIdentity] = None
    message: Optional[str] = None

    @property
    def navigation(self) -> Optional[NavigationContext]:
        if self.identity is None:
            return None
        return self.identity.to_navigation()

    @property
    def resumed(self) -> bool:
        return self.status == SessionStatus.RESUMED

    @property
    def requires_profile(self) -> bool:
        """True when the caller should route to profile creation."""
        return self.status == SessionStatus.PROFILE_MISSING

    @classmethod
    def resume(cls, identity: DoctorIdentity) -> "SessionResult":
        return cls(status=SessionStatus.RESUMED, identity=identity)

    @classmethod
    def failure(cls, status: SessionStatus, message: Optional[str] = None) -> "SessionResult":
        return cls(status=status, message=message)

    def raise_for_status(self) -> Optional[DoctorIdentity]:
        """
        Exception-style access to the outcome.

        Returns the identity when resumed and None for no_session/expired;
        raises the matching error for the other variants.
        """
        if self.status == SessionStatus.RESUMED:
            return self.identity
        if self.status in (SessionStatus.NO_SESSION, SessionStatus.EXPIRED):
            return None
        error = _STATUS_ERRORS[self.status]
        raise error(self.message or self.status.value)


_STATUS_ERRORS = {
    SessionStatus.VALIDATION_ERROR: CredentialValidationError,
    SessionStatus.INVALID_CREDENTIALS: InvalidCredentialsError,
    SessionStatus.PROFILE_MISSING: ProfileMissingError,
    SessionStatus.TIMEOUT: CapabilityTimeoutError,
}
