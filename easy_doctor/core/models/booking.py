"""
Booking-related data models.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..enums import PaymentStatus
from ...utils.date import coerce_date
from .document import StoreDocument


def _slot_is_set(slot: Any) -> bool:
    return slot is not None and slot != "" and slot != {} and slot != []


class PatientSnapshot(BaseModel):
    """
    Patient details copied into the booking when it was made.

    The snapshot is never refreshed from a canonical patient record, so
    historical bookings keep the details they were created with. Fields
    beyond name/age/gender are kept as extras.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: Any = None
    age: Any = None
    gender: Any = None


class RosterEntry(BaseModel):
    """Flat record the booking list and call action render from."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id: str
    name: Any = None
    age: Any = None
    gender: Any = None
    date: Any = None
    morning_slot: Any = Field(default=None, alias="morningSlot")
    evening_slot: Any = Field(default=None, alias="eveningSlot")
    payment_status: PaymentStatus = Field(default=PaymentStatus.UNKNOWN, alias="paymentStatus")

    def as_view(self) -> Dict[str, Any]:
        """JSON-ready dict with the camelCase keys the list view reads."""
        return self.model_dump(mode="json", by_alias=True)


class Booking(BaseModel):
    """A booking assigned to one doctor."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str
    doctor_id: str = Field(alias="doctorId", min_length=1)
    patient: PatientSnapshot
    # datetime.date when the stored value could be parsed, else the raw value
    date: Any = None
    morning_slot: Any = Field(default=None, alias="morningSlot")
    evening_slot: Any = Field(default=None, alias="eveningSlot")
    payment_status: PaymentStatus = Field(default=PaymentStatus.UNKNOWN, alias="paymentStatus")

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        try:
            return coerce_date(value)
        except ValueError:
            return value

    @field_validator("payment_status", mode="before")
    @classmethod
    def _coerce_payment_status(cls, value: Any) -> PaymentStatus:
        return PaymentStatus.from_string(value)

    @model_validator(mode="after")
    def _require_slot(self) -> "Booking":
        if not (_slot_is_set(self.morning_slot) or _slot_is_set(self.evening_slot)):
            raise ValueError("booking must reserve a morning or evening slot")
        return self

    @classmethod
    def from_document(cls, document: StoreDocument) -> "Booking":
        """Create Booking from a Bookings document. The document id wins over any stored ``id`` field."""
        return cls.model_validate({**document.fields, "id": document.id})

    def to_roster_entry(self) -> RosterEntry:
        data: Dict[str, Any] = self.patient.model_dump()
        data.update(
            id=self.id,
            date=self.date,
            morningSlot=self.morning_slot,
            eveningSlot=self.evening_slot,
            paymentStatus=self.payment_status,
        )
        return RosterEntry.model_validate(data)


class RosterSnapshot(BaseModel):
    """Point-in-time view of a doctor's bookings."""

    model_config = ConfigDict(extra="forbid")

    doctor_id: Optional[str] = None
    entries: List[RosterEntry] = Field(default_factory=list)
    error: bool = False
    retriable: bool = False
    message: Optional[str] = None
