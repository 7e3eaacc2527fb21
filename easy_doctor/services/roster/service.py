"""
Booking roster: the bookings assigned to one doctor.
"""

import asyncio
from typing import List, Optional

from pydantic import ValidationError

from ...config import Settings, get_settings
from ...core.exceptions import BookingNotFoundError, DocumentNotFoundError, StoreUnavailableError
from ...core.models import Booking, RosterEntry, RosterSnapshot
from ...utils.logging import get_logger
from ...utils.timeouts import call_with_timeout
from ..external import FirestoreService

logger = get_logger("easy_doctor.roster")


class BookingRoster:
    """
    Point-in-time list of a doctor's bookings with removal.

    ``load`` takes a fresh snapshot; nothing is pushed to the roster
    between loads. Bookings keep the order the store returned them in.
    """

    LOAD_FAILED_MESSAGE = "Could not load bookings. Please try again."
    REMOVE_FAILED_MESSAGE = "Could not remove booking. Please try again."

    def __init__(
        self,
        documents: FirestoreService,
        doctor_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.documents = documents
        self.doctor_id = doctor_id
        self.timeout = timeout if timeout is not None else self.settings.capability_timeout
        self._bookings: List[Booking] = []
        self.error = False
        self.message: Optional[str] = None

    def __len__(self) -> int:
        return len(self._bookings)

    @property
    def bookings(self) -> List[Booking]:
        return list(self._bookings)

    @property
    def entries(self) -> List[RosterEntry]:
        return [booking.to_roster_entry() for booking in self._bookings]

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(
            doctor_id=self.doctor_id,
            entries=self.entries,
            error=self.error,
            retriable=self.error,
            message=self.message,
        )

    async def load(self, doctor_id: Optional[str] = None) -> RosterSnapshot:
        """
        Fetch every booking for the doctor.

        Documents without an embedded patient map, or that fail booking
        validation, are left out. A store failure yields an empty roster
        flagged as retriable instead of raising.
        """
        if doctor_id is not None:
            self.doctor_id = doctor_id

        self.error = False
        self.message = None

        if not self.doctor_id:
            self._bookings = []
            return self.snapshot()

        try:
            documents = await call_with_timeout(
                self.documents.query_where(self.settings.booking_collection, "doctorId", self.doctor_id),
                self.timeout,
            )
        except Exception as e:
            logger.error(f"roster: load failed for doctor {self.doctor_id}: {type(e).__name__}: {e}")
            self._bookings = []
            self.error = True
            self.message = self.LOAD_FAILED_MESSAGE
            return self.snapshot()

        bookings: List[Booking] = []
        for document in documents:
            if not isinstance(document.fields.get("patient"), dict):
                logger.debug(f"roster: skipping booking {document.id} without patient snapshot")
                continue
            try:
                bookings.append(Booking.from_document(document))
            except ValidationError as e:
                logger.warning(f"roster: skipping invalid booking {document.id}: {e.error_count()} error(s)")

        self._bookings = bookings
        logger.info(f"roster: loaded {len(bookings)} booking(s) for doctor {self.doctor_id}")
        return self.snapshot()

    async def remove(self, booking_id: str) -> bool:
        """
        Delete a booking of this roster from the store, then from the roster.

        Only bookings returned by the last ``load`` can be removed, so a
        roster never deletes another doctor's booking. The delete keeps
        running if the caller is cancelled.

        Raises:
            BookingNotFoundError: the booking is not in this roster or the
                store has no such booking; roster unchanged
            StoreUnavailableError: the delete failed; roster unchanged
        """
        if not any(booking.id == booking_id for booking in self._bookings):
            logger.warning(f"roster: booking {booking_id} is not in the roster of doctor {self.doctor_id}")
            raise BookingNotFoundError(booking_id)
        await asyncio.shield(self._delete(booking_id))
        return True

    async def _delete(self, booking_id: str) -> None:
        try:
            await call_with_timeout(
                self.documents.delete_by_id(self.settings.booking_collection, booking_id),
                self.timeout,
            )
        except DocumentNotFoundError:
            logger.info(f"roster: booking {booking_id} already removed")
            raise BookingNotFoundError(booking_id)
        except Exception as e:
            logger.error(f"roster: remove failed for booking {booking_id}: {type(e).__name__}: {e}")
            raise StoreUnavailableError(self.REMOVE_FAILED_MESSAGE)

        self._bookings = [booking for booking in self._bookings if booking.id != booking_id]
        logger.info(f"roster: removed booking {booking_id}")

    def call_target(self, booking_id: str) -> RosterEntry:
        """Patient record handed to the call screen for a booking in this roster."""
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking.to_roster_entry()
        raise BookingNotFoundError(booking_id)
