"""
Roster routes: list, remove and call target for the signed-in doctor.
"""

from fastapi import APIRouter, HTTPException, Query, Response, status

from ...core.exceptions import BookingNotFoundError, CapabilityTimeoutError, StoreUnavailableError
from ...core.models import DoctorIdentity, RosterSnapshot
from ...services import ServiceContainer
from ...services.roster import BookingRoster
from ...services.session import SessionGate


class RosterHandler:
    """Handler for the doctor's booking list. Doctors are addressed by login email."""

    def __init__(self, container: ServiceContainer):
        self.container = container
        self.router = APIRouter()
        self._setup_routes()

    async def _doctor(self, email: str) -> DoctorIdentity:
        gate: SessionGate = self.container.session_gate()
        try:
            identity = await gate.resolve_doctor(email)
        except (StoreUnavailableError, CapabilityTimeoutError):
            raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, BookingRoster.LOAD_FAILED_MESSAGE)
        if identity is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, SessionGate.PROFILE_MISSING_MESSAGE)
        return identity

    def _setup_routes(self):

        @self.router.get("", response_model=RosterSnapshot)
        async def list_bookings(email: str = Query(...)):
            identity = await self._doctor(email)
            roster = self.container.booking_roster(identity.id)
            return await roster.load()

        @self.router.delete("/bookings/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def remove_booking(booking_id: str, email: str = Query(...)):
            identity = await self._doctor(email)
            roster = self.container.booking_roster(identity.id)
            snapshot = await roster.load()
            if snapshot.error:
                raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, snapshot.message)
            try:
                await roster.remove(booking_id)
            except BookingNotFoundError as e:
                raise HTTPException(status.HTTP_404_NOT_FOUND, str(e))
            except StoreUnavailableError as e:
                raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.router.get("/bookings/{booking_id}/call")
        async def call_target(booking_id: str, email: str = Query(...)):
            identity = await self._doctor(email)
            roster = self.container.booking_roster(identity.id)
            snapshot = await roster.load()
            if snapshot.error:
                raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, snapshot.message)
            try:
                return roster.call_target(booking_id).as_view()
            except BookingNotFoundError as e:
                raise HTTPException(status.HTTP_404_NOT_FOUND, str(e))
