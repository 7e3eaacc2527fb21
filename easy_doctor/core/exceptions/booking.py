"""
Booking-related exceptions.
"""

from .base import EasyDoctorError


class BookingNotFoundError(EasyDoctorError):
    """Exception raised when a booking to remove or call does not exist."""

    def __init__(self, booking_id: str):
        super().__init__(f"Booking {booking_id} not found")
        self.booking_id = booking_id


class StoreUnavailableError(EasyDoctorError):
    """Exception raised when the document store cannot be reached."""
    pass
