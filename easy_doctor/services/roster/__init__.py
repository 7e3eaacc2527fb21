"""
Booking roster module.
"""

from .service import BookingRoster

__all__ = ["BookingRoster"]
