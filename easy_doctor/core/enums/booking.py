"""
Booking-related enums.
"""

from enum import Enum


class PaymentStatus(str, Enum):
    """Payment state recorded on a booking."""

    PAID = "paid"
    PENDING = "pending"
    UNPAID = "unpaid"
    REFUNDED = "refunded"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value) -> "PaymentStatus":
        """Convert stored free text to PaymentStatus."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.PAID if value else cls.UNPAID
        if not value or not isinstance(value, str):
            return cls.UNKNOWN

        value = value.strip().lower().replace("-", "_").replace(" ", "_")

        if value in ["paid", "complete", "completed", "success", "succeeded"]:
            return cls.PAID
        if value in ["pending", "processing", "in_progress"]:
            return cls.PENDING
        if value in ["unpaid", "not_paid", "failed", "due"]:
            return cls.UNPAID
        if value in ["refunded", "refund"]:
            return cls.REFUNDED

        return cls.UNKNOWN

