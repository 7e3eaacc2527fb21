"""
Utility modules for the Easy Doctor core.
"""

from .date import Clock, system_clock, epoch_ms, parse_epoch_ms, coerce_date
from .logging import get_logger
from .validation import ValidationUtils
from .timeouts import call_with_timeout

__all__ = [
    "Clock",
    "system_clock",
    "parse_epoch_ms",
    "epoch_ms",
    "coerce_date",
    "get_logger",
    "ValidationUtils",
    "call_with_timeout",
]
