"""
API route handlers.
"""

from .health import HealthHandler
from .session import SessionHandler
from .roster import RosterHandler

__all__ = [
    "HealthHandler",
    "SessionHandler",
    "RosterHandler",
]
