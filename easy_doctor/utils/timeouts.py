"""
Timeouts for capability calls.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from ..core.exceptions import CapabilityTimeoutError

T = TypeVar("T")


async def call_with_timeout(awaitable: Awaitable[T], timeout: Optional[float]) -> T:
    """Await ``awaitable``; raise CapabilityTimeoutError once ``timeout`` seconds pass."""
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout or None)
    except asyncio.TimeoutError:
        raise CapabilityTimeoutError(f"Capability call exceeded {timeout}s")
