"""
Shared HTTP plumbing for the Firebase adapters.
"""

from typing import Any, Dict, Optional, Type
import httpx

from ...core.exceptions import CapabilityTimeoutError, EasyDoctorError, ExternalAPIError
from ...config import ExternalAPIConfig, get_settings


class ExternalAPIService:
    """Base class for services that call a Firebase REST API."""

    error_class: Type[ExternalAPIError] = ExternalAPIError

    def __init__(
        self,
        config: Optional[ExternalAPIConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ExternalAPIConfig.from_settings(get_settings())
        self.timeout = self.config.timeout
        self.transport = transport

    def _status_error(self, response: httpx.Response) -> EasyDoctorError:
        """Map an error response to an exception. Subclasses refine this."""
        return self.error_class(f"HTTP error {response.status_code}")

    async def _make_request(
        self,
        method: str,
        url: str,
        json: Optional[Any] = None,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
    ) -> Any:
        """Make HTTP request with error handling."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    json=json,
                    params=params,
                    headers=headers or {},
                )
                response.raise_for_status()
                if not response.content:
                    return None
                return response.json()
        except httpx.TimeoutException:
            raise CapabilityTimeoutError("Request timed out")
        except httpx.HTTPStatusError as e:
            raise self._status_error(e.response)
        except (httpx.HTTPError, ValueError) as e:
            raise self.error_class(f"Request failed: {e}")
