"""
Health check handler.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from ...config import ExternalAPIConfig, Settings, get_settings


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float
    auth_configured: bool
    store_configured: bool


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.external = ExternalAPIConfig.from_settings(self.settings)
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _configured(self) -> bool:
        return self.external.is_auth_configured() and self.external.is_firestore_configured()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime,
                auth_configured=self.external.is_auth_configured(),
                store_configured=self.external.is_firestore_configured(),
            )

        @self.router.get("/ready")
        async def readiness_check(response: Response):
            """Ready once both Firebase capabilities are configured."""
            if not self._configured():
                response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
                return {"status": "not_configured"}
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            return {"status": "alive"}
