"""
FastAPI application factory and configuration.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import get_settings
from ..services import ServiceContainer
from .middleware import SecurityHeaders, LoggingMiddleware
from .handlers import HealthHandler, SessionHandler, RosterHandler


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = container.settings if container else get_settings()
    container = container or ServiceContainer(settings=settings)

    app = FastAPI(
        title=settings.app_name,
        description="Doctor session continuity and booking roster",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    health_handler = HealthHandler(settings)
    session_handler = SessionHandler(container)
    roster_handler = RosterHandler(container)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(session_handler.router, prefix="/session", tags=["session"])
    app.include_router(roster_handler.router, prefix="/roster", tags=["roster"])

    return app
