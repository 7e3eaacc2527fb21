"""
Session routes: resume and login.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ...core.enums import SessionStatus
from ...core.models import NavigationContext, SessionResult
from ...services import ServiceContainer


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class SessionResponse(BaseModel):
    """Public view of a session outcome. Identity details beyond navigation stay server-side."""

    status: SessionStatus
    message: Optional[str] = None
    navigation: Optional[NavigationContext] = None

    @classmethod
    def from_result(cls, result: SessionResult) -> "SessionResponse":
        return cls(status=result.status, message=result.message, navigation=result.navigation)


class SessionHandler:
    """
    Thin renderer over SessionGate outcomes.

    Every outcome is returned with HTTP 200; ``status`` carries the variant
    and ``navigation`` is set only when the session was resumed.
    """

    def __init__(self, container: ServiceContainer):
        self.container = container
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("/resume", response_model=SessionResponse)
        async def resume_session():
            gate = self.container.session_gate()
            return SessionResponse.from_result(await gate.check_resumable_session())

        @self.router.post("/login", response_model=SessionResponse)
        async def login(body: LoginRequest):
            gate = self.container.session_gate()
            return SessionResponse.from_result(await gate.login(body.email, body.password))
