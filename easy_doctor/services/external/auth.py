"""
Firebase Authentication adapter.
"""

import httpx

from ...core.exceptions import AuthProviderError, EasyDoctorError, InvalidCredentialsError
from ...core.models import AuthProof
from .service import ExternalAPIService


class FirebaseAuthService(ExternalAPIService):
    """Email/password sign-in against the Identity Toolkit REST API."""

    error_class = AuthProviderError

    def _status_error(self, response: httpx.Response) -> EasyDoctorError:
        # Identity Toolkit answers 400 for unknown email, wrong password and disabled users.
        if response.status_code == 400:
            return InvalidCredentialsError("Invalid credentials")
        return AuthProviderError(f"HTTP error {response.status_code}")

    async def sign_in(self, email: str, password: str) -> AuthProof:
        """
        Verify an email/password pair.

        Args:
            email: Doctor email
            password: Doctor password

        Returns:
            AuthProof for the signed-in account

        Raises:
            InvalidCredentialsError: the provider rejected the credentials
            AuthProviderError: the provider could not be reached
            CapabilityTimeoutError: the request timed out
        """
        if not self.config.is_auth_configured():
            raise AuthProviderError("Firebase Auth is not configured")

        data = await self._make_request(
            "POST",
            self.config.get_sign_in_url(),
            json={"email": email, "password": password, "returnSecureToken": True},
            params={"key": self.config.api_key},
        )

        if not isinstance(data, dict) or not data.get("localId"):
            raise AuthProviderError("Malformed sign-in response")

        return AuthProof(
            uid=data["localId"],
            email=data.get("email") or email,
            id_token=data.get("idToken"),
        )
