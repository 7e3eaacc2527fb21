"""
External API configuration.
"""

from typing import Optional
from pydantic import BaseModel

from .settings import Settings


class ExternalAPIConfig(BaseModel):
    """Firebase endpoint configuration."""

    api_key: Optional[str] = None
    project_id: Optional[str] = None
    auth_base_url: str = "https://identitytoolkit.googleapis.com/v1"
    firestore_base_url: str = "https://firestore.googleapis.com/v1"
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExternalAPIConfig":
        return cls(
            api_key=settings.firebase_api_key,
            project_id=settings.firebase_project_id,
            auth_base_url=settings.firebase_auth_base,
            firestore_base_url=settings.firestore_base,
            timeout=settings.capability_timeout,
        )

    def get_sign_in_url(self) -> str:
        """Get the password sign-in endpoint."""
        return f"{self.auth_base_url}/accounts:signInWithPassword"

    def get_documents_url(self) -> str:
        """Get the root documents URL for the default database."""
        return (
            f"{self.firestore_base_url}/projects/{self.project_id}"
            "/databases/(default)/documents"
        )

    def get_run_query_url(self) -> str:
        return f"{self.get_documents_url()}:runQuery"

    def get_document_url(self, collection: str, document_id: str) -> str:
        return f"{self.get_documents_url()}/{collection}/{document_id}"

    def is_auth_configured(self) -> bool:
        """Check if Firebase Auth is properly configured."""
        return bool(self.api_key)

    def is_firestore_configured(self) -> bool:
        """Check if Firestore is properly configured."""
        return bool(self.project_id)
