"""
Application settings and configuration.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Easy Doctor"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # Session
    session_ttl_seconds: int = Field(default=60 * 60)
    kv_db_path: str = Field(default="easy_doctor_session.db")

    # Firebase
    firebase_api_key: Optional[str] = Field(default=None)
    firebase_project_id: Optional[str] = Field(default=None)
    firebase_auth_base: str = Field(default="https://identitytoolkit.googleapis.com/v1")
    firestore_base: str = Field(default="https://firestore.googleapis.com/v1")
    capability_timeout: float = Field(default=10.0)

    # Collections
    doctor_collection: str = Field(default="Doctor")
    booking_collection: str = Field(default="Bookings")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8001)

    # Logging
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
