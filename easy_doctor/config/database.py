"""
Local session database configuration.
"""

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """SQLite key-value store settings."""

    kv_db_path: str = "easy_doctor_session.db"
    connection_timeout: float = 30.0
