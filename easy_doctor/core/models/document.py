"""
Capability payload models.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class StoreDocument(BaseModel):
    """A document returned by the document store, with decoded fields."""

    model_config = ConfigDict(extra="forbid")

    id: str
    fields: Dict[str, Any] = Field(default_factory=dict)


class AuthProof(BaseModel):
    """Proof of a successful sign-in."""

    model_config = ConfigDict(extra="ignore")

    uid: str
    email: str
    id_token: Optional[str] = Field(default=None, repr=False)
