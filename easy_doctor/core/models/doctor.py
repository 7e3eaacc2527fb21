"""
Doctor identity models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .document import StoreDocument


class NavigationContext(BaseModel):
    """What the home screen receives after a resume or login."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    specialty_filter: Optional[str] = Field(default=None, alias="specialtyFilter")
    profile_image: Optional[str] = Field(default=None, alias="profileImage")
    user_name: Optional[str] = Field(default=None, alias="userName")


class DoctorIdentity(BaseModel):
    """Doctor profile as stored in the ``Doctor`` collection."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: Optional[str] = None
    specialty: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_document(cls, document: StoreDocument, email: Optional[str] = None) -> "DoctorIdentity":
        """Create DoctorIdentity from a Doctor document."""
        fields = document.fields
        return cls(
            id=document.id,
            email=fields.get("email") or email or "",
            name=fields.get("name"),
            specialty=fields.get("specialty"),
            image_url=fields.get("imageUrl"),
        )

    def to_navigation(self) -> NavigationContext:
        return NavigationContext(
            specialty_filter=self.specialty,
            profile_image=self.image_url,
            user_name=self.name,
        )
