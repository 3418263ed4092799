"""
User schemas.

The user record is a singleton per device.
"""

from typing import Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant, new_id, utcnow


class User(CamelModel):
    """The device owner."""

    user_id: str
    display_name: str
    farcaster_id: Optional[str] = Field(None, description="Optional external identity id")
    created_at: Instant


class UserCreate(CamelModel):
    """Schema for creating or replacing the user record."""

    user_id: str = Field(default_factory=new_id)
    display_name: str = Field(..., min_length=1, max_length=255)
    farcaster_id: Optional[str] = None
    created_at: Instant = Field(default_factory=utcnow)

    def to_entity(self) -> User:
        return User(**self.model_dump())


class UserUpdate(CamelModel):
    """Schema for a partial user update."""

    display_name: Optional[str] = Field(None, min_length=1, max_length=255)
    farcaster_id: Optional[str] = None
