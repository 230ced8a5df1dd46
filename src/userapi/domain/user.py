"""Pydantic models for user management."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class User(BaseModel):
    """Stored user record."""

    id: UUID = Field(default_factory=uuid4, description="Unique user identifier")
    first_name: str = Field(min_length=1, description="Given name")
    last_name: str = Field(min_length=1, description="Family name")
    email: str = Field(min_length=3, description="Contact email address")
    created_at: datetime = Field(
        default_factory=datetime.now, description="When the user was created"
    )


class UserResponse(BaseModel):
    """Public representation of a user returned by the API.

    Omits storage-only fields such as timestamps.
    """

    id: UUID
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class UserCreate(BaseModel):
    """Request body for creating a user."""

    first_name: str = Field(min_length=1, description="Given name")
    last_name: str = Field(min_length=1, description="Family name")
    email: str = Field(min_length=3, description="Contact email address")
