"""
User models for registration and lookup.
"""

from pydantic import Field

from minesentry.models.base import CamelModel


class UserCreate(CamelModel):
    """Model for registering a new user."""
    username: str = Field(..., min_length=1, description="Unique login name")
    password: str = Field(..., min_length=1, description="Account password")


class User(CamelModel):
    """Stored user record."""
    id: str
    username: str
    password: str


class UserPublic(CamelModel):
    """User as returned by the API (never includes the password)."""
    id: str
    username: str
