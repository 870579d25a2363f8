"""User data model for userapi."""

from datetime import datetime
from pydantic import BaseModel, Field


class User(BaseModel):
    """Canonical User model."""

    id: str = Field(..., description="Unique user identifier (UUID v4)")
    name: str = Field(..., description="User display name")
    email: str = Field(..., description="User email address (unique, case-sensitive)")
    created_at: datetime = Field(..., description="User creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="User last update timestamp (UTC)")

    class Config:
        """Pydantic configuration."""
        frozen = True
