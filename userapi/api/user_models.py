"""Request/response models for user endpoints."""

from typing import List, Optional
from pydantic import BaseModel, Field

from userapi.models.user import User


class CreateUserRequest(BaseModel):
    """Request model for creating a user."""
    name: str = Field(..., description="User display name")
    email: str = Field(..., description="User email address")


class UpdateUserRequest(BaseModel):
    """Request model for updating a user.

    Omitted (or null) fields are left unchanged.
    """
    name: Optional[str] = Field(None, description="New display name")
    email: Optional[str] = Field(None, description="New email address")


class UserOut(BaseModel):
    """User as serialized over HTTP (timestamps in epoch seconds)."""
    id: str
    name: str
    email: str
    created_at: int
    updated_at: int

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=int(user.created_at.timestamp()),
            updated_at=int(user.updated_at.timestamp()),
        )


class UserResponse(BaseModel):
    """Response wrapping a single user."""
    user: UserOut


class UsersResponse(BaseModel):
    """Response for the user list."""
    users: List[UserOut]
    count: int


class HealthResponse(BaseModel):
    """Response for the health check."""
    status: str
    service: str
    timestamp: int


class ErrorDetail(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    """Error envelope shared by every failing response."""
    error: ErrorDetail
