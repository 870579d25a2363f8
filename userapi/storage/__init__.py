"""In-memory storage for userapi."""

from userapi.storage.errors import (
    UserStoreError,
    UserNotFoundError,
    UserValidationError,
    UserConflictError,
)
from userapi.storage.user_store import UserStore

__all__ = [
    "UserStore",
    "UserStoreError",
    "UserNotFoundError",
    "UserValidationError",
    "UserConflictError",
]
