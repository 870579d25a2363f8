"""Data models for userapi."""

from userapi.models.user import User
from userapi.models.user_factory import create_user_base, generate_user_id, utc_now

__all__ = [
    "User",
    "create_user_base",
    "generate_user_id",
    "utc_now",
]
