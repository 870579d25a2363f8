"""User creation factory for userapi.

This module centralizes how a new User gets its identity and timestamps so the
store never builds one by hand.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from userapi.models.user import User


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def generate_user_id() -> str:
    """Generate a new user ID (random UUID v4)."""
    return str(uuid.uuid4())


def create_user_base(
    name: str,
    email: str,
    user_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> User:
    """Create a user with a fresh identity.

    Name and email are trimmed of surrounding whitespace. The email is not
    lowercased.

    Args:
        name: User display name (already validated)
        email: User email (already validated)
        user_id: Explicit ID to use (defaults to a new UUID v4)
        now: Creation time (defaults to the current UTC time)

    Returns:
        User with created_at == updated_at
    """
    if now is None:
        now = utc_now()
    return User(
        id=user_id or generate_user_id(),
        name=name.strip(),
        email=email.strip(),
        created_at=now,
        updated_at=now,
    )


def next_updated_at(user: User, clock: Callable[[], datetime] = utc_now) -> datetime:
    """Timestamp for a mutation of `user`, never earlier than its current updated_at."""
    now = clock()
    if now < user.updated_at:
        return user.updated_at
    return now
