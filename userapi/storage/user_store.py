"""In-memory user store.

Owns every User record and enforces the store invariants:
- no two users share an email (exact, case-sensitive match)
- IDs are random UUID v4 values, so a deleted user's ID is not handed out again
- created_at <= updated_at

A single lock serializes every operation, so each create/update/delete is
atomic and reads never observe a half-applied mutation. Stored users are
immutable models; callers get snapshots they cannot use to alter the store.
"""

import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional

from userapi.models.user import User
from userapi.models.user_factory import (
    create_user_base,
    generate_user_id,
    next_updated_at,
    utc_now,
)
from userapi.models.validation import check_email, check_name
from userapi.storage.errors import (
    UserConflictError,
    UserNotFoundError,
    UserValidationError,
)


class UserStore:
    """Thread-safe in-memory repository for User records."""

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_user_id,
    ):
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, str] = {}
        self._clock = clock
        self._id_factory = id_factory

    def _require(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> List[User]:
        """Get a snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def count(self) -> int:
        """Number of users currently stored."""
        with self._lock:
            return len(self._users)

    def get_user(self, user_id: str) -> User:
        """Get user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            return self._require(user_id)

    def create_user(self, name: str, email: str) -> User:
        """Create and store a new user.

        Args:
            name: Display name; must be non-empty after trimming
            email: Email address; must be well-formed and not used by any user

        Returns:
            The stored User with a fresh ID and created_at == updated_at

        Raises:
            UserValidationError: If name or email is invalid
            UserConflictError: If a user with this email already exists
        """
        error = check_name(name) or check_email(email)
        if error:
            raise UserValidationError(error)

        email = email.strip()
        with self._lock:
            if email in self._ids_by_email:
                raise UserConflictError(f"User with email {email} already exists", email)

            user = create_user_base(name, email, user_id=self._id_factory(), now=self._clock())
            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id
            return user

    def update_user(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """Update the supplied fields of an existing user.

        A field left as None is not touched. updated_at is refreshed on every
        successful call, even if the supplied values equal the current ones.

        Raises:
            UserNotFoundError: If no user has this ID
            UserValidationError: If a supplied name or email is invalid
            UserConflictError: If the email belongs to a different user
        """
        with self._lock:
            current = self._require(user_id)

            changes = {}
            if email is not None:
                error = check_email(email)
                if error:
                    raise UserValidationError(error)
                email = email.strip()
                owner_id = self._ids_by_email.get(email)
                if owner_id is not None and owner_id != user_id:
                    raise UserConflictError(f"Email {email} is already in use", email)
                changes["email"] = email

            if name is not None:
                error = check_name(name)
                if error:
                    raise UserValidationError(error)
                changes["name"] = name.strip()

            changes["updated_at"] = next_updated_at(current, self._clock)
            updated = current.model_copy(update=changes)

            if updated.email != current.email:
                del self._ids_by_email[current.email]
                self._ids_by_email[updated.email] = user_id
            self._users[user_id] = updated
            return updated

    def delete_user(self, user_id: str) -> None:
        """Permanently delete a user (no tombstone is kept).

        Raises:
            UserNotFoundError: If no user has this ID
        """
        with self._lock:
            user = self._require(user_id)
            del self._users[user_id]
            del self._ids_by_email[user.email]
