"""Typed failures raised by the user store.

Every failure is an expected, caller-recoverable condition. The HTTP layer maps
each class to a status code; the store itself never logs or retries.
"""


class UserStoreError(Exception):
    """Base class for user store failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFoundError(UserStoreError):
    """The referenced user ID does not exist."""

    def __init__(self, user_id: str):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class UserValidationError(UserStoreError):
    """Input failed a well-formedness check (empty name, empty or malformed email)."""


class UserConflictError(UserStoreError):
    """Input is well-formed but the email already belongs to another user."""

    def __init__(self, message: str, email: str):
        super().__init__(message)
        self.email = email
