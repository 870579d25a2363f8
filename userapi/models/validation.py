"""Input validation for user fields.

These checks run before any store state is touched. Each returns the error
message for an invalid value, or None when the value is acceptable.
"""

from typing import Optional

import email_validator
from email_validator import EmailNotValidError, validate_email

from userapi.models.constants import (
    EMAIL_EMPTY_MESSAGE,
    EMAIL_INVALID_MESSAGE,
    NAME_EMPTY_MESSAGE,
)

# Reserved domains (localhost, .local, .test, .invalid, ...) are still
# syntactically valid addresses; only syntax is checked here.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def is_valid_email(email: str) -> bool:
    """Check email syntax only (no DNS or deliverability rules).

    Dotless and reserved domains are accepted. The address itself is never
    rewritten here: callers keep the value they were given, so uniqueness
    stays an exact, case-sensitive comparison.
    """
    try:
        validate_email(email, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def check_name(name: str) -> Optional[str]:
    """Return an error message if the name is empty after trimming."""
    if not name.strip():
        return NAME_EMPTY_MESSAGE
    return None


def check_email(email: str) -> Optional[str]:
    """Return an error message if the email is empty or malformed.

    Args:
        email: Raw email as supplied by the caller

    Returns:
        Error message, or None if the trimmed email is a valid address
    """
    trimmed = email.strip()
    if not trimmed:
        return EMAIL_EMPTY_MESSAGE
    if not is_valid_email(trimmed):
        return EMAIL_INVALID_MESSAGE
    return None
