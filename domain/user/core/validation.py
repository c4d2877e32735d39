"""Validation rules for candidate user records."""

import re
from typing import Optional

from domain.user.core.entities.user import UserCandidate

USERNAME_EMPTY = "username must not be empty."
EMAIL_EMPTY = "email must not be empty."
EMAIL_INVALID = "invalid email format."

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_user(candidate: UserCandidate) -> Optional[str]:
    """Check a candidate record.

    Rules are checked in order and the first failure wins.

    Args:
        candidate: Username/email pair to check

    Returns:
        Error message, or None if the candidate is valid

    Examples:
        >>> validate_user(UserCandidate("ada", "ada@example.com")) is None
        True
        >>> validate_user(UserCandidate("  ", "not-an-email"))
        'username must not be empty.'
        >>> validate_user(UserCandidate("ada", "ada@example"))
        'invalid email format.'
    """
    if _is_blank(candidate.username):
        return USERNAME_EMPTY

    if _is_blank(candidate.email):
        return EMAIL_EMPTY

    if not EMAIL_PATTERN.fullmatch(candidate.email or ""):
        return EMAIL_INVALID

    return None
