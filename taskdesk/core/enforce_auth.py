"""Credential Rule Enforcement — pure checks for registration and login input.

Invariants:
    - Passwords are 8..72 UTF-8 bytes (72 is the bcrypt input limit)
    - Emails are compared and stored lower-cased
    - Functions raise FieldValidationError, never return error dicts
"""

from taskdesk.core.errors import FieldValidationError


PASSWORD_MIN_LENGTH: int = 8
PASSWORD_MAX_BYTES: int = 72
NAME_MAX_LENGTH: int = 100


def check_password(password: str) -> str:
    if len(password) < PASSWORD_MIN_LENGTH:
        raise FieldValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            "password",
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise FieldValidationError(
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes",
            "password",
        )
    return password


def check_name(name: str) -> str:
    stripped = name.strip()
    if not stripped:
        raise FieldValidationError("Name is required", "name")
    if len(stripped) > NAME_MAX_LENGTH:
        raise FieldValidationError(
            f"Name must be at most {NAME_MAX_LENGTH} characters", "name",
        )
    return stripped


def normalize_email(email: str) -> str:
    return email.strip().lower()
