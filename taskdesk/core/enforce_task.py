"""Task Rule Enforcement — pure validation of task input before it reaches storage.

Invariants:
    - Functions are PURE: return the value to store or raise FieldValidationError
    - Titles are stored exactly as sent; the 1-100 bound applies to the raw string
    - TITLE_MAX_LENGTH (100) is the single source of truth for the title bound
    - parse_status accepts only the three TaskStatus values, no transition graph

Design Decisions:
    - Duplicated by pydantic at the HTTP boundary: the service is callable
      without going through a request, so the core still checks
"""

from taskdesk.core.domain_types import TaskStatus
from taskdesk.core.errors import FieldValidationError


TITLE_MAX_LENGTH: int = 100


def check_title(title: str | None) -> str:
    """Bound-check a task title. Returns it unchanged."""
    if title is None or not title.strip():
        raise FieldValidationError("Title is required", "title")
    if len(title) > TITLE_MAX_LENGTH:
        raise FieldValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters "
            f"(got {len(title)})",
            "title",
        )
    return title


def normalize_description(description: str | None) -> str | None:
    """An empty description is stored as null; anything else as sent."""
    return description or None


def parse_status(value: TaskStatus | str) -> TaskStatus:
    """Coerce a raw value into TaskStatus or raise on anything outside the enum."""
    if isinstance(value, TaskStatus):
        return value
    try:
        return TaskStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise FieldValidationError(
            f"Invalid status {value!r}. Expected one of: {allowed}",
            "status",
        )
