"""Domain Types — verifies the closed task status set and resolved identity.

Tests:
    - TaskStatus has exactly three members with wire values
    - TaskStatus compares equal to its string value (str Enum)
    - AuthenticatedUser is immutable
"""

import dataclasses

import pytest

from taskdesk.core.domain_types import AuthenticatedUser, TaskStatus, UserId


def test_task_status_has_exactly_three_states():
    assert [s.value for s in TaskStatus] == ["todo", "in_progress", "done"]


def test_task_status_is_str_enum():
    assert TaskStatus.IN_PROGRESS == "in_progress"
    assert TaskStatus("done") is TaskStatus.DONE


def test_authenticated_user_is_frozen():
    user = AuthenticatedUser(id=UserId("u1"), email="a@example.com", name="A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.id = UserId("u2")
