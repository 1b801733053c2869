"""
Unit tests for Task domain model.
"""

import pytest
from taskboard.domain.models.base import ValidationError
from taskboard.domain.models.task import (
    DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Task, TaskStatus
)


class TestTask:
    """Test cases for Task domain model."""

    def test_create_task_success(self):
        """Test successful task creation."""
        task = Task.create(title="  Write report ", owner_id="user123", description="Q3")

        assert task.title == "Write report"
        assert task.owner_id == "user123"
        assert task.description == "Q3"
        assert task.status == TaskStatus.PENDING
        assert task.is_new

    def test_title_required(self):
        """Test validation of blank title."""
        with pytest.raises(ValidationError) as exc_info:
            Task.create(title="   ", owner_id="user123")
        assert exc_info.value.field == "title"

    def test_title_too_long(self):
        with pytest.raises(ValidationError):
            Task.create(title="x" * (TITLE_MAX_LENGTH + 1), owner_id="user123")

    def test_description_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            Task.create(
                title="Title",
                owner_id="user123",
                description="x" * (DESCRIPTION_MAX_LENGTH + 1)
            )
        assert exc_info.value.field == "description"

    def test_owner_required(self):
        with pytest.raises(ValidationError) as exc_info:
            Task.create(title="Title", owner_id="")
        assert exc_info.value.field == "owner_id"

    def test_status_from_string(self):
        task = Task(title="Title", owner_id="user123", status="in_progress")
        assert task.status == TaskStatus.IN_PROGRESS

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            Task(title="Title", owner_id="user123", status="archived")

    def test_unknown_status_from_persistence_rejected(self):
        with pytest.raises(ValueError):
            Task(id="t1", title="Title", owner_id="user123", status="inProgress")
