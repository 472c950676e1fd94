# src/study_planner/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class Priority(StrEnum):
    """Task priority. Sorting order is high < medium < low."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def from_raw(cls, raw: Any) -> Priority:
        if isinstance(raw, Priority):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            logger.debug("Unknown priority %r, using medium", raw)
            return cls.MEDIUM


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


@dataclass(frozen=True, slots=True)
class TaskDraft:
    """Editable task fields, as entered in the task form."""

    name: str
    subject: str
    due_date: str
    priority: Priority = Priority.MEDIUM
    estimated_time: int | float | str = 0
    notes: str = ""


@dataclass(slots=True)
class Task:
    id: str
    name: str
    subject: str
    due_date: str
    priority: Priority
    estimated_time: int | float | str
    notes: str
    completed: bool
    created_at: str

    def apply(self, draft: TaskDraft) -> None:
        """Overwrite the editable fields; id, created_at and completed stay as they are."""
        self.name = draft.name
        self.subject = draft.subject
        self.due_date = draft.due_date
        self.priority = Priority.from_raw(draft.priority)
        self.estimated_time = draft.estimated_time
        self.notes = draft.notes or ""

    def to_draft(self) -> TaskDraft:
        return TaskDraft(
            name=self.name,
            subject=self.subject,
            due_date=self.due_date,
            priority=self.priority,
            estimated_time=self.estimated_time,
            notes=self.notes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "subject": self.subject,
            "dueDate": self.due_date,
            "priority": self.priority.value,
            "estimatedTime": self.estimated_time,
            "notes": self.notes,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        est = raw.get("estimatedTime", 0)
        if isinstance(est, bool) or not isinstance(est, (int, float, str)):
            est = str(est) if est is not None else 0
        return cls(
            id=str(raw.get("id") or ""),
            name=str(raw.get("name") or ""),
            subject=str(raw.get("subject") or ""),
            due_date=str(raw.get("dueDate") or ""),
            priority=Priority.from_raw(raw.get("priority")),
            estimated_time=est,
            notes=str(raw.get("notes") or ""),
            completed=bool(raw.get("completed", False)),
            created_at=str(raw.get("createdAt") or ""),
        )


@dataclass(frozen=True, slots=True)
class ReminderSettings:
    """
    User-facing reminder settings.

    notification_time is the lookahead window in hours for due-soon reminders.
    """

    enable_notifications: bool = True
    notification_time: int = 24

    def to_dict(self) -> dict[str, Any]:
        return {
            "enableNotifications": self.enable_notifications,
            "notificationTime": self.notification_time,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ReminderSettings:
        default = cls()
        try:
            hours = int(raw.get("notificationTime", default.notification_time))
        except (TypeError, ValueError):
            hours = default.notification_time
        return cls(
            enable_notifications=bool(raw.get("enableNotifications", default.enable_notifications)),
            notification_time=hours,
        )
