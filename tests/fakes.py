# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from study_planner.tasks.task_models import Priority, Task


@dataclass(slots=True)
class Notification:
    title: str
    message: str


@dataclass(slots=True)
class FakeNotifier:
    """Captures notifications for assertions."""

    sent: list[Notification] = field(default_factory=list)

    def notify(self, title: str, message: str) -> None:
        self.sent.append(Notification(title=title, message=message))

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.sent]


class RecordingKeyValueStore:
    """
    In-memory KeyValueStore that records every write.

    fail_writes=True makes set() return False, fail_with raises instead.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = dict(initial or {})
        self.writes: list[tuple[str, Any]] = []
        self.fail_writes = False
        self.fail_with: Exception | None = None

    def get(self, key: str) -> Any | None:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> bool:
        if self.fail_with is not None:
            raise self.fail_with
        if self.fail_writes:
            return False
        self.writes.append((key, value))
        self.data[key] = value
        return True

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class SequentialIds:
    def __init__(self, prefix: str = "t") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}{self.n}"


def make_task(**overrides: Any) -> Task:
    base: dict[str, Any] = {
        "id": "1",
        "name": "Read chapter",
        "subject": "Math",
        "due_date": "2024-03-10",
        "priority": Priority.MEDIUM,
        "estimated_time": 30,
        "notes": "",
        "completed": False,
        "created_at": "2024-03-01T09:00:00",
    }
    base.update(overrides)
    base["priority"] = Priority.from_raw(base["priority"])
    return Task(**base)
