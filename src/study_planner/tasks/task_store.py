# src/study_planner/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from ..core.ports import KeyValueStore
from .task_dates import iso_utc, utc_now
from .task_models import ReminderSettings, Task, TaskDraft

logger = logging.getLogger(__name__)

TASKS_KEY = "studyTasks"
SETTINGS_KEY = "studyPlannerSettings"


class PersistenceError(RuntimeError):
    """The key-value store rejected a write. In-memory state already holds the new value."""


def _default_id() -> str:
    return uuid.uuid4().hex


def _persist(kv: KeyValueStore, key: str, value: Any) -> None:
    try:
        ok = kv.set(key, value)
    except Exception as e:
        logger.exception("Persistence write failed key=%s", key)
        raise PersistenceError(f"failed to persist {key!r}") from e
    if ok is False:
        logger.error("Persistence write rejected key=%s", key)
        raise PersistenceError(f"failed to persist {key!r}")


class TaskStore:
    """
    Ordered in-memory task collection, the source of truth for the session.

    Insertion order is creation order. Every mutation writes the whole list
    back to the key-value store before returning (no delta writes).
    Operations on an unknown id return None and do not write.

    Not safe for concurrent writers.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = TASKS_KEY,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = _default_id,
    ) -> None:
        self._kv = kv
        self._key = key
        self._clock = clock
        self._id_factory = id_factory
        self._tasks: list[Task] = self._load()
        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))

    def _load(self) -> list[Task]:
        raw = self._kv.get(self._key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Stored tasks under key=%s are not a list; starting empty", self._key)
            return []
        return [Task.from_dict(item) for item in raw if isinstance(item, dict)]

    def _save(self) -> None:
        _persist(self._kv, self._key, [t.to_dict() for t in self._tasks])

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _fresh_id(self) -> str:
        taken = {t.id for t in self._tasks}
        new_id = self._id_factory()
        while new_id in taken:
            new_id = self._id_factory()
        return new_id

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def all(self) -> list[Task]:
        """Snapshot copies; mutating them does not touch the store."""
        return [Task.from_dict(t.to_dict()) for t in self._tasks]

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None
        return Task.from_dict(self._tasks[idx].to_dict())

    def add(self, draft: TaskDraft) -> Task:
        if not draft.name or not draft.name.strip():
            raise ValueError("name is required")

        task = Task(
            id=self._fresh_id(),
            name=draft.name,
            subject=draft.subject,
            due_date=draft.due_date,
            priority=draft.priority,
            estimated_time=draft.estimated_time,
            notes=draft.notes or "",
            completed=False,
            created_at=iso_utc(self._clock()),
        )
        task.apply(draft)
        self._tasks.append(task)
        logger.debug("Task added id=%s subject=%s due=%s", task.id, task.subject, task.due_date)
        self._save()
        return Task.from_dict(task.to_dict())

    def edit(self, task_id: str, draft: TaskDraft) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("edit: unknown task id=%s", task_id)
            return None
        if not draft.name or not draft.name.strip():
            raise ValueError("name is required")

        task = self._tasks[idx]
        task.apply(draft)
        logger.debug("Task edited id=%s", task_id)
        self._save()
        return Task.from_dict(task.to_dict())

    def toggle_completion(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle: unknown task id=%s", task_id)
            return None
        task = self._tasks[idx]
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        self._save()
        return Task.from_dict(task.to_dict())

    def delete(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete: unknown task id=%s", task_id)
            return None
        removed = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s", task_id)
        self._save()
        return removed

    def replace_all(self, tasks: Iterable[Task]) -> None:
        incoming = [Task.from_dict(t.to_dict()) for t in tasks]
        seen: set[str] = set()
        for t in incoming:
            if not t.id:
                raise ValueError("task id is required")
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id!r}")
            seen.add(t.id)

        self._tasks = incoming
        logger.info("TaskStore replaced contents total=%d", len(self._tasks))
        self._save()

    def clear(self) -> None:
        """Drop every task and remove the stored list."""
        self._tasks = []
        try:
            self._kv.delete(self._key)
        except Exception as e:
            logger.exception("Persistence delete failed key=%s", self._key)
            raise PersistenceError(f"failed to delete {self._key!r}") from e
        logger.info("TaskStore cleared key=%s", self._key)


class SettingsStore:
    """Reminder settings record; loaded once, persisted on every save."""

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = SETTINGS_KEY,
        defaults: ReminderSettings | None = None,
    ) -> None:
        self._kv = kv
        self._key = key
        self._defaults = defaults or ReminderSettings()
        raw = kv.get(key)
        if isinstance(raw, dict):
            self._current = ReminderSettings.from_dict(raw)
        else:
            self._current = self._defaults

    @property
    def current(self) -> ReminderSettings:
        return self._current

    @property
    def defaults(self) -> ReminderSettings:
        return self._defaults

    def save(self, settings: ReminderSettings) -> ReminderSettings:
        self._current = settings
        _persist(self._kv, self._key, settings.to_dict())
        logger.info(
            "Settings saved notifications=%s lookahead_hours=%s",
            settings.enable_notifications,
            settings.notification_time,
        )
        return settings

    def reset(self) -> ReminderSettings:
        return self.save(self._defaults)
