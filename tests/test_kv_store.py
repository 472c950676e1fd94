# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

from study_planner.storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore
from study_planner.tasks.task_models import Priority, TaskDraft
from study_planner.tasks.task_store import TaskStore


def test_sqlite_set_get_delete(tmp_path: Path) -> None:
    kv = SqliteKeyValueStore(tmp_path / "db" / "planner.sqlite3")

    assert kv.get("missing") is None
    assert kv.set("studyTasks", [{"id": "1", "name": "Тест"}]) is True
    assert kv.get("studyTasks") == [{"id": "1", "name": "Тест"}]

    assert kv.set("studyTasks", []) is True
    assert kv.get("studyTasks") == []
    assert kv.count_keys() == 1

    kv.delete("studyTasks")
    assert kv.get("studyTasks") is None


def test_sqlite_survives_reopen_with_task_store(tmp_path: Path) -> None:
    db = tmp_path / "planner.sqlite3"
    store = TaskStore(SqliteKeyValueStore(db))
    task = store.add(
        TaskDraft(name="Vocabulary", subject="French", due_date="2024-05-01", priority=Priority.LOW)
    )
    store.toggle_completion(task.id)

    reopened = TaskStore(SqliteKeyValueStore(db))

    assert [t.to_dict() for t in reopened.all()] == [store.get(task.id).to_dict()]


def test_in_memory_store_copies_values() -> None:
    value = {"enableNotifications": True, "notificationTime": 24}
    kv = InMemoryKeyValueStore({"studyPlannerSettings": value})

    value["notificationTime"] = 1
    loaded = kv.get("studyPlannerSettings")
    loaded["enableNotifications"] = False

    assert kv.get("studyPlannerSettings") == {"enableNotifications": True, "notificationTime": 24}
    assert "studyPlannerSettings" in kv
    kv.delete("studyPlannerSettings")
    assert kv.get("studyPlannerSettings") is None
