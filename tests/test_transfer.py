# tests/test_transfer.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from study_planner.core.transfer import (
    ImportFormatError,
    build_export,
    dumps_export,
    parse_import,
    read_import,
    write_export,
)
from study_planner.tasks.task_models import ReminderSettings

from .fakes import make_task


def test_export_shape_uses_persisted_json_keys() -> None:
    task = make_task(id="42", estimated_time="90", notes="ch. 4")
    doc = build_export([task], ReminderSettings(enable_notifications=False, notification_time=8))

    assert doc == {
        "tasks": [
            {
                "id": "42",
                "name": "Read chapter",
                "subject": "Math",
                "dueDate": "2024-03-10",
                "priority": "medium",
                "estimatedTime": "90",
                "notes": "ch. 4",
                "completed": False,
                "createdAt": "2024-03-01T09:00:00",
            }
        ],
        "settings": {"enableNotifications": False, "notificationTime": 8},
    }
    assert json.loads(dumps_export([task], ReminderSettings())) == build_export([task], ReminderSettings())


def test_import_of_export_restores_equal_values() -> None:
    tasks = [make_task(id="a", priority="high"), make_task(id="b", completed=True, estimated_time=15)]
    settings = ReminderSettings(enable_notifications=True, notification_time=36)

    bundle = parse_import(dumps_export(tasks, settings))

    assert bundle.tasks == tasks
    assert bundle.settings == settings


@pytest.mark.parametrize(
    "payload",
    [
        {"tasks": []},
        {"settings": {}},
        {"tasks": {}, "settings": {}},
        {"tasks": ["x"], "settings": {}},
        {"tasks": [{"id": "a"}, {"id": "a"}], "settings": {}},
        {"tasks": [{"name": "no id"}], "settings": {}},
        [],
        "not json at all",
        b"{\"tasks\": [",
    ],
)
def test_rejects_invalid_documents(payload) -> None:
    with pytest.raises(ImportFormatError, match="Invalid data format"):
        parse_import(payload)


def test_empty_collections_are_valid() -> None:
    bundle = parse_import({"tasks": [], "settings": {}})
    assert bundle.tasks == []
    assert bundle.settings == ReminderSettings()


def test_file_round_trip(tmp_path: Path) -> None:
    path = write_export(tmp_path / "nested" / "data.json", [make_task()], ReminderSettings())

    assert path.exists()
    assert not path.with_suffix(".tmp").exists()
    assert read_import(path).tasks == [make_task()]


def test_read_import_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ImportFormatError):
        read_import(tmp_path / "nope.json")
