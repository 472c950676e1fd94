# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from study_planner.core.session import StudySession
from study_planner.tasks.task_store import SettingsStore, TaskStore

from .fakes import FakeNotifier, RecordingKeyValueStore, SequentialIds

# Local wall-clock "now" shared by store, session and assertions.
NOW = datetime(2024, 3, 10, 9, 0, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.create_session.

    A SimpleNamespace keeps tests independent from the process environment.
    """
    return SimpleNamespace(
        app_name="study-planner-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        store_db_path=tmp_path / "data" / "planner.sqlite3",
        export_path=tmp_path / "data" / "export.json",
        tasks_key="studyTasks",
        settings_key="studyPlannerSettings",
        default_enable_notifications=True,
        default_notification_time=24,
    )


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def kv() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def store(kv: RecordingKeyValueStore, clock) -> TaskStore:
    return TaskStore(kv, clock=clock, id_factory=SequentialIds())


@pytest.fixture()
def settings_store(kv: RecordingKeyValueStore) -> SettingsStore:
    return SettingsStore(kv)


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def session(store: TaskStore, settings_store: SettingsStore, notifier: FakeNotifier, clock) -> StudySession:
    return StudySession(store, settings_store, notifier, clock=clock)
