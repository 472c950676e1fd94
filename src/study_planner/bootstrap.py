# src/study_planner/bootstrap.py

"""
Composition root.

- loads settings once (or takes injected ones),
- configures logging under the data dir,
- ensures local (gitignored) directories exist,
- wires the key-value backend, stores and notifier into a StudySession.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from .config import get_settings
from .core.notify import LoggingNotifier
from .core.ports import KeyValueStore, Notifier
from .core.session import StudySession
from .logging_setup import setup_logging
from .storage.kv_store import SqliteKeyValueStore
from .tasks.task_dates import utc_now
from .tasks.task_models import ReminderSettings
from .tasks.task_store import SettingsStore, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.export_path.parent.mkdir(parents=True, exist_ok=True)


def configure_logging(settings=None) -> None:
    if settings is None:
        settings = get_settings()
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)


def create_session(
    *,
    settings=None,
    kv: KeyValueStore | None = None,
    notifier: Notifier | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> StudySession:
    """
    Build a StudySession.

    settings, kv and notifier are injectable for tests; by default the
    SQLite store under settings.store_db_path and a LoggingNotifier are used.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = SqliteKeyValueStore(settings.store_db_path)

    defaults = ReminderSettings(
        enable_notifications=settings.default_enable_notifications,
        notification_time=settings.default_notification_time,
    )
    task_store = TaskStore(kv, key=settings.tasks_key, clock=clock)
    settings_store = SettingsStore(kv, key=settings.settings_key, defaults=defaults)

    session = StudySession(
        task_store,
        settings_store,
        notifier or LoggingNotifier(),
        clock=clock,
    )
    logger.info("Session ready for %s tasks=%d", getattr(settings, "app_name", "study-planner"), len(task_store))
    return session
