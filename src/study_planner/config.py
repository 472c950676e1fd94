# src/study_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "STUDY"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    store_db_path: Path
    export_path: Path

    # ---- Storage keys ----
    tasks_key: str
    settings_key: str

    # ---- Reminder defaults (used until the user saves settings) ----
    default_enable_notifications: bool
    default_notification_time: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "study-planner")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/study_planner"))
        store_db_path = _env_path(_k("STORE_DB_PATH"), data_dir / "planner.sqlite3")
        export_path = _env_path(_k("EXPORT_PATH"), data_dir / "study_planner_data.json")

        tasks_key = _env(_k("TASKS_KEY"), "studyTasks")
        settings_key = _env(_k("SETTINGS_KEY"), "studyPlannerSettings")

        default_enable_notifications = _env_bool(_k("ENABLE_NOTIFICATIONS"), True)
        default_notification_time = _env_int(_k("NOTIFICATION_TIME"), 24)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_db_path=store_db_path,
            export_path=export_path,
            tasks_key=tasks_key,
            settings_key=settings_key,
            default_enable_notifications=default_enable_notifications,
            default_notification_time=default_notification_time,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
