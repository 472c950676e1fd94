# src/study_planner/core/transfer.py

"""
Import/export of the whole planner state as one JSON document:

    {"tasks": [...], "settings": {...}}

Export serializes verbatim. Import is all-or-nothing: a document without
"tasks" or "settings" is rejected before anything is replaced.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..tasks.task_models import ReminderSettings, Task

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "study_planner_data.json"


class ImportFormatError(ValueError):
    """The import document is not a valid planner export."""


@dataclass(frozen=True, slots=True)
class ImportBundle:
    tasks: list[Task]
    settings: ReminderSettings


def build_export(tasks: list[Task], settings: ReminderSettings) -> dict[str, Any]:
    return {
        "tasks": [t.to_dict() for t in tasks],
        "settings": settings.to_dict(),
    }


def dumps_export(tasks: list[Task], settings: ReminderSettings) -> str:
    return json.dumps(build_export(tasks, settings), ensure_ascii=False)


def parse_import(data: str | bytes | dict[str, Any]) -> ImportBundle:
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ImportFormatError("Invalid data format") from e

    if not isinstance(data, dict):
        raise ImportFormatError("Invalid data format")

    raw_tasks = data.get("tasks")
    raw_settings = data.get("settings")
    if not isinstance(raw_tasks, list) or not isinstance(raw_settings, dict):
        raise ImportFormatError("Invalid data format")
    if not all(isinstance(item, dict) for item in raw_tasks):
        raise ImportFormatError("Invalid data format")

    tasks = [Task.from_dict(item) for item in raw_tasks]
    ids = [t.id for t in tasks]
    if not all(ids) or len(set(ids)) != len(ids):
        raise ImportFormatError("Invalid data format")

    return ImportBundle(tasks=tasks, settings=ReminderSettings.from_dict(raw_settings))


def write_export(path: str | Path, tasks: list[Task], settings: ReminderSettings) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    tmp.write_text(json.dumps(build_export(tasks, settings), ensure_ascii=False, indent=2), "utf-8")
    os.replace(tmp, path)
    with contextlib.suppress(OSError):
        os.chmod(path, 0o600)
    logger.info("Exported %d tasks to %s", len(tasks), path)
    return path


def read_import(path: str | Path) -> ImportBundle:
    path = Path(path)
    try:
        raw = path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ImportFormatError(f"Cannot read {path}") from e
    return parse_import(raw)
