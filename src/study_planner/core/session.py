# src/study_planner/core/session.py

"""
Command/query interface for one planner session.

Each UI action maps to one method here. Commands mutate the stores and send
notifications; queries recompute their view from the current task snapshot
every time (nothing is cached between calls).

The session also owns the small pieces of view state:
- form mode (creating a new task vs editing an existing one)
- the calendar month on screen
- the selected calendar day (None until the user picks one)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any

from ..tasks.task_calendar import DayCell, month_grid, month_title, shift_month
from ..tasks.task_dates import to_local_naive, utc_now
from ..tasks.task_models import ReminderSettings, Task, TaskDraft
from ..tasks.task_progress import ProgressReport, progress_report
from ..tasks.task_query import TaskCounts, query, task_counts, tasks_on_date
from ..tasks.task_reminders import Reminder, due_soon_reminders
from ..tasks.task_store import SettingsStore, TaskStore
from .ports import Notifier
from .transfer import ImportFormatError, build_export, parse_import, read_import, write_export

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IdleForm:
    """Form submits create a new task."""


@dataclass(frozen=True, slots=True)
class EditingForm:
    task_id: str


FormMode = IdleForm | EditingForm


@dataclass(frozen=True, slots=True)
class CalendarView:
    year: int
    month: int
    title: str
    cells: list[DayCell | None]


class StudySession:
    def __init__(
        self,
        task_store: TaskStore,
        settings_store: SettingsStore,
        notifier: Notifier,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.tasks = task_store
        self.settings_store = settings_store
        self.notifier = notifier
        self._clock = clock

        self.form_mode: FormMode = IdleForm()
        self.selected_date: date | None = None
        today = self.today()
        self.visible_month: tuple[int, int] = (today.year, today.month)

    # ---- helpers ----

    def now(self) -> datetime:
        return to_local_naive(self._clock())

    def today(self) -> date:
        return self.now().date()

    @property
    def settings(self) -> ReminderSettings:
        return self.settings_store.current

    # ---- task commands ----

    def begin_edit(self, task_id: str) -> TaskDraft | None:
        """Switch the form to editing; returns the current values to prefill it."""
        task = self.tasks.get(task_id)
        if task is None:
            return None
        self.form_mode = EditingForm(task_id=task_id)
        return task.to_draft()

    def cancel_edit(self) -> None:
        self.form_mode = IdleForm()

    def submit(self, draft: TaskDraft) -> Task | None:
        mode = self.form_mode
        if isinstance(mode, EditingForm):
            updated = self.tasks.edit(mode.task_id, draft)
            self.form_mode = IdleForm()
            if updated is not None:
                self.notifier.notify("Task Updated", f'"{updated.name}" has been updated.')
            return updated

        created = self.tasks.add(draft)
        self.notifier.notify("Task Added", f'"{created.name}" has been added to your study plan.')
        return created

    def toggle(self, task_id: str) -> Task | None:
        task = self.tasks.toggle_completion(task_id)
        if task is not None and task.completed:
            self.notifier.notify("Task Completed", f'Great job! You\'ve completed "{task.name}".')
        return task

    def delete(self, task_id: str) -> Task | None:
        removed = self.tasks.delete(task_id)
        if removed is not None:
            if self.form_mode == EditingForm(task_id=task_id):
                self.form_mode = IdleForm()
            self.notifier.notify("Task Deleted", f'"{removed.name}" has been deleted.')
        return removed

    # ---- task queries ----

    def list_tasks(
        self,
        priority_filter: str = "all",
        status_filter: str = "all",
        search_text: str = "",
    ) -> list[Task]:
        return query(self.tasks.all(), priority_filter, status_filter, search_text)

    def counts(self) -> TaskCounts:
        return task_counts(self.tasks.all())

    # ---- calendar ----

    def calendar(self) -> CalendarView:
        year, month = self.visible_month
        cells = month_grid(year, month, self.tasks.all(), self.today(), self.selected_date)
        return CalendarView(year=year, month=month, title=month_title(year, month), cells=cells)

    def show_previous_month(self) -> CalendarView:
        self.visible_month = shift_month(*self.visible_month, -1)
        return self.calendar()

    def show_next_month(self) -> CalendarView:
        self.visible_month = shift_month(*self.visible_month, 1)
        return self.calendar()

    def select_date(self, day: date) -> list[Task]:
        self.selected_date = day
        return self.day_tasks()

    def day_tasks(self) -> list[Task]:
        if self.selected_date is None:
            self.selected_date = self.today()
        return tasks_on_date(self.tasks.all(), self.selected_date)

    # ---- progress / reminders ----

    def progress(self) -> ProgressReport:
        return progress_report(self.tasks.all(), self.now())

    def check_due_tasks(self) -> list[Reminder]:
        reminders = due_soon_reminders(self.tasks.all(), self.now(), self.settings)
        for r in reminders:
            self.notifier.notify(r.title, r.message)
        if reminders:
            logger.info("Due-soon reminders sent: %d", len(reminders))
        return reminders

    # ---- settings ----

    def save_settings(self, *, enable_notifications: bool, notification_time: int) -> ReminderSettings:
        saved = self.settings_store.save(
            ReminderSettings(
                enable_notifications=bool(enable_notifications),
                notification_time=int(notification_time),
            )
        )
        self.notifier.notify("Settings Saved", "Your settings have been updated.")
        return saved

    # ---- data management ----

    def export_data(self) -> dict[str, Any]:
        return build_export(self.tasks.all(), self.settings)

    def export_to_file(self, path: str | Path) -> Path:
        out = write_export(path, self.tasks.all(), self.settings)
        self.notifier.notify("Data Exported", "Your data has been exported successfully.")
        return out

    def import_data(self, data: str | bytes | dict[str, Any]) -> None:
        try:
            bundle = parse_import(data)
        except ImportFormatError:
            logger.exception("Import rejected")
            self.notifier.notify(
                "Import Error", "Failed to import data. Please make sure the file is valid."
            )
            raise
        self._apply_import(bundle.tasks, bundle.settings)

    def import_from_file(self, path: str | Path) -> None:
        try:
            bundle = read_import(path)
        except ImportFormatError:
            logger.exception("Import from %s rejected", path)
            self.notifier.notify(
                "Import Error", "Failed to import data. Please make sure the file is valid."
            )
            raise
        self._apply_import(bundle.tasks, bundle.settings)

    def _apply_import(self, tasks: list[Task], settings: ReminderSettings) -> None:
        self.tasks.replace_all(tasks)
        self.settings_store.save(settings)
        self.form_mode = IdleForm()
        logger.info("Imported %d tasks", len(tasks))
        self.notifier.notify("Data Imported", "Your data has been imported successfully.")

    def clear_data(self) -> None:
        self.tasks.clear()
        self.settings_store.reset()
        self.form_mode = IdleForm()
        self.notifier.notify("Data Cleared", "All your data has been cleared.")
