"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskDraft, ReminderSettings)
- task_dates.py: date parsing and day-granularity helpers
- task_store.py: in-memory task/settings stores persisted through a key-value port
- task_query.py: list filters, search and ordering, per-day lists
- task_calendar.py: month grid derivation and month navigation
- task_progress.py: completion rates, subject breakdown, daily time totals
- task_reminders.py: due-soon scan and reminder texts
"""
