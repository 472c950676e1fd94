# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "STUDY_APP_NAME": "App display name (default: study-planner).",
    "STUDY_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "STUDY_DATA_DIR": "Local data directory (default: .local/study_planner).",
    "STUDY_STORE_DB_PATH": "Key-value SQLite path (default: <data_dir>/planner.sqlite3).",
    "STUDY_EXPORT_PATH": "Default export file (default: <data_dir>/study_planner_data.json).",
    # Storage keys
    "STUDY_TASKS_KEY": "Key holding the task list (default: studyTasks).",
    "STUDY_SETTINGS_KEY": "Key holding reminder settings (default: studyPlannerSettings).",
    # Reminder defaults
    "STUDY_ENABLE_NOTIFICATIONS": "Reminders on by default (true/false, default: true).",
    "STUDY_NOTIFICATION_TIME": "Default due-soon lookahead in hours (default: 24).",
}
