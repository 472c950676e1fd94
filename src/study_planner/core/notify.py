# src/study_planner/core/notify.py

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Default Notifier: writes notifications to the log."""

    def notify(self, title: str, message: str) -> None:
        logger.info("[%s] %s", title, message)
