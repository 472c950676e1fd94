# src/study_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The stores and the session depend on Protocols instead of concrete backends,
so persistence and reminder delivery stay swappable and easy to fake in tests.
"""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """
    Persistence collaborator holding JSON-compatible values under string keys.

    set() returns False (or raises) when the write did not happen.
    """

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> bool: ...

    def delete(self, key: str) -> None: ...


class Notifier(Protocol):
    """Reminder collaborator: shows a (title, message) notification somewhere."""

    def notify(self, title: str, message: str) -> None: ...
