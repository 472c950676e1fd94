"""Study planner: tasks, calendar and progress derivations over a local key-value store."""

__version__ = "0.1.0"
