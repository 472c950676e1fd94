"""Key-value persistence backends (SQLite file, in-memory)."""
