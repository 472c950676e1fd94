"""Ports, import/export and the command/query session."""
