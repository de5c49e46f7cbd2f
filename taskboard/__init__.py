"""Taskboard: a Kanban board service."""

__version__ = "1.0.0"
