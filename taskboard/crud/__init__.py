"""Data-access functions, one module per entity."""
from taskboard.crud import boards, columns, subtasks, tasks  # noqa: F401

__all__ = ["boards", "columns", "tasks", "subtasks"]
