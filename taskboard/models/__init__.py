"""Taskboard Database Models"""
from sqlalchemy import func, select
from sqlalchemy.orm import column_property

from taskboard.models.board import Board
from taskboard.models.column import BoardColumn
from taskboard.models.task import Task
from taskboard.models.subtask import Subtask
from taskboard.utils.ordering import register_order_listener

__all__ = [
    "Board",
    "BoardColumn",
    "Task",
    "Subtask",
]


# Counted from live rows every time a task is loaded; never stored.
Task.subtasks_count = column_property(
    select(func.count(Subtask.id))
    .where(Subtask.task_id == Task.id)
    .correlate_except(Subtask)
    .scalar_subquery()
)


for _model, _scope in (
    (BoardColumn, "board_id"),
    (Task, "column_id"),
    (Subtask, "task_id"),
):
    register_order_listener(_model, _scope)
