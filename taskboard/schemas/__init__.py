"""
Pydantic schemas for request/response validation
"""
from taskboard.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from taskboard.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskboard.schemas.subtask import SubtaskCreate, SubtaskReorder, SubtaskResponse, SubtaskUpdate
from taskboard.schemas.common import DeleteResponse, ErrorResponse

__all__ = [
    "BoardCreate",
    "BoardResponse",
    "BoardUpdate",
    "ColumnCreate",
    "ColumnResponse",
    "ColumnUpdate",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "SubtaskCreate",
    "SubtaskReorder",
    "SubtaskResponse",
    "SubtaskUpdate",
    "DeleteResponse",
    "ErrorResponse",
]
