"""Schemas for subtasks"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class SubtaskCreate(BaseModel):
    title: Optional[str] = None


class SubtaskUpdate(BaseModel):
    title: Optional[str] = None
    is_completed: Optional[bool] = None


class SubtaskReorder(BaseModel):
    subtask_ids: Optional[List[int]] = Field(default=None, alias="subtaskIds")

    class Config:
        populate_by_name = True


class SubtaskResponse(BaseModel):
    id: int
    title: str
    is_completed: bool
    task_id: int
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
