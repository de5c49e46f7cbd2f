"""Schemas for tasks"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    column_id: Optional[int] = None
    order: Optional[int] = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    column_id: int
    order: int
    subtasks_count: int = 0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
