"""Schemas for board columns"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ColumnCreate(BaseModel):
    name: Optional[str] = None


class ColumnUpdate(BaseModel):
    name: Optional[str] = None


class ColumnResponse(BaseModel):
    id: int
    name: str
    board_id: int
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
