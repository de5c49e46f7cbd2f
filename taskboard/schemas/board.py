"""Schemas for boards"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class BoardCreate(BaseModel):
    name: Optional[str] = None


class BoardUpdate(BaseModel):
    name: Optional[str] = None


class BoardResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
