"""Shared response schemas"""
from pydantic import BaseModel


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
