"""Version 1 of the Taskboard HTTP API."""
from fastapi import APIRouter

from taskboard.api.v1 import boards, columns, subtasks, tasks

router = APIRouter()
router.include_router(boards.router)
router.include_router(columns.router)
router.include_router(tasks.router)
router.include_router(subtasks.router)

__all__ = ["router"]
