"""Subtask endpoints"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.api.errors import persistence_guard
from taskboard.crud import subtasks, tasks
from taskboard.database import get_db
from taskboard.schemas import (
    DeleteResponse,
    SubtaskCreate,
    SubtaskReorder,
    SubtaskResponse,
    SubtaskUpdate,
)

router = APIRouter(tags=["subtasks"])


def _ensure_task_exists(db: Session, task_id: int) -> None:
    if tasks.get_by_id(db, task_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


def _subtask_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subtask not found")


@router.get("/tasks/{task_id}/subtasks", response_model=List[SubtaskResponse])
def list_task_subtasks(task_id: int, db: Session = Depends(get_db)):
    """Return the subtasks of a task in display order."""
    with persistence_guard(db, "Failed to fetch subtasks", task_id=task_id):
        _ensure_task_exists(db, task_id)
        return subtasks.get_by_task_id(db, task_id)


@router.post("/tasks/{task_id}/subtasks", response_model=SubtaskResponse, status_code=status.HTTP_201_CREATED)
def create_subtask(task_id: int, subtask_in: SubtaskCreate, db: Session = Depends(get_db)):
    """Append an open subtask to the end of a task's checklist."""
    with persistence_guard(db, "Failed to create subtask", task_id=task_id):
        _ensure_task_exists(db, task_id)
        title = (subtask_in.title or "").strip()
        if not title:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Subtask title is required")
        return subtasks.create(db, task_id, title)


@router.patch("/tasks/{task_id}/subtasks", response_model=List[SubtaskResponse])
def reorder_subtasks(task_id: int, reorder_in: SubtaskReorder, db: Session = Depends(get_db)):
    """Give each listed subtask the order of its position in ``subtaskIds``."""
    if reorder_in.subtask_ids is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Subtask IDs array is required")

    with persistence_guard(db, "Failed to reorder subtasks", task_id=task_id):
        _ensure_task_exists(db, task_id)
        return subtasks.reorder(db, task_id, reorder_in.subtask_ids)


@router.get("/subtasks/{subtask_id}", response_model=SubtaskResponse)
def get_subtask(subtask_id: int, db: Session = Depends(get_db)):
    with persistence_guard(db, "Failed to fetch subtask", subtask_id=subtask_id):
        subtask = subtasks.get_by_id(db, subtask_id)
    if not subtask:
        raise _subtask_not_found()
    return subtask


@router.put("/subtasks/{subtask_id}", response_model=SubtaskResponse)
def update_subtask(subtask_id: int, subtask_update: SubtaskUpdate, db: Session = Depends(get_db)):
    """Change the title and/or completion state; omitted fields keep their value."""
    update_data = {
        field: value
        for field, value in subtask_update.model_dump(exclude_unset=True).items()
        if value is not None
    }
    if "title" in update_data:
        update_data["title"] = update_data["title"].strip()
        if not update_data["title"]:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Subtask title cannot be empty")

    with persistence_guard(db, "Failed to update subtask", subtask_id=subtask_id):
        subtask = subtasks.update(db, subtask_id, update_data)
    if not subtask:
        raise _subtask_not_found()
    return subtask


@router.patch("/subtasks/{subtask_id}", response_model=SubtaskResponse)
def toggle_subtask(subtask_id: int, db: Session = Depends(get_db)):
    """Flip a subtask between done and not done."""
    with persistence_guard(db, "Failed to toggle subtask completion", subtask_id=subtask_id):
        subtask = subtasks.toggle_completion(db, subtask_id)
    if not subtask:
        raise _subtask_not_found()
    return subtask


@router.delete("/subtasks/{subtask_id}", response_model=DeleteResponse)
def delete_subtask(subtask_id: int, db: Session = Depends(get_db)):
    with persistence_guard(db, "Failed to delete subtask", subtask_id=subtask_id):
        deleted = subtasks.remove(db, subtask_id)
    if not deleted:
        raise _subtask_not_found()
    return DeleteResponse(success=True)
