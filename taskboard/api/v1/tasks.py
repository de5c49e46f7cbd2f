"""Task endpoints"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.api.errors import persistence_guard
from taskboard.crud import columns, tasks
from taskboard.database import get_db
from taskboard.schemas import DeleteResponse, TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(tags=["tasks"])

# Columns that must not be cleared through an update.
NON_NULLABLE_FIELDS = ("column_id", "order")


def _require_title(title) -> str:
    title = (title or "").strip()
    if not title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Task title is required")
    return title


def _ensure_column_exists(db: Session, column_id: int) -> None:
    if columns.get_by_id(db, column_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Column not found")


@router.get("/columns/{column_id}/tasks", response_model=List[TaskResponse])
def list_column_tasks(column_id: int, db: Session = Depends(get_db)):
    """Return the tasks of a column in display order with their subtask counts."""
    with persistence_guard(db, "Failed to fetch tasks", column_id=column_id):
        _ensure_column_exists(db, column_id)
        return tasks.get_by_column_id(db, column_id)


@router.post("/columns/{column_id}/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(column_id: int, task_in: TaskCreate, db: Session = Depends(get_db)):
    """Append a task to the end of a column."""
    with persistence_guard(db, "Failed to create task", column_id=column_id):
        _ensure_column_exists(db, column_id)
        title = _require_title(task_in.title)
        return tasks.create(db, column_id, title, description=task_in.description or "")


@router.get("/tasks/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    with persistence_guard(db, "Failed to fetch task", task_id=task_id):
        task = tasks.get_by_id(db, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.put("/tasks/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Update the fields present in the body; a task may move to another column."""
    update_data = task_update.model_dump(exclude_unset=True)

    if "title" in update_data:
        update_data["title"] = _require_title(update_data["title"])
    for field in NON_NULLABLE_FIELDS:
        if field in update_data and update_data[field] is None:
            del update_data[field]

    with persistence_guard(db, "Failed to update task", task_id=task_id):
        if tasks.get_by_id(db, task_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
        if "column_id" in update_data:
            _ensure_column_exists(db, update_data["column_id"])
        return tasks.update(db, task_id, update_data)


@router.delete("/tasks/{task_id}", response_model=DeleteResponse)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    """Delete a task together with its subtasks."""
    with persistence_guard(db, "Failed to delete task", task_id=task_id):
        deleted = tasks.remove(db, task_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return DeleteResponse(success=True)
