"""Board column endpoints"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.api.errors import persistence_guard
from taskboard.crud import boards, columns
from taskboard.database import get_db
from taskboard.schemas import ColumnCreate, ColumnResponse, ColumnUpdate, DeleteResponse

router = APIRouter(tags=["columns"])


def _require_name(name) -> str:
    name = (name or "").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Column name is required")
    return name


def _ensure_board_exists(db: Session, board_id: int) -> None:
    if boards.get_by_id(db, board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")


@router.get("/boards/{board_id}/columns", response_model=List[ColumnResponse])
def list_board_columns(board_id: int, db: Session = Depends(get_db)):
    """Return the columns of a board in display order."""
    with persistence_guard(db, "Failed to fetch columns", board_id=board_id):
        _ensure_board_exists(db, board_id)
        return columns.get_by_board_id(db, board_id)


@router.post("/boards/{board_id}/columns", response_model=ColumnResponse, status_code=status.HTTP_201_CREATED)
def create_column(board_id: int, column_in: ColumnCreate, db: Session = Depends(get_db)):
    """Append a column to the end of a board."""
    with persistence_guard(db, "Failed to create column", board_id=board_id):
        _ensure_board_exists(db, board_id)
        name = _require_name(column_in.name)
        return columns.create(db, board_id, name)


@router.get("/columns/{column_id}", response_model=ColumnResponse)
def get_column(column_id: int, db: Session = Depends(get_db)):
    with persistence_guard(db, "Failed to fetch column", column_id=column_id):
        column = columns.get_by_id(db, column_id)
    if not column:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Column not found")
    return column


@router.put("/columns/{column_id}", response_model=ColumnResponse)
def update_column(column_id: int, column_update: ColumnUpdate, db: Session = Depends(get_db)):
    """Rename a column."""
    name = _require_name(column_update.name)

    with persistence_guard(db, "Failed to update column", column_id=column_id):
        column = columns.update(db, column_id, name)
    if not column:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Column not found")
    return column


@router.delete("/columns/{column_id}", response_model=DeleteResponse)
def delete_column(column_id: int, db: Session = Depends(get_db)):
    """Delete a column together with its tasks and their subtasks."""
    with persistence_guard(db, "Failed to delete column", column_id=column_id):
        deleted = columns.remove(db, column_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Column not found")
    return DeleteResponse(success=True)
