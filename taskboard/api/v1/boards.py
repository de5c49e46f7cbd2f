"""Board endpoints"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.api.errors import persistence_guard
from taskboard.crud import boards
from taskboard.database import get_db
from taskboard.schemas import BoardCreate, BoardResponse, BoardUpdate, DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["boards"])


def _require_name(name) -> str:
    name = (name or "").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Board name is required")
    return name


@router.get("/boards", response_model=List[BoardResponse])
def list_boards(db: Session = Depends(get_db)):
    """Return every board, most recently created first."""
    with persistence_guard(db, "Failed to fetch boards"):
        return boards.get_all(db)


@router.post("/boards", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(board_in: BoardCreate, db: Session = Depends(get_db)):
    """Create a board and, best-effort, its default columns."""
    name = _require_name(board_in.name)

    with persistence_guard(db, "Failed to create board"):
        board = boards.create(db, name)

    # The board stays even if its starter columns cannot be written.
    try:
        boards.create_default_columns(db, board)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create default columns for board %s", board.id)

    return board


@router.get("/boards/{board_id}", response_model=BoardResponse)
def get_board(board_id: int, db: Session = Depends(get_db)):
    with persistence_guard(db, "Failed to fetch board", board_id=board_id):
        board = boards.get_by_id(db, board_id)
    if not board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return board


@router.put("/boards/{board_id}", response_model=BoardResponse)
def update_board(board_id: int, board_update: BoardUpdate, db: Session = Depends(get_db)):
    """Rename a board."""
    name = _require_name(board_update.name)

    with persistence_guard(db, "Failed to update board", board_id=board_id):
        board = boards.update(db, board_id, name)
    if not board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return board


@router.delete("/boards/{board_id}", response_model=DeleteResponse)
def delete_board(board_id: int, db: Session = Depends(get_db)):
    """Delete a board together with its columns, tasks and subtasks."""
    with persistence_guard(db, "Failed to delete board", board_id=board_id):
        deleted = boards.remove(db, board_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return DeleteResponse(success=True)
