"""Board queries"""
import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from taskboard.config import settings
from taskboard.models import Board, BoardColumn

logger = logging.getLogger(__name__)


def get_all(db: Session) -> List[Board]:
    return db.query(Board).order_by(Board.created_at.desc(), Board.id.desc()).all()


def get_by_id(db: Session, board_id: int) -> Optional[Board]:
    return db.query(Board).filter(Board.id == board_id).first()


def create(db: Session, name: str) -> Board:
    board = Board(name=name)
    db.add(board)
    db.commit()
    db.refresh(board)
    logger.info("Created board %s (%r)", board.id, board.name)
    return board


def create_default_columns(db: Session, board: Board, names: Optional[Sequence[str]] = None) -> List[BoardColumn]:
    """Add the starter lanes to ``board`` with orders 1..n in a single transaction."""
    if names is None:
        names = settings.DEFAULT_COLUMNS

    columns = [
        BoardColumn(name=name, board_id=board.id, order=position)
        for position, name in enumerate(names, start=1)
    ]
    db.add_all(columns)
    db.commit()
    for column in columns:
        db.refresh(column)
    return columns


def update(db: Session, board_id: int, name: str) -> Optional[Board]:
    board = get_by_id(db, board_id)
    if board is None:
        return None

    board.name = name
    db.commit()
    db.refresh(board)
    return board


def remove(db: Session, board_id: int) -> bool:
    board = get_by_id(db, board_id)
    if board is None:
        return False

    db.delete(board)
    db.commit()
    logger.info("Deleted board %s", board_id)
    return True
