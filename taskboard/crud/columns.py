"""Board column queries"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from taskboard.models import BoardColumn

logger = logging.getLogger(__name__)


def get_by_board_id(db: Session, board_id: int) -> List[BoardColumn]:
    return (
        db.query(BoardColumn)
        .filter(BoardColumn.board_id == board_id)
        .order_by(BoardColumn.order.asc(), BoardColumn.id.asc())
        .all()
    )


def get_by_id(db: Session, column_id: int) -> Optional[BoardColumn]:
    return db.query(BoardColumn).filter(BoardColumn.id == column_id).first()


def create(db: Session, board_id: int, name: str, order: Optional[int] = None) -> BoardColumn:
    """Insert a column; without an explicit ``order`` it goes after its siblings."""
    column = BoardColumn(name=name, board_id=board_id, order=order)
    db.add(column)
    db.commit()
    db.refresh(column)
    logger.info("Created column %s on board %s at order %s", column.id, board_id, column.order)
    return column


def update(db: Session, column_id: int, name: str) -> Optional[BoardColumn]:
    column = get_by_id(db, column_id)
    if column is None:
        return None

    column.name = name
    db.commit()
    db.refresh(column)
    return column


def remove(db: Session, column_id: int) -> bool:
    column = get_by_id(db, column_id)
    if column is None:
        return False

    db.delete(column)
    db.commit()
    logger.info("Deleted column %s", column_id)
    return True
