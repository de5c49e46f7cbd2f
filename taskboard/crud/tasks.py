"""Task queries

Tasks are always loaded with ``populate_existing`` so the derived
``subtasks_count`` reflects the subtask rows at query time rather than a value
cached on an instance already held by the session.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from taskboard.models import Task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "column_id", "order")


def _task_query(db: Session):
    return db.query(Task).populate_existing()


def get_by_column_id(db: Session, column_id: int) -> List[Task]:
    return (
        _task_query(db)
        .filter(Task.column_id == column_id)
        .order_by(Task.order.asc(), Task.id.asc())
        .all()
    )


def get_by_id(db: Session, task_id: int) -> Optional[Task]:
    return _task_query(db).filter(Task.id == task_id).first()


def create(
    db: Session,
    column_id: int,
    title: str,
    description: Optional[str] = "",
    order: Optional[int] = None,
) -> Task:
    task = Task(title=title, description=description, column_id=column_id, order=order)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Created task %s in column %s at order %s", task.id, column_id, task.order)
    return task


def update(db: Session, task_id: int, data: Dict[str, Any]) -> Optional[Task]:
    """Write only the fields present in ``data``."""
    task = get_by_id(db, task_id)
    if task is None:
        return None

    for field, value in data.items():
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"Task field {field!r} cannot be updated")
        setattr(task, field, value)

    db.commit()
    return get_by_id(db, task_id)


def remove(db: Session, task_id: int) -> bool:
    task = get_by_id(db, task_id)
    if task is None:
        return False

    db.delete(task)
    db.commit()
    logger.info("Deleted task %s", task_id)
    return True
