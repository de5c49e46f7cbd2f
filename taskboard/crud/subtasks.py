"""Subtask queries"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import not_
from sqlalchemy.orm import Session

from taskboard.models import Subtask

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "is_completed")


def get_by_task_id(db: Session, task_id: int) -> List[Subtask]:
    return (
        db.query(Subtask)
        .filter(Subtask.task_id == task_id)
        .order_by(Subtask.order.asc(), Subtask.id.asc())
        .all()
    )


def get_by_id(db: Session, subtask_id: int) -> Optional[Subtask]:
    return db.query(Subtask).filter(Subtask.id == subtask_id).first()


def create(
    db: Session,
    task_id: int,
    title: str,
    is_completed: bool = False,
    order: Optional[int] = None,
) -> Subtask:
    subtask = Subtask(title=title, is_completed=is_completed, task_id=task_id, order=order)
    db.add(subtask)
    db.commit()
    db.refresh(subtask)
    logger.info("Created subtask %s on task %s at order %s", subtask.id, task_id, subtask.order)
    return subtask


def update(db: Session, subtask_id: int, data: Dict[str, Any]) -> Optional[Subtask]:
    subtask = get_by_id(db, subtask_id)
    if subtask is None:
        return None

    for field, value in data.items():
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"Subtask field {field!r} cannot be updated")
        setattr(subtask, field, value)

    db.commit()
    db.refresh(subtask)
    return subtask


def toggle_completion(db: Session, subtask_id: int) -> Optional[Subtask]:
    """Flip ``is_completed`` in the database in one statement."""
    flipped = (
        db.query(Subtask)
        .filter(Subtask.id == subtask_id)
        .update({Subtask.is_completed: not_(Subtask.is_completed)}, synchronize_session=False)
    )
    db.commit()
    if not flipped:
        return None
    return get_by_id(db, subtask_id)


def remove(db: Session, subtask_id: int) -> bool:
    subtask = get_by_id(db, subtask_id)
    if subtask is None:
        return False

    db.delete(subtask)
    db.commit()
    logger.info("Deleted subtask %s", subtask_id)
    return True


def reorder(db: Session, task_id: int, subtask_ids: Sequence[int]) -> List[Subtask]:
    """Set each listed subtask's order to its index in ``subtask_ids``.

    All updates are committed together; ids that do not belong to ``task_id``
    are ignored. A repeated id takes its last position.
    """
    positions = {subtask_id: index for index, subtask_id in enumerate(subtask_ids)}

    if positions:
        subtasks = (
            db.query(Subtask)
            .filter(Subtask.task_id == task_id, Subtask.id.in_(list(positions)))
            .all()
        )
        for subtask in subtasks:
            subtask.order = positions[subtask.id]
        db.commit()
        logger.info("Reordered %d subtasks of task %s", len(subtasks), task_id)

    return get_by_task_id(db, task_id)
