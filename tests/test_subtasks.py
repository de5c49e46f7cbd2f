import logging

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

import taskboard.api.v1.subtasks as routes
from taskboard import crud, schemas
from tests.helpers import create_board, create_column, create_subtask, create_task


@pytest.fixture
def task(db_session: Session):
    board = create_board(db_session)
    column = create_column(db_session, board, "Sprint")
    return create_task(db_session, column, "Research pricing points")


def test_subtasks_are_appended_open(db_session: Session, task):
    first = create_subtask(db_session, task, "Research pricing")
    second = create_subtask(db_session, task, "Review competitor product")

    assert first.order == 1
    assert second.order == 2
    assert first.is_completed is False
    assert [s.id for s in routes.list_task_subtasks(task.id, db_session)] == [first.id, second.id]


def test_subtask_requires_title_and_task(db_session: Session, task):
    with pytest.raises(HTTPException) as exc:
        routes.create_subtask(task.id, schemas.SubtaskCreate(title=""), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Subtask title is required"

    with pytest.raises(HTTPException) as exc:
        routes.create_subtask(999, schemas.SubtaskCreate(title="Lost"), db_session)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Task not found"


def test_toggle_twice_restores_state(db_session: Session, task):
    subtask = create_subtask(db_session, task, "Finalize requirements")

    toggled = routes.toggle_subtask(subtask.id, db_session)
    assert toggled.is_completed is True

    toggled = routes.toggle_subtask(subtask.id, db_session)
    assert toggled.is_completed is False

    with pytest.raises(HTTPException) as exc:
        routes.toggle_subtask(999, db_session)
    assert exc.value.status_code == 404


def test_update_subtask_keeps_omitted_fields(db_session: Session, task):
    subtask = create_subtask(db_session, task, "Draft wireframes")

    updated = routes.update_subtask(subtask.id, schemas.SubtaskUpdate(is_completed=True), db_session)
    assert updated.title == "Draft wireframes"
    assert updated.is_completed is True

    updated = routes.update_subtask(subtask.id, schemas.SubtaskUpdate(title="Final wireframes"), db_session)
    assert updated.title == "Final wireframes"
    assert updated.is_completed is True


def test_update_subtask_rejects_empty_title(db_session: Session, task):
    subtask = create_subtask(db_session, task, "Name")
    with pytest.raises(HTTPException) as exc:
        routes.update_subtask(subtask.id, schemas.SubtaskUpdate(title=""), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Subtask title cannot be empty"

    with pytest.raises(HTTPException) as exc:
        routes.update_subtask(999, schemas.SubtaskUpdate(title="Missing"), db_session)
    assert exc.value.status_code == 404


def test_reorder_assigns_list_positions(db_session: Session, task):
    one = create_subtask(db_session, task, "One")
    two = create_subtask(db_session, task, "Two")
    three = create_subtask(db_session, task, "Three")

    reordered = routes.reorder_subtasks(
        task.id, schemas.SubtaskReorder(subtaskIds=[three.id, one.id, two.id]), db_session
    )

    assert [(s.id, s.order) for s in reordered] == [(three.id, 0), (one.id, 1), (two.id, 2)]


def test_failed_reorder_keeps_previous_orders(db_session: Session, task, monkeypatch):
    one = create_subtask(db_session, task, "One")
    two = create_subtask(db_session, task, "Two")
    expected = [(one.id, 1), (two.id, 2)]

    def _flush_then_fail():
        # The updates reach the database before the commit is refused.
        db_session.flush()
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", _flush_then_fail)

    with pytest.raises(HTTPException) as exc:
        routes.reorder_subtasks(task.id, schemas.SubtaskReorder(subtaskIds=[two.id, one.id]), db_session)
    assert exc.value.status_code == 500
    assert exc.value.detail == "Failed to reorder subtasks"

    monkeypatch.undo()
    assert [(s.id, s.order) for s in crud.subtasks.get_by_task_id(db_session, task.id)] == expected


def test_reorder_ignores_subtasks_of_other_tasks(db_session: Session, task):
    column = crud.columns.get_by_id(db_session, task.column_id)
    other_task = create_task(db_session, column, "Elsewhere")
    foreign = create_subtask(db_session, other_task, "Not yours")
    mine = create_subtask(db_session, task, "Mine")

    reordered = routes.reorder_subtasks(
        task.id, schemas.SubtaskReorder(subtask_ids=[foreign.id, mine.id]), db_session
    )
    assert [(s.id, s.order) for s in reordered] == [(mine.id, 1)]
    assert crud.subtasks.get_by_id(db_session, foreign.id).order == 1


def test_reorder_requires_ids_and_task(db_session: Session, task):
    with pytest.raises(HTTPException) as exc:
        routes.reorder_subtasks(task.id, schemas.SubtaskReorder(), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Subtask IDs array is required"

    with pytest.raises(HTTPException) as exc:
        routes.reorder_subtasks(999, schemas.SubtaskReorder(subtaskIds=[1]), db_session)
    assert exc.value.status_code == 404


def test_delete_subtask(db_session: Session, task):
    subtask = create_subtask(db_session, task, "Delete me")

    assert routes.delete_subtask(subtask.id, db_session).success is True
    with pytest.raises(HTTPException) as exc:
        routes.get_subtask(subtask.id, db_session)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Subtask not found"


def test_create_and_delete_are_logged(db_session: Session, task, caplog):
    caplog.set_level(logging.INFO, logger="taskboard.crud.subtasks")

    subtask = crud.subtasks.create(db_session, task.id, "Write release notes")
    crud.subtasks.remove(db_session, subtask.id)

    messages = [record.getMessage() for record in caplog.records]
    assert f"Created subtask {subtask.id} on task {task.id} at order 1" in messages
    assert f"Deleted subtask {subtask.id}" in messages
