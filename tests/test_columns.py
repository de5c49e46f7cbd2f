import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

import taskboard.api.v1.columns as routes
from taskboard import crud, schemas
from taskboard.models import Subtask, Task
from tests.helpers import create_board, create_column, create_subtask, create_task


def test_new_column_goes_after_defaults(db_session: Session):
    board = create_board(db_session)

    backlog = create_column(db_session, board, "Backlog")
    review = create_column(db_session, board, "Review")

    assert backlog.board_id == board.id
    assert backlog.order == 4
    assert review.order == 5

    names = [column.name for column in routes.list_board_columns(board.id, db_session)]
    assert names == ["To Do", "Doing", "Done", "Backlog", "Review"]


def test_first_column_of_empty_board_gets_order_one(db_session: Session):
    board = crud.boards.create(db_session, "Bare")
    column = create_column(db_session, board, "Only")
    assert column.order == 1


def test_new_column_follows_highest_order(db_session: Session):
    board = crud.boards.create(db_session, "Sparse")
    crud.columns.create(db_session, board.id, "Far", order=10)

    column = create_column(db_session, board, "Next")
    assert column.order == 11


def test_column_requires_existing_board(db_session: Session):
    with pytest.raises(HTTPException) as exc:
        routes.list_board_columns(77, db_session)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Board not found"

    with pytest.raises(HTTPException) as exc:
        routes.create_column(77, schemas.ColumnCreate(name="Lost"), db_session)
    assert exc.value.status_code == 404


def test_column_requires_name(db_session: Session):
    board = create_board(db_session)
    with pytest.raises(HTTPException) as exc:
        routes.create_column(board.id, schemas.ColumnCreate(name=" "), db_session)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Column name is required"


def test_get_and_rename_column(db_session: Session):
    board = create_board(db_session)
    column = create_column(db_session, board, "Blocked")

    fetched = routes.get_column(column.id, db_session)
    assert fetched.name == "Blocked"

    renamed = routes.update_column(column.id, schemas.ColumnUpdate(name="On Hold"), db_session)
    assert renamed.name == "On Hold"
    assert renamed.order == column.order

    with pytest.raises(HTTPException) as exc:
        routes.update_column(999, schemas.ColumnUpdate(name="Nope"), db_session)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Column not found"


def test_delete_column_cascades_to_tasks(db_session: Session):
    board = create_board(db_session)
    column = create_column(db_session, board, "Scratch")
    task = create_task(db_session, column, "Throwaway")
    create_subtask(db_session, task, "Step")
    board_id, column_id, task_id = board.id, column.id, task.id

    assert routes.delete_column(column_id, db_session).success is True

    db_session.expire_all()
    assert db_session.query(Task).filter(Task.column_id == column_id).count() == 0
    assert db_session.query(Subtask).filter(Subtask.task_id == task_id).count() == 0
    assert len(routes.list_board_columns(board_id, db_session)) == 3

    with pytest.raises(HTTPException) as exc:
        routes.get_column(column_id, db_session)
    assert exc.value.status_code == 404
