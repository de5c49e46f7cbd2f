from sqlalchemy.orm import Session

import taskboard.api.v1.boards as board_routes
import taskboard.api.v1.columns as column_routes
import taskboard.api.v1.subtasks as subtask_routes
import taskboard.api.v1.tasks as task_routes
from taskboard import schemas


def create_board(session: Session, name: str = "Platform Launch"):
    return board_routes.create_board(schemas.BoardCreate(name=name), session)


def create_column(session: Session, board, name: str = "Backlog"):
    return column_routes.create_column(board.id, schemas.ColumnCreate(name=name), session)


def create_task(session: Session, column, title: str, description: str = ""):
    return task_routes.create_task(column.id, schemas.TaskCreate(title=title, description=description), session)


def create_subtask(session: Session, task, title: str):
    return subtask_routes.create_subtask(task.id, schemas.SubtaskCreate(title=title), session)
