"""Utilities for appending ordered rows to the end of their parent scope."""
from __future__ import annotations

from typing import Type

from sqlalchemy import event, select, func
from sqlalchemy.orm import Mapper


def next_order(connection, order_column, scope_column, scope_value) -> int:
    """Return ``max(order) + 1`` among rows sharing ``scope_value``, or 1 for an empty scope."""
    max_stmt = select(func.max(order_column)).where(scope_column == scope_value)
    max_value = connection.execute(max_stmt).scalar_one_or_none()
    return (max_value or 0) + 1


def register_order_listener(model: Type[object], scope_name: str, order_name: str = "order") -> None:
    """Ensure ``model`` receives an ``order`` placing it after its siblings before insert.

    Columns, tasks and subtasks are ordered within their parent (``scope_name``).
    When a row is inserted without an explicit order it is appended to the end
    of that scope using ``MAX(order) + 1``. Rows that already carry an order
    (default board columns, seed data) are left untouched.

    The listener reads the scope's current maximum, so rows relying on it must
    be flushed one at a time.
    """

    table = getattr(model, "__table__", None)
    if table is None or scope_name not in table.c or order_name not in table.c:
        raise ValueError(f"Model {model!r} does not expose '{scope_name}' and '{order_name}' columns")

    order_column = table.c[order_name]
    scope_column = table.c[scope_name]

    @event.listens_for(model, "before_insert", propagate=True)
    def _assign_order(_: Mapper, connection, target) -> None:
        if getattr(target, order_name) is not None:
            return

        scope_value = getattr(target, scope_name)
        setattr(target, order_name, next_order(connection, order_column, scope_column, scope_value))
