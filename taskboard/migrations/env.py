"""Alembic environment for the Taskboard schema."""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine

from taskboard.database import Base, configure_engine, database_url
import taskboard.models  # noqa: F401

config = context.config

# Only the alembic CLI has an ini file; the app configures its own logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _url() -> str:
    return config.get_main_option("sqlalchemy.url") or database_url()


def run_migrations_offline() -> None:
    context.configure(
        url=_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # migrate_db() hands over an open connection; the CLI builds its own engine.
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return

    url = _url()
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = configure_engine(create_engine(url, connect_args=connect_args))
    try:
        with engine.connect() as connection:
            _run_with_connection(connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
