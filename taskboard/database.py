import logging
import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from taskboard.config import settings

logger = logging.getLogger(__name__)

# Default to a local SQLite database if no DATABASE_URL is provided
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(BASE_DIR, ".."))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "taskboard.db")
MIGRATIONS_DIR = os.path.join(BASE_DIR, "migrations")


def database_url() -> str:
    return settings.DATABASE_URL or f"sqlite:///{DEFAULT_DB_PATH}"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(engine: Engine) -> Engine:
    """Attach connection hooks needed by the schema to ``engine``."""
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _build_engine() -> Engine:
    """Create the SQLAlchemy engine, preferring the configured DATABASE_URL."""
    url = database_url()

    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            echo=settings.DB_ECHO,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_engine(
            url,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    return configure_engine(engine)


engine = _build_engine()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the models
Base = declarative_base()


def alembic_config() -> Config:
    """Alembic configuration pointing at the packaged migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    return cfg


def migrate_db(bind: Engine = None, revision: str = "head") -> None:
    """Upgrade the database schema to ``revision`` with Alembic."""
    cfg = alembic_config()
    with (bind or engine).begin() as connection:
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, revision)
    logger.info("Database schema at revision %s", revision)


def init_db(bind: Engine = None) -> None:
    """Create every table that does not exist yet, straight from the models."""
    # Importing the models registers them on Base.metadata
    import taskboard.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Engine = None) -> None:
    import taskboard.models  # noqa: F401

    bind = bind or engine
    Base.metadata.drop_all(bind=bind)
    with bind.begin() as connection:
        connection.execute(text("DROP TABLE IF EXISTS alembic_version"))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
