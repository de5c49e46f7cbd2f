import logging

import pytest

from taskboard.config import Settings
from taskboard.logging_setup import setup_logging
from taskboard.models import Board
from taskboard.utils.ordering import register_order_listener


def test_cors_origins_list_is_sanitized():
    settings = Settings(CORS_ORIGINS=" http://a.test , ,http://b.test")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
    assert Settings(CORS_ORIGINS="").cors_origins_list == []


def test_default_columns_setting():
    assert Settings().DEFAULT_COLUMNS == ["To Do", "Doing", "Done"]


def test_order_listener_needs_scope_and_order_columns():
    with pytest.raises(ValueError):
        register_order_listener(Board, "board_id")


def test_setup_logging_replaces_handlers(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "taskboard.log"
    try:
        setup_logging("DEBUG", log_file)
        setup_logging("DEBUG", log_file)

        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("taskboard.test").info("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
