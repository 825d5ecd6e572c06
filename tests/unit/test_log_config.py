"""Unit tests for the per-category logging setup."""

import logging

from assignment_service.config import Settings
from assignment_service.infrastructure.logging.log_config import _parse_level, setup_logging


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level="DEBUG", log_level_sql="ERROR", log_level_db="WARNING")
    root = logging.getLogger()
    previous = root.level

    try:
        setup_logging(settings)

        assert root.level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
        assert logging.getLogger("assignment_service.infrastructure.database").level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_parse_level_falls_back_to_info():
    assert _parse_level("warning") == logging.WARNING
    assert _parse_level("LOUD") == logging.INFO
