"""Logging setup for the assignment service.

Levels come from Settings, one per logger family, so SQL echo and uvicorn
access lines can be tuned apart from the service's own messages.
"""

import logging
import sys

from assignment_service.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field -> loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_db": ("assignment_service.infrastructure.database",),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels; run once from the lifespan."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    _ensure_handler(root)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s db=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_db,
    )


def _ensure_handler(root: logging.Logger) -> None:
    # uvicorn installs its own handler; tests and `python -m` runs do not
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)


def _parse_level(raw: str) -> int:
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
