"""Per-category log levels for the blog API.

``setup_logging()`` runs once from the FastAPI lifespan. It sets the root
level and then tunes the SQL, outbound HTTP, uvicorn and identity-service
loggers from their own settings.
"""

import logging
import sys

from quillpress.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls.
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_identity": ("quillpress.infrastructure.identity",),
}


def setup_logging() -> None:
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handler; plain scripts and tests do not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    levels = {}
    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level = _parse_level(getattr(settings, field_name, "INFO"))
        levels[field_name] = logging.getLevelName(level)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug("Logging configured: root=%s %s", settings.log_level, levels)


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
