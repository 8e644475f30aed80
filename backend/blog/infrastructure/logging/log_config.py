"""Logging setup for the blog API.

One root level plus per-area levels, all from Settings, so SQL echo,
outbound HTTP chatter and boto internals can be turned down independently
of the application's own INFO logs.

    from blog.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from blog.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_storage": ("UploadService", "blog.infrastructure.storage", "botocore", "boto3", "s3transfer"),
    "log_level_auth": ("blog.infrastructure.auth", "blog.presentation.api.v1.endpoints.auth", "authlib"),
    "log_level_translation": ("blog.infrastructure.translation",),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels; add a stderr handler if none exists."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # uvicorn installs its own handlers; tests and scripts do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    levels: dict[str, str] = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        raw = getattr(settings, field_name, "INFO")
        levels[field_name.removeprefix("log_level_")] = raw
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw))

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s %s",
        settings.log_level,
        " ".join(f"{k}={v}" for k, v in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
