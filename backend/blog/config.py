import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Something Blog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./blog.sqlite3"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Admin session (signed cookie) and Google OAuth
    session_secret_key: str = "dev-session-secret-change-me"
    session_max_age: int = 60 * 60 * 24 * 7
    admin_email: str = ""
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_uri: str | None = None
    admin_redirect_url: str = "/admin"

    # Image upload & storage ("local" or "s3")
    storage_backend: str = "local"
    upload_dir: str = "uploads"
    upload_url_prefix: str = "/uploads"
    max_upload_size_mb: int = 8
    s3_bucket: str = ""
    s3_endpoint_url: str | None = None
    s3_region: str = "auto"
    s3_access_key_id: str = ""
    s3_secret_access_key: str = ""
    s3_public_base_url: str = ""

    # Google Cloud Translation (v2 REST)
    google_translate_api_key: str = ""
    google_translate_base_url: str = "https://translation.googleapis.com/language/translate/v2"
    translate_timeout: float = 30.0

    # Public feed
    feed_page_size: int = 10
    related_articles_limit: int = 3
    excerpt_length: int = 160

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # image upload storage adapters
    log_level_auth: str = "INFO"             # OAuth login + admin guard
    log_level_translation: str = "INFO"      # Google Translate client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn about settings that leave parts of the site unusable."""
        if not self.admin_email.strip():
            _config_logger.warning("ADMIN_EMAIL is not set; every admin request will be rejected")

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
