import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "User Record Service"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./user_db.sqlite3"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Server (uvicorn)
    host: str = "0.0.0.0"
    port: int = 3001

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.database_echo and self.app_env != "development":
            _config_logger.warning(
                "DATABASE_ECHO is enabled outside development (app_env=%s); "
                "SQL statements including passwords will be logged",
                self.app_env,
            )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, reading .env only once."""
    return Settings()
