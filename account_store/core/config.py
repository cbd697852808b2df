import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_log_level(value) -> str:
    """Upper-case a logging level name, rejecting unknown names."""
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a standard logging level, got {value!r}")
    return level


# Default database file, kept next to the package
DEFAULT_DATABASE_PATH = Path(__file__).resolve().parents[1] / "database.sqlite"


class Settings(BaseSettings):
    """
    Store settings loaded from environment variables or .env.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Ignore extra fields in .env file
    )

    # -------------------------
    # Database
    # -------------------------
    DATABASE_PATH: Optional[str] = Field(
        default=None,
        description="SQLite database file; defaults to database.sqlite beside the package"
    )
    SQLALCHEMY_ECHO: bool = False

    # -------------------------
    # Logging
    # -------------------------
    LOG_LEVEL: str = "INFO"

    @property
    def database_file(self) -> Path:
        """Resolved path of the SQLite database file."""
        if self.DATABASE_PATH:
            return Path(self.DATABASE_PATH).expanduser()
        return DEFAULT_DATABASE_PATH

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        return normalize_log_level(v)


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Apply LOG_LEVEL with the standard log format.

    Raises:
        ValueError: If level is not a standard logging level name
    """
    logging.basicConfig(
        level=logging.getLevelName(normalize_log_level(level or settings.LOG_LEVEL)),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
