import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.exceptions import StartupError


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values come from environment variables first, then from an env-style
    config file (`.env` unless another path is given to `load_settings`).
    `ENV` and `STORAGE_PATH` have no defaults: the process must not start
    without them.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student CRUD API"
    APP_VERSION: str = "1.0.0"
    ENV: str

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "localhost"
    PORT: int = 8082
    SHUTDOWN_TIMEOUT: int = 5

    # =============================================================================
    # STORAGE
    # =============================================================================
    STORAGE_PATH: str

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def resolve_config_path(cli_path: Optional[str] = None) -> Optional[str]:
    """CONFIG_PATH wins over the --config flag."""
    return os.getenv("CONFIG_PATH") or cli_path or None


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings once at startup.

    Raises StartupError when the config file is missing or a required
    key is absent/invalid.
    """
    if config_path is not None:
        if not Path(config_path).is_file():
            raise StartupError(f"config file does not exist: {config_path}")
        try:
            return Settings(_env_file=config_path)
        except ValidationError as exc:
            raise StartupError(f"unable to read config: {exc}") from exc

    try:
        return Settings()
    except ValidationError as exc:
        raise StartupError(f"unable to read config: {exc}") from exc
