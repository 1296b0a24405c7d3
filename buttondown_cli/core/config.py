"""
Configuration Management.

Loads secrets from config/.env (or the process environment) and settings
from config/settings/*.yaml. Both live under the project root, found via
the .project_root marker file. When no project root is found, schema
defaults apply and only the process environment is consulted.

Secrets (.env / environment):
    BUTTONDOWN_API_KEY

Settings (YAML):
    application.yaml   - App identity, API base URL and timeout
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from buttondown_cli.core.config_schema import ApplicationSchema, LoggingSchema
from buttondown_cli.core.exceptions import ConfigurationError


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets loaded from config/.env or the environment. Only tokens and keys."""

    buttondown_api_key: str | None = None

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Missing files fall back to defaults."""
    try:
        raw = load_yaml_config(filename)
    except (RuntimeError, FileNotFoundError):
        raw = {}
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}",
            code="CFG_INVALID",
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance. Resolves .env path from project root when there is one."""
    try:
        env_path = find_project_root() / "config" / ".env"
    except RuntimeError:
        return Settings(_env_file=None)
    return Settings(_env_file=str(env_path) if env_path.is_file() else None)


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_api_base_url() -> tuple[str, float]:
    """
    Get the Buttondown API base URL and timeout from application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    api = get_app_config().application.api
    return api.base_url.rstrip("/"), float(api.timeout)
