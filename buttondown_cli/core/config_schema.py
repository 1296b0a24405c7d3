"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has wrong types or unknown fields, a clear error is raised at startup
instead of a cryptic KeyError deep in application code.

Every field has a default so the CLI also runs outside a checkout,
where no config/settings/ directory exists.

Each top-level class corresponds to one file in config/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.buttondown.email/v1"


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ApiSchema(_StrictBase):
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)


class ApplicationSchema(_StrictBase):
    name: str = "buttondown-cli"
    version: str = "0.1.0"
    description: str = "Command-line client for the Buttondown newsletter API"
    api: ApiSchema = Field(default_factory=ApiSchema)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/system.jsonl"
    max_bytes: int = 5242880
    backup_count: int = 3


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class LoggingSchema(_StrictBase):
    level: LogLevel = "WARNING"
    format: LogFormat = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v
