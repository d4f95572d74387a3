"""Configuration management for the Library Circulation service.

Settings here belong to the embedding application, not to the circulation
core: the core receives its collaborators already built and never reads
the environment. This module decides which collaborator backends get built:
1. Service metadata - name and version used in logs and traces
2. Backends - SQL or in-memory directory and member validation
3. Logging and observability - log level and Logfire export
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CirculationConfig(BaseSettings):
    """Settings for the circulation service and its reference collaborators."""

    model_config = SettingsConfigDict(
        # Use LIBRARY_CIRCULATION_ prefix for all env vars
        env_prefix="LIBRARY_CIRCULATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    # === Service Metadata ===

    service_name: str = Field(
        default="library-circulation",
        description="Service name reported in logs and traces",
        pattern=r"^[a-z0-9-]+$",
    )

    service_version: str = Field(
        default="0.1.0",
        description="Service version reported in logs and traces",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Collaborator Backends ===

    database_path: Path = Field(
        default=Path("data/library.db"),
        description="SQLite database file path for the SQL backends",
    )

    directory_backend: str = Field(
        default="sql",
        description="Book directory implementation",
        pattern=r"^(sql|memory)$",
    )

    member_backend: str = Field(
        default="sql",
        description="Member validator implementation",
        pattern=r"^(sql|memory)$",
    )

    notifier: str = Field(
        default="log",
        description="Notifier used for borrow/return events",
        pattern=r"^(log|none)$",
    )

    # === Logging ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Observability (Logfire) ===

    logfire_token: str | None = Field(
        default=None,
        description="Logfire write token",
        repr=False,
    )

    environment: str = Field(
        default="development",
        description="Deployment environment reported to Logfire",
    )

    send_to_logfire: bool = Field(
        default=False,
        description="Export spans and metrics to Logfire",
    )

    console_output: bool = Field(
        default=False,
        description="Print spans to the console",
    )

    # === Validation Methods ===

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: Path) -> Path:
        """Ensure the database directory exists."""
        abs_path = v.absolute()
        abs_path.parent.mkdir(parents=True, exist_ok=True)

        if not abs_path.parent.is_dir():
            raise ValueError(f"Database directory {abs_path.parent} is not accessible")

        return abs_path

    @field_validator("service_name")
    @classmethod
    def validate_service_name(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Service name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Service name must not exceed 50 characters")
        return v

    # === Computed Properties ===

    @property
    def is_development(self) -> bool:
        """True when debug output is wanted."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def uses_database(self) -> bool:
        """Whether any configured backend needs the SQL database."""
        return self.directory_backend == "sql" or self.member_backend == "sql"

    def get_database_url(self) -> str:
        """Get SQLAlchemy database URL."""
        return f"sqlite:///{self.database_path}"


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CirculationConfig | None = None


def get_config() -> CirculationConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CirculationConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
