from importlib.metadata import PackageNotFoundError, version
from typing import Final

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_APP_NAME, DEFAULT_LOG_LEVEL, ENV_PREFIX
from .domain.constants import DEFAULT_CATALOG_CAPACITY

try:
    __version__ = version("bookcatalog")
except PackageNotFoundError:
    __version__ = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    app_name: str = Field(default=DEFAULT_APP_NAME, description="Application name")
    version: str = Field(default=__version__, description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Catalog configuration
    catalog_capacity: int = Field(
        default=DEFAULT_CATALOG_CAPACITY,
        description="Maximum number of books; non-positive values use the default",
    )

    # Logging configuration
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Root log level")
    log_to_file: bool = Field(
        default=False, description="Also write logs to a file in log_dir"
    )
    log_dir: str = Field(default="logs", description="Directory for the log file")

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names in any case."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_capacity(self) -> int:
        """Get the catalog capacity, falling back to the default when invalid."""
        if self.catalog_capacity > 0:
            return self.catalog_capacity
        return DEFAULT_CATALOG_CAPACITY


# Global settings instance
settings: Final = Settings()
