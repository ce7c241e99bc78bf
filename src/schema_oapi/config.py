"""Configuration management for schema-oapi."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")
    file: Optional[Path] = Field(default=None, description="Log file path")


class ConverterConfig(BaseModel):
    """Configuration for schema description generation."""

    cache_enabled: bool = Field(default=True, description="Cache location schemas per (location, schema object).")
    log_diagnostics: bool = Field(default=True, description="Log diagnostics such as unsupported locations through structlog.")


class Config(BaseSettings):
    """Main configuration for schema-oapi. Loads from environment variables prefixed with SCHEMA_OAPI_."""

    model_config = SettingsConfigDict(
        env_prefix='SCHEMA_OAPI_',
        env_nested_delimiter='__',  # e.g., SCHEMA_OAPI_CONVERTER__CACHE_ENABLED
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    converter: ConverterConfig = Field(default_factory=ConverterConfig)

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Environment variables are not layered on top.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
