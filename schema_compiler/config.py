"""
Type-safe configuration for the schema compiler using Pydantic Settings.

Values are loaded from environment variables prefixed with SCHEMA_COMPILER_
or from a .env file.

Usage:
    from schema_compiler.config import config

    timeout = config.http_timeout
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SchemaCompilerConfig(BaseSettings):
    """
    Central configuration for the schema compiler.

    Only the collaborators around the core (sources, logging, CLI) read it;
    compilation and validation are pure.
    """
    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_COMPILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO", description="Level for schema_compiler loggers")

    # ============================================================================
    # Source acquisition
    # ============================================================================

    http_timeout: float = Field(default=10.0, gt=0, description="Timeout in seconds for schema/target URLs")
    http_verify_ssl: bool = Field(default=True, description="Verify TLS certificates when fetching URLs")
    allow_remote_sources: bool = Field(
        default=True,
        description="If False, http(s) sources are rejected instead of fetched",
    )

    # ============================================================================
    # Fixture runner
    # ============================================================================

    fixtures_dir: str = Field(default="./fixtures", description="Default fixture tree for `schema-compiler run`")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


config = SchemaCompilerConfig()
