"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
Every default reproduces the server's out-of-the-box behavior, so no
configuration is required to run it.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkchecker import __version__


class ServerSettings(BaseSettings):
    """Metadata advertised to the host during the MCP handshake."""

    name: str = Field(default="link-checker", description="Server name reported to the host")
    version: str = Field(default=__version__, description="Server version reported to the host")

    # Not "SERVER_": SERVER_NAME is a common host variable
    model_config = SettingsConfigDict(env_prefix="LINKCHECKER_SERVER_")


class ProbeSettings(BaseSettings):
    """HTTP probe configuration."""

    timeout_s: float = Field(
        default=10.0,
        gt=0,
        description="Total time allowed for one probe, measured from request start",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow redirects and classify the final response",
    )
    user_agent: str = Field(
        default=f"link-checker/{__version__}",
        description="User-Agent header sent with every probe",
    )
    get_fallback: bool = Field(
        default=False,
        description="Retry once with a streamed GET when HEAD answers 405 or 501. "
                    "Off by default: only HEAD is issued.",
    )

    model_config = SettingsConfigDict(env_prefix="PROBE_")


class Settings(BaseSettings):
    """Main application settings."""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    server: ServerSettings = Field(default_factory=ServerSettings)
    probe: ProbeSettings = Field(default_factory=ProbeSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    if env_file:
        return Settings(_env_file=env_file)
    return Settings()
