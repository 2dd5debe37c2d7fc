"""
Engine Settings
===============

Engine settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


def validate_css_identifier(value: str) -> str:
    """Check that a class prefix is usable as a CSS identifier."""
    if (
        not isinstance(value, str)
        or not value
        or not value.replace("-", "").replace("_", "").isalnum()
        or not value.isascii()
        or value[0].isdigit()
    ):
        raise ValueError(f"Class prefix must be a CSS identifier, got {value!r}")
    return value


class Settings(BaseSettings):
    """Main engine settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Footlights", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=False, description="Write rotating log files")
    log_dir: Path = Field(default=Path("./logs"), description="Log file directory")

    # Rendering Configuration
    reference_policy: str = Field(
        default="strict", description="Unresolved image reference policy: strict, permissive"
    )
    class_prefix: str = Field(default="fl", description="CSS class prefix for rendered markup")
    default_gradient_angle: float = Field(
        default=180.0, description="Gradient angle in degrees when none is given"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("reference_policy")
    @classmethod
    def validate_reference_policy(cls, v: str) -> str:
        """Validate image reference policy."""
        allowed = {"strict", "permissive"}
        if v.lower() not in allowed:
            raise ValueError(f"Reference policy must be one of: {allowed}")
        return v.lower()

    @field_validator("class_prefix")
    @classmethod
    def validate_class_prefix(cls, v: str) -> str:
        """Class prefix must be usable as a CSS identifier."""
        return validate_css_identifier(v)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="FOOTLIGHTS_"
    )


# Global settings instance - will be initialized when needed
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
