"""
Configuration settings for geocoord.
"""

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from geocoord.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        default_mgrs_precision: Digits per axis when rendering MGRS (1-5)
        default_order: Axis order used when formatting WGS84 output
        default_format: Angle format used when formatting WGS84 output
        default_compass: Whether WGS84 output uses N/S/E/W suffixes
        log_level: Level passed to ``setup_logging`` when none is given
        environment: Deployment environment, selects the console formatter
        json_logs: Whether file logs are written as JSON
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOCOORD_",
    )

    # Conversion defaults
    default_mgrs_precision: int = Field(default=5, ge=1, le=5)

    # Formatting defaults
    default_order: Literal["latlon", "lonlat"] = "latlon"
    default_format: Literal["dd", "ddm", "dms"] = "dd"
    default_compass: bool = False

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "development"


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If a GEOCOORD_* variable holds an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        keys = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(
            f"Invalid geocoord settings: {', '.join(keys)}",
            config_key=keys[0] if keys else None,
            details={"errors": e.errors()},
        ) from e


# Global settings instance
settings = load_settings()
