# ============================================================================
# as2_mime/config_manager.py
# ============================================================================
"""
Configuration management for MIME part parsing.
Supports environment variable configuration for service deployments.
"""

import os
from dataclasses import dataclass, field

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ParsingConfiguration:
    """Settings applied while building parts from raw text."""
    keep_raw: bool = True
    max_nested_depth: int = 10


@dataclass(frozen=True)
class LoggingConfiguration:
    """Logging configuration settings."""
    level: str = "INFO"


@dataclass(frozen=True)
class MimeConfiguration:
    """Complete configuration combining all sub-configurations."""
    parsing: ParsingConfiguration = field(default_factory=ParsingConfiguration)
    logging: LoggingConfiguration = field(default_factory=LoggingConfiguration)

    def validate(self) -> None:
        """Validate configuration values and raise ConfigurationError for invalid settings."""
        errors = []

        if self.parsing.max_nested_depth <= 0:
            errors.append("max_nested_depth must be positive")

        if self.logging.level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"unknown log level {self.logging.level!r}")

        if errors:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}",
                {"error_count": len(errors)}
            )


def get_config_from_env() -> MimeConfiguration:
    """Load configuration from environment variables."""
    parsing_config = ParsingConfiguration(
        keep_raw=_get_bool_env("AS2_MIME_KEEP_RAW", True),
        max_nested_depth=_get_int_env("AS2_MIME_MAX_NESTED_DEPTH", 10)
    )

    logging_config = LoggingConfiguration(
        level=os.getenv("AS2_MIME_LOG_LEVEL", "INFO").upper()
    )

    config = MimeConfiguration(
        parsing=parsing_config,
        logging=logging_config
    )

    config.validate()

    return config


def get_default_config() -> MimeConfiguration:
    """Get default configuration with factory defaults."""
    config = MimeConfiguration()
    config.validate()
    return config


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    else:
        return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer value from environment variable."""
    try:
        return int(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default
