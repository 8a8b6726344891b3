"""Shared configuration for the milu command line tools.

Settings come from the process environment, with a dotenv file as fallback.
Values present in the environment win over the file.
"""

import logging
import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

# Written to the working directory unless overridden
DEFAULT_OUTPUT_FILE = "environment-variables.md"

OUTPUT_ENV_VAR = "MILU_ENV_DOCS_OUTPUT"
LOG_LEVEL_ENV_VAR = "MILU_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Resolved settings for one CLI invocation."""

    output_file: Path = Path(DEFAULT_OUTPUT_FILE)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any case of a standard logging level name."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(env_file: Path | None = None) -> Settings:
    """Resolve settings from the environment, falling back to `env_file` if it exists.

    The dotenv file is only read: its variables are never copied into os.environ,
    since it is often the very .env being documented.
    """
    file_values: dict[str, str | None] = {}
    if env_file is not None and env_file.exists():
        file_values = dotenv_values(env_file)
        logger.debug("Read settings overrides from %s", env_file)

    values: dict[str, str] = {}
    for field, env_var in (("output_file", OUTPUT_ENV_VAR), ("log_level", LOG_LEVEL_ENV_VAR)):
        value = os.getenv(env_var) or file_values.get(env_var)
        if value:
            values[field] = value
    return Settings(**values)
