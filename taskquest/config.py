"""Configuration management"""
import logging
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

from taskquest.exceptions import ConfigurationError

load_dotenv()

# Storage
# - 'json' (default): persist to DATA_PATH / STORE_FILENAME
# - 'memory': keep everything in-process (nothing survives a restart)
STORE_BACKEND: str = os.getenv("STORE_BACKEND", "json")
DATA_PATH: Path = Path(os.getenv("DATA_PATH", "./data"))
STORE_FILENAME: str = os.getenv("STORE_FILENAME", "taskquest.json")

# Calendar used for streaks and "today" comparisons (IANA name)
TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKENDS = ("json", "memory")


# Validation
def validate_config() -> None:
    """Validate configuration values"""
    if STORE_BACKEND not in STORE_BACKENDS:
        raise ConfigurationError(
            f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got '{STORE_BACKEND}'",
            config_key="STORE_BACKEND",
        )
    try:
        ZoneInfo(TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown timezone '{TIMEZONE}'",
            config_key="TIMEZONE",
            cause=e,
        )
    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        raise ConfigurationError(
            f"Unknown log level '{LOG_LEVEL}'",
            config_key="LOG_LEVEL",
        )


def store_path() -> Path:
    """Full path of the JSON store file"""
    return DATA_PATH / STORE_FILENAME
