"""Runtime configuration read from environment variables and JSON files."""

import json
import os

from pydantic import BaseModel

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SERVICE_URL = "http://localhost:8000"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    service_url: str = DEFAULT_SERVICE_URL


def load_settings() -> Settings:
    """Build settings from WORDS_STATISTICS_* environment variables."""
    port_string = os.getenv("WORDS_STATISTICS_PORT", str(DEFAULT_PORT))
    try:
        port = int(port_string)
    except ValueError:
        raise ValueError(f"WORDS_STATISTICS_PORT must be an integer, got {port_string!r}")
    if not 0 < port < 65536:
        raise ValueError(f"WORDS_STATISTICS_PORT out of range: {port}")

    log_level = os.getenv("WORDS_STATISTICS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"WORDS_STATISTICS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        host=os.getenv("WORDS_STATISTICS_HOST", DEFAULT_HOST),
        port=port,
        log_level=log_level,
        service_url=os.getenv("WORDS_STATISTICS_URL", DEFAULT_SERVICE_URL),
    )


def read_config(config_path="words_statistics.json") -> dict:
    """Read client configuration from a JSON file."""
    with open(config_path, "r") as f:
        config = json.load(f)

    return config
