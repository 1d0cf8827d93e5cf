"""Client functions for the words statistics service."""

import time
from typing import Iterable, List, Optional, Tuple

import requests

from words_statistics.config import load_settings, read_config

REQUEST_TIMEOUT = 30


def resolve_service_url(config_path: Optional[str] = None) -> str:
    """Service URL from a JSON config file, falling back to WORDS_STATISTICS_URL."""
    if config_path is not None:
        config = read_config(config_path)
        if config.get("service_url"):
            return config["service_url"].rstrip("/")
    return load_settings().service_url.rstrip("/")


def add_word(base_url, word: Optional[str]):
    """Send a single word to the service."""
    response = requests.post(f"{base_url}/words", json={"word": word}, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def add_lines(base_url, lines: Iterable[str]) -> int:
    """Send lines of text to the service and return how many words it counted."""
    response = requests.post(f"{base_url}/lines", json={"lines": list(lines)}, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()["words_added"]


def get_statistics(base_url, limit: Optional[int] = None) -> List[Tuple[int, str]]:
    """Fetch (count, word) pairs from the service."""
    params = {"limit": limit} if limit is not None else None
    response = requests.get(f"{base_url}/statistics", params=params, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return [(entry["count"], entry["word"]) for entry in response.json()["statistics"]]


def wait_until_healthy(base_url, timeout=30.0, poll_interval=1.0):
    """Poll the health endpoint until the service answers."""
    deadline = time.monotonic() + timeout
    last_error = None
    while True:
        try:
            response = requests.get(f"{base_url}/health", timeout=poll_interval)
            if response.status_code == 200:
                return response.json()
        except requests.RequestException as e:
            last_error = e
        if time.monotonic() >= deadline:
            raise TimeoutError(f"Service at {base_url} not healthy after {timeout} seconds. Last error: {last_error}")
        time.sleep(poll_interval)
