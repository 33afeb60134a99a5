"""Configuration loader for podcast feed loading."""

import os
import sys
import tempfile
import tomllib
from datetime import timedelta
from pathlib import Path
from typing import Optional

from .transport import DEFAULT_TIMEOUT


def default_cache_dir() -> str:
    """Cache directory used when caching is requested without a directory."""
    return os.path.join(tempfile.gettempdir(), "podcast-feed-cache")


class FeedConfig:
    """Settings applied to every feed load."""

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        cache_max_age: Optional[timedelta] = None,
        cache_dir: Optional[str] = None,
    ):
        self.timeout = timeout
        self.cache_max_age = cache_max_age
        self.cache_dir = cache_dir

    def get_cache_dir(self) -> str:
        """Get cache directory (configured or default)."""
        if self.cache_dir:
            return self.cache_dir
        return default_cache_dir()


def _to_int(value, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        print(f"Error: '{name}' must be an integer, got {value!r}", file=sys.stderr)
        sys.exit(1)


def load_config(config_path: Optional[str] = None) -> FeedConfig:
    """
    Load configuration from TOML file or environment variables.

    The TOML file holds a ``[feed]`` table::

        [feed]
        timeout = 20000        # milliseconds
        cache_max_age = 3600   # seconds, omit to disable caching
        cache_dir = "/var/cache/podcast-feed"

    Priority order:
    1. Specified config file path
    2. config.toml in current directory
    3. Environment variables

    Args:
        config_path: Optional path to config file

    Returns:
        FeedConfig object with loaded settings

    Raises:
        SystemExit: If a numeric setting is not an integer or the given
            config file does not exist
    """
    config_data = {}

    if config_path:
        config_file = Path(config_path)
        if not config_file.exists():
            print(f"Error: Config file not found: {config_file}", file=sys.stderr)
            sys.exit(1)
    else:
        config_file = Path("config.toml")

    if config_file.exists():
        with open(config_file, "rb") as f:
            config_data = tomllib.load(f).get("feed", {})
        if not isinstance(config_data, dict):
            print(f"Error: [feed] in {config_file} must be a table", file=sys.stderr)
            sys.exit(1)

    # Load values with environment variable fallback
    timeout = _to_int(
        config_data.get("timeout", os.environ.get("PODCAST_FEED_TIMEOUT")), "timeout"
    )
    cache_max_age = _to_int(
        config_data.get("cache_max_age", os.environ.get("PODCAST_FEED_CACHE_MAX_AGE")),
        "cache_max_age",
    )
    cache_dir = config_data.get("cache_dir") or os.environ.get("PODCAST_FEED_CACHE_DIR")

    return FeedConfig(
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        cache_max_age=timedelta(seconds=cache_max_age) if cache_max_age is not None else None,
        cache_dir=cache_dir,
    )
