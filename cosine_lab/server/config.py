"""Configuration settings for the server."""

from functools import lru_cache

from cosine_lab.utils.config import PROJECT_ROOT, Config, load_config

STATIC_DIR = PROJECT_ROOT / "cosine_lab" / "static"


@lru_cache(maxsize=1)
def get_settings() -> Config:
    """Load the server configuration once per process."""
    return load_config()
