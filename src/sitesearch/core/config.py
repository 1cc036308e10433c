"""
Search Configuration

Base configuration shared by the search engine, the page annotator and the CLI.
Values are read from the environment once, at import time.
"""

import os
from enum import Enum
from pathlib import Path


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT", Environment.PRODUCTION.value)
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


class Settings:
    """Search-level configuration (index source, matching, highlight timing)"""

    # Project Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"

    # Index
    # Local JSON file path or http(s) URL
    INDEX_SOURCE: str = os.getenv("SEARCH_INDEX", str(DATA_DIR / "search-index.json"))
    INDEX_TIMEOUT: float = float(os.getenv("INDEX_TIMEOUT", "10"))

    # Query
    MIN_QUERY_LEN: int = int(os.getenv("MIN_QUERY_LEN", "2"))
    MAX_QUERY_LEN: int = int(os.getenv("MAX_QUERY_LEN", "200"))

    # Result rendering
    SNIPPET_CONTEXT: int = int(os.getenv("SNIPPET_CONTEXT", "60"))
    TITLE_EXCERPT_LEN: int = int(os.getenv("TITLE_EXCERPT_LEN", "80"))

    # Timers (seconds)
    DEBOUNCE_DELAY: float = float(os.getenv("DEBOUNCE_DELAY", "0.3"))
    HIGHLIGHT_SCROLL_DELAY: float = float(os.getenv("HIGHLIGHT_SCROLL_DELAY", "0.3"))
    HIGHLIGHT_FADE_DELAY: float = float(os.getenv("HIGHLIGHT_FADE_DELAY", "5.0"))
    HIGHLIGHT_REMOVE_DELAY: float = float(os.getenv("HIGHLIGHT_REMOVE_DELAY", "0.5"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Environment
    ENVIRONMENT: Environment = _get_environment()


settings = Settings()
