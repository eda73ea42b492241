"""
Configuration management for the Dessert Meals app.

This module centralizes environment variable loading from the .env file at project root.
It should be imported early by entry points (streamlit_app/app.py, sandbox scripts)
so .env is loaded before any other code reads environment variables.

When .env does not exist, load_dotenv() is a no-op and process environment
variables are used as-is.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT_SECONDS: Optional request timeout in seconds. Unset means no timeout
  (the requests default).
- MEALS_LOG_LEVEL: Optional, defaults to "INFO"
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_LOG_LEVEL = "INFO"

# The list screen only ever shows this category
DESSERT_CATEGORY = "Dessert"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in the file.
    """
    # meals/config.py -> meals/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the API base URL, without a trailing slash.

        Returns:
            Base URL string (default: DEFAULT_MEALDB_BASE_URL)
        """
        url = os.getenv("MEALDB_BASE_URL") or DEFAULT_MEALDB_BASE_URL
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the per-request timeout in seconds.

        Returns:
            Timeout as float, or None when MEALDB_TIMEOUT_SECONDS is unset or empty

        Raises:
            RuntimeError: If the value is not a positive number
        """
        raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
        if raw is None or not raw.strip():
            return None
        try:
            timeout = float(raw)
        except ValueError as e:
            raise RuntimeError(
                f"MEALDB_TIMEOUT_SECONDS must be a number of seconds, got {raw!r}"
            ) from e
        if timeout <= 0:
            raise RuntimeError(
                f"MEALDB_TIMEOUT_SECONDS must be greater than zero, got {raw!r}"
            )
        return timeout

    @staticmethod
    def get_log_level() -> str:
        """Get the log level name (default: "INFO")."""
        return (os.getenv("MEALS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for an entry point.

    Args:
        level: Log level name. Falls back to MEALS_LOG_LEVEL, then INFO.
               Unknown names fall back to INFO.
    """
    level_name = (level or MealDBConfig.get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
