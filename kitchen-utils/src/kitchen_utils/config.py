"""Configuration for kitchen utilities.

Loads settings from the process environment and an optional .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv

# Load .env file (if exists, silently continues if missing)
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")


class Config:
    """Settings loaded from environment variables."""

    def __init__(self) -> None:
        # SQLite database holding recipes and inventory
        self.KITCHEN_DB_PATH: str = os.getenv("KITCHEN_DB_PATH", "data/kitchen.db")
        # Minimum coverage percentage for a recipe to be suggested. Default: 60
        self.SUGGESTION_THRESHOLD: int = _int_env("SUGGESTION_THRESHOLD", 60)
        # Items expiring within this many days are flagged. Default: 3
        self.EXPIRING_SOON_DAYS: int = _int_env("EXPIRING_SOON_DAYS", 3)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a setting is out of range.
        """
        if not (0 <= self.SUGGESTION_THRESHOLD <= 100):
            raise ValueError(
                f"SUGGESTION_THRESHOLD must be between 0 and 100, got: {self.SUGGESTION_THRESHOLD}"
            )
        if self.EXPIRING_SOON_DAYS < 0:
            raise ValueError(
                f"EXPIRING_SOON_DAYS must be non-negative, got: {self.EXPIRING_SOON_DAYS}"
            )
        if self.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(
                f"LOG_LEVEL must be DEBUG, INFO, WARNING or ERROR, got: {self.LOG_LEVEL}"
            )


config = Config()
