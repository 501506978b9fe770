"""
Environment-specific configuration settings.

Defaults suit local development and tests.
"""

from dataclasses import dataclass
import logging
import os


def _environment() -> str:
    return os.environ.get("MUSEO_ENVIRONMENT", "dev")


def _log_level(env: str) -> str:
    """Requested level name, or the environment default when it is not a known level."""
    default_level = "WARNING" if env == "prod" else "INFO"
    requested = os.environ.get("MUSEO_LOG_LEVEL", default_level).upper()
    # getLevelName maps known names to their int value and anything else to a string
    if isinstance(logging.getLevelName(requested), int):
        return requested
    return default_level


def _sequence_start() -> int:
    raw_start = os.environ.get("MUSEO_SEQUENCE_START", "0")
    try:
        sequence_start = int(raw_start)
    except ValueError as exc:
        raise ValueError(f"MUSEO_SEQUENCE_START must be an integer: {raw_start!r}") from exc
    if sequence_start < 0:
        raise ValueError("MUSEO_SEQUENCE_START cannot be negative")
    return sequence_start


@dataclass
class Settings:
    """Application settings read once per process."""

    environment: str = "dev"
    log_level: str = "INFO"

    # First ticket issued gets sequence_start + 1
    sequence_start: int = 0

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables; a bad sequence start raises ValueError."""
        env = _environment()
        return cls(environment=env, log_level=_log_level(env), sequence_start=_sequence_start())

    @staticmethod
    def log_level_from_environment() -> str:
        """Log level alone, so logging setup never depends on the sequence settings."""
        return _log_level(_environment())
