"""Configuration management implementation.

Contains the AppConfig class implementation.
"""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


class AppConfig:
    """Application configuration (Singleton pattern).

    Centralizes configuration with environment variable support. Use the
    `config` instance from __init__.py instead of creating new instances.
    """

    _instance: "AppConfig | None" = None
    _initialized: bool

    def __new__(cls) -> "AppConfig":
        """Singleton implementation - only one instance allowed."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        if self._initialized:
            return

        self._load_from_env()
        self._initialized = True
        logger.debug("Configuration initialized")

    def _load_from_env(self) -> None:
        """Internal method to load values from environment variables."""
        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        self.log_to_file = os.getenv("LOG_TO_FILE", "false").lower() == "true"
        self.log_file = os.getenv("LOG_FILE") if self.log_to_file else None

        # Driver
        self.gcd_max_steps = self._parse_int("GCD_MAX_STEPS", 0)
        self.show_prompts = os.getenv("SHOW_PROMPTS", "true").lower() == "true"

        # Output
        self.output_file = os.getenv("RANGESUM_OUTPUT") or None

    def reload(self) -> None:
        """Force reload configuration from environment variables."""
        logger.info("Reloading configuration from environment...")
        self._load_from_env()

    def _parse_int(self, name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r; using %d", name, raw, default)
            return default

    @property
    def gcd_step_limit(self) -> int | None:
        """Step bound for gcd, or None when unbounded (0 or negative)."""
        return self.gcd_max_steps if self.gcd_max_steps > 0 else None

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []
        if self.gcd_max_steps < 0:
            issues.append(f"GCD_MAX_STEPS must be >= 0, got {self.gcd_max_steps}")
        if self.log_to_file and not self.log_file:
            issues.append("LOG_TO_FILE is true but LOG_FILE is not set")
        if not hasattr(logging, self.log_level):
            issues.append(f"Unknown LOG_LEVEL: {self.log_level}")
        return issues

    def to_dict(self) -> dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "log_level": self.log_level,
            "log_to_file": self.log_to_file,
            "log_file": self.log_file,
            "gcd_max_steps": self.gcd_max_steps,
            "show_prompts": self.show_prompts,
            "output_file": self.output_file,
        }


__all__ = ["AppConfig"]
