"""Configuration package.

Implementation is in config.py; this module only exposes the singleton.
"""

from rangesum.core.config.config import AppConfig

# Singleton instance - use this throughout the application
config = AppConfig()

__all__ = ["AppConfig", "config"]
