"""Configuration files (YAML) and helpers for nvstore's own settings.

``ConfigManager`` reads default files from this folder and merges them with
user overrides.
"""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
