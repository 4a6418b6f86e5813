"""Configuration management for lightconsole.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides such as the bridge URL.
"""

from lightconsole.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
