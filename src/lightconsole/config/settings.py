"""Configuration management for lightconsole.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/lightconsole.yaml")
DEFAULT_ENV_PATH = Path(".env")


class BridgeConfig(BaseModel):
    base_url: str = Field(default="http://127.0.0.1:7007", description="Lighting bridge base URL")
    timeout: float | None = Field(default=None, gt=0, description="Transport timeout in seconds")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the lightconsole system.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "LIGHTCONSOLE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment wins over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _apply_env_overrides(yaml_data: dict) -> None:
    """Apply non-prefixed overrides from the environment, then from .env."""
    bridge_url = os.environ.get("LIGHTING_BRIDGE_URL", "")
    if not bridge_url and DEFAULT_ENV_PATH.exists():
        bridge_url = dotenv_values(DEFAULT_ENV_PATH).get("LIGHTING_BRIDGE_URL") or ""
    if not bridge_url:
        return

    if "bridge" not in yaml_data or yaml_data["bridge"] is None:
        yaml_data["bridge"] = {}

    if not yaml_data["bridge"].get("base_url"):
        yaml_data["bridge"]["base_url"] = bridge_url
