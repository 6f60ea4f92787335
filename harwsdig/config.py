"""Configuration loading — harwsdig.yaml, env vars, .env file, CLI overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from harwsdig.models.config import DisplayOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("harwsdig.yaml")
TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUTHY


class Settings(BaseModel):
    """Global application settings resolved from .env + env vars + config file."""

    log_level: str = "WARNING"
    display: DisplayOptions = Field(default_factory=DisplayOptions)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> Settings:
        """Load settings from .env file, environment variables, and harwsdig.yaml."""
        # Load .env file (does not override existing env vars)
        load_dotenv()

        settings = cls(
            log_level=os.environ.get("HARWSDIG_LOG_LEVEL", "WARNING").upper(),
            display=DisplayOptions(
                full_url=_env_flag("HARWSDIG_FULL_URL"),
                full_data=_env_flag("HARWSDIG_FULL_DATA"),
                raw_data=_env_flag("HARWSDIG_RAW_DATA"),
            ),
        )

        if config_path is None:
            config_path = os.environ.get("HARWSDIG_CONFIG") or DEFAULT_CONFIG_PATH
        path = Path(config_path)
        if path.exists():
            settings.display = load_display_config(path, base=settings.display)

        return settings


def load_display_config(path: Path, base: DisplayOptions | None = None) -> DisplayOptions:
    """Parse the ``display:`` section of a YAML file on top of ``base``."""
    base = base or DisplayOptions()
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning("Failed to parse %s: %s; using defaults", path, e)
        return base

    if not raw:
        return base

    display_raw = raw.get("display", {}) if isinstance(raw, dict) else None
    if not isinstance(display_raw, dict):
        logger.warning("Ignoring invalid 'display' section in %s", path)
        return base

    unknown = set(display_raw) - set(DisplayOptions.model_fields)
    for key in sorted(unknown):
        logger.warning("Skipping unknown display option '%s' in %s", key, path)

    merged = base.model_dump()
    merged.update({k: v for k, v in display_raw.items() if k not in unknown})
    try:
        return DisplayOptions.model_validate(merged)
    except ValidationError as e:
        logger.warning("Invalid display options in %s: %s; using defaults", path, e)
        return base
