"""Shared utilities for CLI commands."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ..config import Settings
from ..config_loader import CatalogConfig, load_config, set_global_config_context
from ..error_handling import ErrorHandler, setup_logging


def setup_settings(
    *,
    config_file: Optional[str] = None,
    config_overrides: Optional[List[str]] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Setup and validate settings for CLI commands.

    CLI options win over environment variables, which win over the config file.
    """
    load_dotenv()
    settings = Settings.from_env()

    if config_file:
        settings.config_file = config_file

    # Apply global config context so downstream load_config() calls inherit CLI options
    overrides_dict = parse_config_overrides(config_overrides)
    set_global_config_context(config_file=settings.config_file, overrides=overrides_dict or None)

    if log_level:
        settings.log_level = log_level
    elif "DSCATALOG_LOG_LEVEL" not in os.environ:
        # A missing config file is reported by the commands that need it
        with ErrorHandler("config load", reraise=False, log_level=logging.DEBUG):
            settings.log_level = load_config().logging.get("level", settings.log_level)

    settings.ensure()
    setup_logging(settings.log_level, Path(settings.log_file) if settings.log_file else None)
    return settings


def load_cli_config() -> CatalogConfig:
    """Load config with the global CLI context, mapping file errors to ConfigurationError."""
    with ErrorHandler("config load"):
        return load_config()


def parse_config_overrides(config_overrides: Optional[List[str]]) -> Dict[str, Any]:
    """Parse CLI configuration overrides in key=value format.

    Args:
        config_overrides: List of strings in format "key=value" or "nested.key=value"

    Returns:
        Dictionary of parsed overrides
    """
    if not config_overrides:
        return {}

    overrides = {}
    for override in config_overrides:
        if "=" not in override:
            continue

        key, value = override.split("=", 1)
        overrides[key.strip()] = _parse_value(value.strip())

    return overrides


def _parse_value(value: str) -> Any:
    # Try to convert value to appropriate type
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if _is_int(value):
        return int(value)
    if _unsigned(value).replace(".", "", 1).isdecimal():
        return float(value)
    if "," in value:
        parts = [p.strip() for p in value.split(",") if p.strip()]
        if parts and all(_is_int(p) for p in parts):
            return [int(p) for p in parts]
    # Otherwise keep as string
    return value


def _unsigned(value: str) -> str:
    # At most one leading minus sign
    return value[1:] if value.startswith("-") else value


def _is_int(value: str) -> bool:
    return _unsigned(value).isdecimal()
