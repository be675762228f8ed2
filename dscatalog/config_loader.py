"""Configuration loader for ds-catalog with CLI override support."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import TRAVERSAL_ORDERS
from .error_handling import ConfigurationError, format_error_message

# Global context for configuration so that callers who don't
# thread config_file/overrides explicitly still respect CLI inputs
_GLOBAL_CONFIG_FILE: Optional[str] = None
_GLOBAL_OVERRIDES: Optional[Dict[str, Any]] = None


@dataclass
class CatalogConfig:
    """Main configuration class for ds-catalog."""
    demo: Dict[str, List[int]] = field(default_factory=dict)
    display: Dict[str, Any] = field(default_factory=dict)
    traversal: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)


def _default_config_path() -> Path:
    """Path of the default config shipped inside the package."""
    return Path(__file__).parent / "data" / "default.json"


def load_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> CatalogConfig:
    """Load configuration from file with optional CLI overrides.

    Args:
        config_file: Path to custom config file (defaults to the packaged data/default.json)
        overrides: Dictionary of CLI overrides in dot notation (e.g., "display.show_code": False)

    Returns:
        CatalogConfig instance
    """
    # Fall back to globally set context when explicit args are not provided
    if config_file is None and _GLOBAL_CONFIG_FILE is not None:
        config_file = _GLOBAL_CONFIG_FILE
    if overrides is None and _GLOBAL_OVERRIDES is not None:
        overrides = _GLOBAL_OVERRIDES

    if config_file:
        config_path = Path(config_file)
    else:
        config_path = _default_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

    # Apply CLI overrides
    if overrides:
        config_data = _apply_overrides(config_data, overrides)

    config = CatalogConfig(
        demo={name: _int_list(name, values) for name, values in config_data.get("demo", {}).items()},
        display=config_data.get("display", {}),
        traversal=config_data.get("traversal", {}),
        logging=config_data.get("logging", {}),
    )

    order = config.traversal.get("default_order", "inorder")
    if order not in TRAVERSAL_ORDERS:
        raise ConfigurationError(
            format_error_message("INVALID_TRAVERSAL_ORDER", orders=", ".join(TRAVERSAL_ORDERS))
        )
    return config


def _int_list(name: str, values: Any) -> List[int]:
    if isinstance(values, int) and not isinstance(values, bool):
        return [values]
    if not isinstance(values, list) or not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        raise ConfigurationError(f"demo.{name} must be a list of integers, got {values!r}")
    return list(values)


def set_global_config_context(*, config_file: Optional[str], overrides: Optional[Dict[str, Any]]) -> None:
    """Set global default context for config loading throughout the process."""
    global _GLOBAL_CONFIG_FILE, _GLOBAL_OVERRIDES
    _GLOBAL_CONFIG_FILE = config_file
    _GLOBAL_OVERRIDES = overrides


def _apply_overrides(config_data: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Apply CLI overrides to config data using dot notation."""
    result = copy.deepcopy(config_data)

    for key, value in overrides.items():
        # Split dot notation key (e.g., "demo.array")
        parts = key.split(".")
        current = result

        # Navigate to the parent of the target key
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        # Set the final value
        final_key = parts[-1]
        current[final_key] = value

    return result


def get_demo_values(config: CatalogConfig, structure: str) -> List[int]:
    """Get the scenario input values for a structure."""
    if structure not in config.demo:
        raise ConfigurationError(format_error_message("MISSING_DEMO_VALUES", structure=structure))
    return list(config.demo[structure])


def get_display_setting(config: CatalogConfig, setting_name: str, default: Any) -> Any:
    """Get display setting with fallback to default."""
    return config.display.get(setting_name, default)


def get_default_traversal_order(config: CatalogConfig) -> str:
    return config.traversal.get("default_order", "inorder")
