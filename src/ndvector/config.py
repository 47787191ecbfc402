# ndvector Configuration
# ======================
# Library defaults for display and tolerance-based comparison.
# Vector arithmetic itself has no settings.
#
# Usage:
#   from ndvector.config import get_setting, load_config
#   atol = get_setting('comparison.atol')
#   load_config('ndvector.yaml', apply=True)

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {

    # =========================================================
    # repr() formatting
    # =========================================================
    'display': {
        'precision': 6,           # Significant digits per component
        'max_components': 10,     # Longer vectors are elided in the middle
    },

    # =========================================================
    # ndvector.testing tolerances
    # =========================================================
    'comparison': {
        'rtol': 0.0,
        'atol': 1e-15,
    },
}

VECTOR_CONFIG = copy.deepcopy(DEFAULT_CONFIG)


# =========================================================
# Helper functions to access config
# =========================================================

def get_setting(path: str, default=None):
    """
    Get a setting by dot-notation path.

    Example:
        get_setting('comparison.atol')     # Returns 1e-15
        get_setting('display.precision')   # Returns 6
    """
    keys = path.split('.')
    value = VECTOR_CONFIG
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    if isinstance(value, dict):
        return copy.deepcopy(value)
    return value


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge section dicts from overrides over base. Returns a new dict."""
    merged = copy.deepcopy(base)
    for section, values in overrides.items():
        if section not in DEFAULT_CONFIG:
            raise ValueError(
                f"Unknown config section: {section}. Available: {list(DEFAULT_CONFIG)}"
            )
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        unknown = [key for key in values if key not in DEFAULT_CONFIG[section]]
        if unknown:
            raise ValueError(
                f"Unknown {section} setting: {unknown[0]}. "
                f"Available: {list(DEFAULT_CONFIG[section])}"
            )
        merged[section].update(values)
    return merged


def load_config(path: Union[str, Path], apply: bool = False) -> Dict[str, Any]:
    """
    Load settings from a YAML file, merged over the defaults.

    Args:
        path: YAML file with any subset of the default sections
        apply: If True, make the result the active configuration

    Returns:
        Merged config dict
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = _merge(DEFAULT_CONFIG, raw)
    errors = validate_config(config)
    if errors:
        raise ValueError(f"Invalid config in {path}: " + "; ".join(errors))

    logger.info(f"Loaded ndvector config from {path}")

    if apply:
        VECTOR_CONFIG.clear()
        VECTOR_CONFIG.update(config)
    return config


def configure(**sections: Dict[str, Any]) -> Dict[str, Any]:
    """
    Override active settings in place.

    Example:
        configure(comparison={'atol': 1e-9})
    """
    config = _merge(VECTOR_CONFIG, sections)
    errors = validate_config(config)
    if errors:
        raise ValueError("Invalid config: " + "; ".join(errors))
    VECTOR_CONFIG.clear()
    VECTOR_CONFIG.update(config)
    return copy.deepcopy(VECTOR_CONFIG)


def reset_config() -> None:
    """Restore the defaults."""
    VECTOR_CONFIG.clear()
    VECTOR_CONFIG.update(copy.deepcopy(DEFAULT_CONFIG))


# =========================================================
# Config validation
# =========================================================

def validate_config(config: Optional[Dict[str, Any]] = None) -> List[str]:
    """Check config for internal consistency."""
    if config is None:
        config = VECTOR_CONFIG
    errors = []

    for key in ('rtol', 'atol'):
        value = config['comparison'].get(key)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            errors.append(f"comparison.{key} must be a number")
        elif value < 0:
            errors.append(f"comparison.{key} must be >= 0")

    for key in ('precision', 'max_components'):
        value = config['display'].get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            errors.append(f"display.{key} must be a positive integer")

    return errors
