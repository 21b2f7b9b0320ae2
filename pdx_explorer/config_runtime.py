"""Runtime configuration for pdx-explorer - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from pdx_explorer.utils.constants import CONFIG_FILE_NAME, DATABASE_FILE, ENV_PREFIX, PDX_DIR
from pdx_explorer.utils.logging import logger

DEFAULTS = {
    "paths": {
        "db": str(DATABASE_FILE),
    },
    "limits": {
        "batch_size": 200,
    },
    "indexing": {
        "follow_symlinks": True,
        "replace_tier": False,
    },
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _coerce(raw: str, default_value: Any) -> Any:
    """Convert an environment string to the type of the default value."""
    # bool first: bool is a subclass of int
    if isinstance(default_value, bool):
        return raw.strip().lower() in _TRUE_VALUES
    if isinstance(default_value, int):
        return int(raw)
    if isinstance(default_value, float):
        return float(raw)
    return raw


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .pdx/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (PDX_EXPLORER_<SECTION>_<KEY>)
    2. <root>/.pdx/config.json file
    3. Built-in defaults

    Args:
        root: Root directory to look for the config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / PDX_DIR / CONFIG_FILE_NAME
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                try:
                    cfg[section][key] = _coerce(os.environ[env_var], cfg[section][key])
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {os.environ[env_var]!r}")

    return cfg
