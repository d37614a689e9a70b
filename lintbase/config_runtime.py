"""Runtime configuration for LintBase - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from lintbase.utils.constants import CONFIG_FILE
from lintbase.utils.logging import logger

DEFAULTS = {
    "scan": {
        "limit": 100,
        "ignore": [],
        "parallel": False,
    },
    "save": {
        "url": "",
        "token": "",
        "timeout": 10.0,
    },
    "report": {
        "max_affected_shown": 3,
        "max_issues_shown": 200,
    },
}


def _coerce(raw: str, default: Any) -> Any:
    """Convert an environment string to the type of its default."""
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    if isinstance(default, list):
        return [v.strip() for v in raw.split(",") if v.strip()]
    return raw


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .lintbase/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (LINTBASE_<SECTION>_<KEY>)
    2. .lintbase/config.json file
    3. Built-in defaults

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key not in cfg[section]:
                                continue
                            default = cfg[section][key]
                            # ints are accepted where floats are expected
                            if isinstance(default, float) and isinstance(value, int) and not isinstance(value, bool):
                                value = float(value)
                            if type(value) is type(default):
                                cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=str(path), err=str(e))
        logger.warning("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"LINTBASE_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                try:
                    cfg[section][key] = _coerce(os.environ[env_var], cfg[section][key])
                except ValueError:
                    logger.warning(
                        "Ignoring {var}: cannot convert {value!r}",
                        var=env_var,
                        value=os.environ[env_var],
                    )

    return cfg
