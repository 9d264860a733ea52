"""Optional config.json defaults for the command line.

Only the ``output`` section is read: ``output.format`` (``json`` or
``yaml``) and ``output.indent``. Each key can also come from the
environment, e.g. ``OUTPUT_FORMAT``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Read config.json, or return {} when it is missing or unusable."""
    path = Path(config_path)
    if not path.exists():
        return {}

    try:
        with open(path, "r") as f:
            config = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"Ignoring config {path}: top level is not an object")
        return {}
    return config


def get_config_value(
    keys: List[str], default: Any = None, config: Optional[Dict[str, Any]] = None
) -> Any:
    """Look up a key path such as ["output", "format"].

    Falls back to the environment variable named after the upper-cased
    keys joined with ``_``, then to default.
    """
    if config is None:
        config = load_config()

    value = config
    for key in keys:
        if not isinstance(value, dict):
            value = None
            break
        value = value.get(key)
        if value is None:
            break

    if value is not None:
        return value

    env_value = os.environ.get("_".join(k.upper() for k in keys))
    if env_value is not None:
        return env_value
    return default
