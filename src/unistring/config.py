"""CLI config: defaults merged with an optional YAML file."""
import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "log_level": "WARNING",
    "pad_with": " ",
    "split_on": "",
    "join_with": "\n",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_ENV = "UNISTRING_CONFIG"
CONFIG_PATH = Path("configs") / "unistring.yaml"


def config_path() -> Path:
    """Config file location: $UNISTRING_CONFIG if set, else configs/unistring.yaml."""
    env = os.environ.get(CONFIG_ENV)
    return Path(env) if env else CONFIG_PATH


def load_config(path: str | Path | None = None) -> dict:
    """Load config, falling back to defaults for anything missing or unreadable."""
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        return dict(DEFAULT_CONFIG)
    try:
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read config %s: %s; using defaults", path, e)
        return dict(DEFAULT_CONFIG)
    if not isinstance(cfg, dict):
        logger.warning("Config %s is not a mapping; using defaults", path)
        return dict(DEFAULT_CONFIG)
    unknown = sorted(set(cfg) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    merged = dict(DEFAULT_CONFIG)
    for key, value in cfg.items():
        if key not in DEFAULT_CONFIG or value is None:
            continue
        default = DEFAULT_CONFIG[key]
        if not isinstance(value, type(default)):
            logger.warning(
                "Config %s: %s should be %s, got %r; using default %r",
                path, key, type(default).__name__, value, default,
            )
            continue
        if key == "log_level" and value.upper() not in LOG_LEVELS:
            logger.warning("Config %s: unknown log_level %r; using default %r", path, value, default)
            continue
        merged[key] = value
    return merged
