"""
Library configuration: comparison tolerances and logging level.

Values are layered, later ones winning: DEFAULTS, the JSON file named by
VECTORS3D_CONFIG, the file last passed to load_config(), and finally
VECTORS3D_LOG_LEVEL for the log level.
"""
import json
import os

DEFAULTS = {
    "rtol": 1e-9,
    "atol": 1e-12,
    "log_level": "WARNING",
}

ENV_CONFIG = "VECTORS3D_CONFIG"
ENV_LOG_LEVEL = "VECTORS3D_LOG_LEVEL"

_loaded = {}


def _read(path):
    with open(path, "r") as f:
        overrides = json.load(f)
    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"unknown configuration keys in {path}: {sorted(unknown)}")
    return overrides


def load_config(path):
    """
    Load a JSON configuration file and make it the active configuration.
    Returns the resulting configuration.
    """
    overrides = _read(path)
    _loaded.clear()
    _loaded.update(overrides)
    return get_config()


def reset_config():
    """Forget any file loaded with load_config()."""
    _loaded.clear()


def get_config():
    """Return the active configuration."""
    config = dict(DEFAULTS)
    path = os.environ.get(ENV_CONFIG)
    if path:
        config.update(_read(path))
    config.update(_loaded)
    level = os.environ.get(ENV_LOG_LEVEL)
    if level:
        config["log_level"] = level
    config["log_level"] = str(config["log_level"]).upper()
    return config
