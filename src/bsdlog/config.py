"""Configuration management for bsdlog.

Three-layer config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .bsdlog.json in the working directory or above
  3. Global config — ~/.bsdlog/config.json

Recognized keys: level, include_level, prefix, flags, timeout.

Example .bsdlog.json::

    {
      "level": "WARNING",
      "include_level": true,
      "prefix": "myapp: ",
      "flags": ["date", "time", "short_file"],
      "timeout": 0.5
    }
"""

import json
import os
from pathlib import Path

from bsdlog.logger import DEFAULT_TIMEOUT, Logger
from bsdlog.writer import STD_FLAGS, parse_flags


CONFIG_KEYS = ["level", "include_level", "prefix", "flags", "timeout"]

DEFAULTS = {
    "level": "DEBUG",
    "include_level": False,
    "prefix": "",
    "flags": STD_FLAGS,
    "timeout": DEFAULT_TIMEOUT,
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.bsdlog/)."""
    return Path.home() / ".bsdlog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .bsdlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / ".bsdlog.json"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config path)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .bsdlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args=None, keys=None, start_dir=None, config_path=None):
    """Resolve logger settings using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace)
      2. Project .bsdlog.json
      3. Global ~/.bsdlog/config.json (or config_path)

    Keys that no layer sets fall back to DEFAULTS.

    Returns a dict with resolved values.
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config(config_path)

    resolved = {}
    for key in keys:
        # argparse uses underscores, JSON may use either
        alt_key = key.replace("_", "-")

        cli_val = getattr(args, key, None) if args is not None else None
        if cli_val is not None:
            resolved[key] = cli_val
            continue

        proj_val = project_cfg.get(key, project_cfg.get(alt_key))
        if proj_val is not None:
            resolved[key] = proj_val
            continue

        global_val = global_cfg.get(key, global_cfg.get(alt_key))
        if global_val is not None:
            resolved[key] = global_val
            continue

        resolved[key] = DEFAULTS.get(key)

    return resolved


def logger_from_config(resolved, out=None):
    """Build a Logger from a resolved config dict.

    Raises:
        InvalidLevelError: if the configured level is out of bounds
        ValueError: for unknown flag names or a negative or non-finite timeout
    """
    cfg = dict(DEFAULTS)
    cfg.update({k: v for k, v in resolved.items() if v is not None})

    log = Logger(
        cfg["level"],
        bool(cfg["include_level"]),
        out,
        str(cfg["prefix"]),
        parse_flags(cfg["flags"]),
    )
    log.timeout = cfg["timeout"]
    return log
