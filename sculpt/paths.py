"""Configuration path helpers for sculpt."""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/sculpt"""
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home) / "sculpt"
    return Path.home() / ".config" / "sculpt"


def get_config_path() -> Path:
    """Return path to user settings file.

    Priority:
    1. SCULPT_CONFIG environment variable (if set)
    2. ~/.config/sculpt/config.yaml (default XDG location)
    """
    if "SCULPT_CONFIG" in os.environ:
        return Path(os.environ["SCULPT_CONFIG"])
    return get_config_dir() / "config.yaml"
