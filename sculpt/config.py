"""Settings loading for sculpt consoles.

Settings come from a YAML file, then the environment, then explicit
overrides (CLI flags). Later sources win.
"""

import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Mapping

import yaml

from .errors import ConfigError
from .paths import get_config_path


class ColorMode(str, Enum):
    """When to emit ANSI styles."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, value: str) -> "ColorMode":
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(mode.value for mode in cls)
            raise ValueError(f"color must be one of {allowed}, got '{value}'")


@dataclass(frozen=True)
class ConsoleSettings:
    """Settings shared by console output and input."""

    color: ColorMode = ColorMode.AUTO

    def __post_init__(self):
        if not isinstance(self.color, ColorMode):
            raise ValueError(
                f"color must be a ColorMode, got {type(self.color).__name__}"
            )


def validate_settings(data: dict) -> ConsoleSettings:
    """Validate and convert a raw dict to ConsoleSettings.

    Args:
        data: Raw mapping from yaml.safe_load()

    Returns:
        ConsoleSettings with validated fields

    Raises:
        ConfigError: If validation fails
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - {"color"})
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(map(str, unknown))}")

    color = data.get("color", ColorMode.AUTO.value)
    if not isinstance(color, str):
        raise ConfigError(f"color must be a string, got {type(color).__name__}")

    try:
        return ConsoleSettings(color=ColorMode.parse(color))
    except ValueError as e:
        raise ConfigError(str(e))


def _format_syntax_error(path: Path, error: yaml.YAMLError) -> str:
    mark = getattr(error, "problem_mark", None)
    problem = getattr(error, "problem", None) or str(error)
    if mark is None:
        return f"Settings syntax error in {path}: {problem}"
    return (
        f"Settings syntax error in {path} at line {mark.line + 1}, "
        f"col {mark.column + 1}: {problem}"
    )


def read_settings_file(path: Path) -> ConsoleSettings:
    """Read settings from a YAML file.

    A missing file yields default settings; an empty file does too.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ConsoleSettings()
    except PermissionError:
        raise ConfigError(f"Permission denied reading settings file: {path}")
    except UnicodeDecodeError:
        raise ConfigError(f"Settings file is not valid UTF-8: {path}")
    except OSError as e:
        raise ConfigError(f"Error reading settings file {path}: {e}")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(_format_syntax_error(path, e)) from e

    if data is None:
        return ConsoleSettings()
    return validate_settings(data)


def apply_environment(
    settings: ConsoleSettings, environ: Mapping[str, str]
) -> ConsoleSettings:
    """Apply NO_COLOR and SCULPT_COLOR on top of file settings."""
    if environ.get("NO_COLOR"):
        settings = replace(settings, color=ColorMode.NEVER)

    env_color = environ.get("SCULPT_COLOR")
    if env_color:
        try:
            settings = replace(settings, color=ColorMode.parse(env_color))
        except ValueError as e:
            raise ConfigError(f"SCULPT_COLOR: {e}")

    return settings


def load_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> ConsoleSettings:
    """Load settings from the settings file and the environment.

    Args:
        path: Settings file; defaults to get_config_path()
        environ: Environment mapping; defaults to os.environ

    Raises:
        ConfigError: If the file or an environment value is invalid
    """
    if environ is None:
        environ = os.environ
    if path is None:
        path = get_config_path()

    return apply_environment(read_settings_file(path), environ)


__all__ = [
    "ColorMode",
    "ConsoleSettings",
    "validate_settings",
    "read_settings_file",
    "apply_environment",
    "load_settings",
]
