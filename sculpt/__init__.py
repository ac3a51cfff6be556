"""Terminal interaction toolkit: styled output and validated prompts."""

import logging
import sys

from .capabilities import (
    CapabilityProbe,
    PlatformInfo,
    PosixStrategy,
    WindowsStrategy,
    supports_color,
)
from .config import ColorMode, ConsoleSettings, load_settings
from .errors import ConfigError, InvalidChoiceError, format_error, format_suggestion
from .input import END_OF_STREAM, ConsoleInput, is_end_of_stream
from .output import ConsoleOutput
from .styles import STYLES, format_markup, strip_tags
from .table import column_widths, display_width

__version__ = "0.1.0"

_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure logging on stderr; DEBUG when debug is set, WARNING otherwise."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level, format=_LOG_FORMAT, stream=sys.stderr, force=True
    )


def create_console(
    settings: ConsoleSettings | None = None, stdin=None, stdout=None
) -> tuple[ConsoleInput, ConsoleOutput]:
    """Build a connected input/output pair sharing one settings object."""
    output = ConsoleOutput(stream=stdout, settings=settings)
    return ConsoleInput(output, stream=stdin), output


__all__ = [
    "__version__",
    "setup_logging",
    "create_console",
    "CapabilityProbe",
    "PlatformInfo",
    "PosixStrategy",
    "WindowsStrategy",
    "supports_color",
    "ColorMode",
    "ConsoleSettings",
    "load_settings",
    "ConfigError",
    "InvalidChoiceError",
    "format_error",
    "format_suggestion",
    "END_OF_STREAM",
    "ConsoleInput",
    "is_end_of_stream",
    "ConsoleOutput",
    "STYLES",
    "format_markup",
    "strip_tags",
    "column_widths",
    "display_width",
]
