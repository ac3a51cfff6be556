"""Style table and markup formatting.

Markup uses ``<name>`` to open a style and ``</anything>`` to close it. Open
tags are style specific, every close tag resets all attributes. There is no
tag stack: ``<bold><red>x</red> y</bold>`` renders ``y`` unstyled.
"""

import re
from types import MappingProxyType
from typing import Mapping

STYLES: Mapping[str, str] = MappingProxyType(
    {
        # Colors
        "black": "\033[30m",
        "red": "\033[31m",
        "green": "\033[32m",
        "yellow": "\033[33m",
        "blue": "\033[34m",
        "magenta": "\033[35m",
        "cyan": "\033[36m",
        "white": "\033[37m",
        # Background colors
        "bg_black": "\033[40m",
        "bg_red": "\033[41m",
        "bg_green": "\033[42m",
        "bg_yellow": "\033[43m",
        "bg_blue": "\033[44m",
        "bg_magenta": "\033[45m",
        "bg_cyan": "\033[46m",
        "bg_white": "\033[47m",
        # Formatting
        "bold": "\033[1m",
        "dim": "\033[2m",
        "italic": "\033[3m",
        "underline": "\033[4m",
        "blink": "\033[5m",
        "reverse": "\033[7m",
        "hidden": "\033[8m",
        # Reset
        "reset": "\033[0m",
    }
)

_ANY_TAG_RE = re.compile(r"<[^>]+>")
_CLOSE_TAG_RE = re.compile(r"</[^>]+>")


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` span, known style name or not."""
    return _ANY_TAG_RE.sub("", text)


def apply_styles(text: str, styles: Mapping[str, str] = STYLES) -> str:
    """Replace open tags with escape codes and close tags with a reset.

    Open tags are replaced as plain substrings, so a literal ``<red>`` in
    ordinary text is styled too.
    """
    for style, code in styles.items():
        text = text.replace(f"<{style}>", code)

    # reset token is inserted literally, not parsed as a re template
    reset = styles["reset"]
    return _CLOSE_TAG_RE.sub(lambda _match: reset, text)


def format_markup(
    text: str, colors: bool, styles: Mapping[str, str] = STYLES
) -> str:
    """Render markup either as ANSI-styled text or as plain text.

    Args:
        text: Text with style tags
        colors: Whether the destination can display escape sequences
        styles: Style table to render with

    Returns:
        Styled text when ``colors`` is true, otherwise the text with all
        tags removed
    """
    if not colors:
        return strip_tags(text)
    return apply_styles(text, styles)


__all__ = [
    "STYLES",
    "strip_tags",
    "apply_styles",
    "format_markup",
]
