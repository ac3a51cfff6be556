"""Error types and message formatting.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Use present tense: 'must be', 'is required'
- Include actionable hints where helpful
"""


class ConfigError(Exception):
    """Raised when the settings file cannot be read or is invalid."""

    pass


class InvalidChoiceError(ValueError):
    """Raised when a multiple-choice prompt is set up with invalid arguments.

    Always raised before anything is written to the output stream.
    """

    pass


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Examples:
        >>> format_error("file not found")
        'Error: file not found'
    """
    return f"Error: {message}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("invalid color mode 'on'", "use auto, always or never")
        "Error: invalid color mode 'on'. Hint: use auto, always or never"
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "ConfigError",
    "InvalidChoiceError",
    "format_error",
    "format_suggestion",
]
