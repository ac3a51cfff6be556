"""Console output with markup styling, tables and status messages.

Markup is rendered to ANSI escape codes when the destination stream can
display them and stripped otherwise. Status messages use fixed templates so
their labels stay greppable in logs and CI output.
"""

import io
import sys
from typing import Any, Iterable, Mapping

import click

from .capabilities import CapabilityProbe
from .config import ColorMode, ConsoleSettings
from .styles import STYLES, format_markup
from .table import column_widths, reindex, render_row, render_separator

SUCCESS_TEMPLATE = "<bg_green><white> SUCCESS:</white></bg_green> <green>{message}</green>"
WARNING_TEMPLATE = "<yellow>! WARNING:</yellow> {message}"
ERROR_TEMPLATE = "<bg_red><white> ERROR:</white></bg_red> <red>{message}</red>"


def is_binary_stream(stream) -> bool:
    """True for sinks that accept bytes only, such as BytesIO or "wb" files."""
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


class ConsoleOutput:
    """Writes formatted text to an output stream.

    Args:
        stream: Output stream; defaults to sys.stdout, looked up on each write
        probe: Capability probe deciding whether the stream gets colors
        styles: Style table used to render markup
        settings: Console settings; ``color`` other than auto bypasses the probe
    """

    def __init__(
        self,
        stream=None,
        probe: CapabilityProbe | None = None,
        styles: Mapping[str, str] = STYLES,
        settings: ConsoleSettings | None = None,
    ):
        self._stream = stream
        self.probe = probe or CapabilityProbe()
        self.styles = styles
        self.settings = settings or ConsoleSettings()

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    @property
    def colors_enabled(self) -> bool:
        if self.settings.color is ColorMode.ALWAYS:
            return True
        if self.settings.color is ColorMode.NEVER:
            return False
        return self.probe.supports_color(self.stream)

    def format(self, text: str) -> str:
        """Replace style tags with ANSI codes, or strip them without colors."""
        return format_markup(text, self.colors_enabled, self.styles)

    def _emit(self, message: str, newline: bool) -> None:
        stream = self.stream
        text = self.format(message)
        # color=True: the markup decision is already made, click must not strip
        if is_binary_stream(stream):
            click.echo(text.encode("utf-8"), file=stream, nl=newline, color=True)
        else:
            click.echo(text, file=stream, nl=newline, color=True)

    def write(self, message: str) -> None:
        self._emit(message, newline=False)

    def write_ln(self, message: str) -> None:
        self._emit(message, newline=True)

    def success(self, message: str) -> None:
        self.write_ln(SUCCESS_TEMPLATE.format(message=message))

    def warning(self, message: str) -> None:
        self.write_ln(WARNING_TEMPLATE.format(message=message))

    def error(self, message: str) -> None:
        self.write_ln(ERROR_TEMPLATE.format(message=message))

    def table(
        self,
        headers: Iterable[str] | Mapping[Any, str],
        rows: Iterable[Iterable[Any] | Mapping[Any, Any]],
    ) -> None:
        """Print a table.

        Headers and rows may be sequences or mappings; mappings are taken
        positionally by value. Column widths cover the header and every row.

        Example output:
            | name  | version |
            +-------+---------+
            | click | 8.1.7   |
        """
        headers = reindex(headers)
        rows = [reindex(row) for row in rows]
        widths = column_widths(headers, rows)

        self.print_row(headers, widths)
        self.print_separator(widths)

        for row in rows:
            self.print_row(row, widths)

    def print_row(self, row: Iterable[Any], widths: Mapping[int, int]) -> None:
        self.write(render_row(row, widths))

    def print_separator(self, widths: Mapping[int, int]) -> None:
        self.write(render_separator(widths))


__all__ = [
    "SUCCESS_TEMPLATE",
    "WARNING_TEMPLATE",
    "ERROR_TEMPLATE",
    "is_binary_stream",
    "ConsoleOutput",
]
