"""Pytest fixtures and utilities for sculpt tests."""

import io
import logging
from pathlib import Path
from typing import Callable, Generator

import pytest

from sculpt.capabilities import CapabilityProbe, PlatformInfo
from sculpt.config import ColorMode, ConsoleSettings
from sculpt.input import ConsoleInput
from sculpt.output import ConsoleOutput


class FakeStream(io.StringIO):
    """StringIO that reports a configurable TTY status."""

    def __init__(self, tty: bool = False):
        super().__init__()
        self.tty = tty

    def isatty(self) -> bool:
        return self.tty


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point settings at a missing file and clear color environment."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv("SCULPT_CONFIG", str(config_path))
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("SCULPT_COLOR", raising=False)
    yield config_path


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo setup_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def posix_info() -> PlatformInfo:
    return PlatformInfo(name="posix", version="#1 SMP", environ={"TERM": "xterm-256color"})


@pytest.fixture
def make_output() -> Callable[..., ConsoleOutput]:
    """Factory for outputs writing to a StringIO with colors forced on or off."""

    def _create(colors: bool = False) -> ConsoleOutput:
        mode = ColorMode.ALWAYS if colors else ColorMode.NEVER
        return ConsoleOutput(stream=io.StringIO(), settings=ConsoleSettings(color=mode))

    return _create


@pytest.fixture
def make_input(make_output) -> Callable[..., ConsoleInput]:
    """Factory for prompt engines reading the given text."""

    def _create(text: str = "", colors: bool = False) -> ConsoleInput:
        return ConsoleInput(make_output(colors), stream=io.StringIO(text))

    return _create


@pytest.fixture
def tty_probe(posix_info: PlatformInfo) -> CapabilityProbe:
    return CapabilityProbe(posix_info)


def written(console: ConsoleOutput | ConsoleInput) -> str:
    """Everything written to a console's StringIO so far."""
    output = console.output if isinstance(console, ConsoleInput) else console
    return output.stream.getvalue()
