"""Terminal capability detection.

Decides, per output stream, whether ANSI escape sequences should be emitted.
The decision is split into a TTY check on the stream and a platform strategy:

- POSIX: a TTY is enough; without an ``isatty`` primitive, ``TERM`` decides
- Windows: VT100 support since build 10586, or a known ANSI-capable
  terminal emulator identified through its environment variables

Platform facts are passed in as a ``PlatformInfo`` value so both branches
can be exercised on any host.
"""

import logging
import os
import platform
import re
import weakref
from dataclasses import dataclass, field
from typing import Mapping, Protocol

_logging = logging.getLogger(__name__)

# First Windows 10 build with virtual terminal sequences in conhost
MIN_WINDOWS_VT_BUILD = 10586

_BUILD_RE = re.compile(r"build (\d+)", re.IGNORECASE)
_DOTTED_VERSION_RE = re.compile(r"^\s*\d+\.\d+\.(\d+)")


@dataclass(frozen=True)
class PlatformInfo:
    """Snapshot of the platform facts the probe looks at."""

    name: str
    version: str = ""
    environ: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def current(cls) -> "PlatformInfo":
        return cls(name=os.name, version=platform.version(), environ=os.environ)

    @property
    def is_windows(self) -> bool:
        return self.name == "nt"


def parse_windows_build(version: str) -> int | None:
    """Extract the kernel build number from a Windows version string.

    Accepts both ``"10.0.19045"`` and ``"build 19045 (Windows 10)"``.
    """
    match = _BUILD_RE.search(version) or _DOTTED_VERSION_RE.match(version)
    if not match:
        return None
    return int(match.group(1))


def stream_isatty(stream) -> bool | None:
    """Return the stream's TTY status, or None when it has no way to tell."""
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return None
    try:
        return bool(isatty())
    except (OSError, ValueError) as e:
        _logging.debug(f"isatty() failed on {stream!r}: {type(e).__name__}: {e}")
        return False


class ColorStrategy(Protocol):
    """Platform specific refinement of the color decision."""

    def supports_color(self, is_tty: bool | None, info: PlatformInfo) -> bool: ...


class PosixStrategy:
    def supports_color(self, is_tty: bool | None, info: PlatformInfo) -> bool:
        if is_tty is not None:
            return is_tty

        term = info.environ.get("TERM")
        return bool(term) and term != "dumb"


class WindowsStrategy:
    def supports_color(self, is_tty: bool | None, info: PlatformInfo) -> bool:
        if is_tty is False:
            return False

        build = parse_windows_build(info.version)
        if build is not None and build >= MIN_WINDOWS_VT_BUILD:
            return True

        # Legacy terminal emulators that translate ANSI themselves
        env = info.environ
        return (
            "ANSICON" in env
            or env.get("ConEmuANSI") == "ON"
            or env.get("TERM") == "xterm"
            or env.get("TERM_PROGRAM") == "Hyper"
            or "WT_SESSION" in env
        )


def select_strategy(info: PlatformInfo) -> ColorStrategy:
    if info.is_windows:
        return WindowsStrategy()
    return PosixStrategy()


class CapabilityProbe:
    """Caches the color decision per stream while the stream is alive.

    Streams that cannot be weakly referenced are probed on every call.
    """

    def __init__(
        self,
        platform_info: PlatformInfo | None = None,
        strategy: ColorStrategy | None = None,
    ):
        self.platform_info = platform_info or PlatformInfo.current()
        self.strategy = strategy or select_strategy(self.platform_info)
        self._cache: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    def supports_color(self, stream) -> bool:
        try:
            cached = self._cache.get(stream)
        except TypeError:
            return self._detect(stream)
        if cached is not None:
            return cached

        result = self._detect(stream)
        self._cache[stream] = result
        return result

    def _detect(self, stream) -> bool:
        is_tty = stream_isatty(stream)
        if is_tty is False:
            _logging.debug(f"Colors disabled: {stream!r} is not a TTY")
            return False

        result = self.strategy.supports_color(is_tty, self.platform_info)
        _logging.debug(
            f"Colors {'enabled' if result else 'disabled'} for {stream!r} "
            f"({type(self.strategy).__name__})"
        )
        return result


def supports_color(stream, platform_info: PlatformInfo | None = None) -> bool:
    """Uncached one-shot check of whether ``stream`` can display ANSI styles."""
    return CapabilityProbe(platform_info)._detect(stream)


__all__ = [
    "MIN_WINDOWS_VT_BUILD",
    "PlatformInfo",
    "parse_windows_build",
    "stream_isatty",
    "ColorStrategy",
    "PosixStrategy",
    "WindowsStrategy",
    "select_strategy",
    "CapabilityProbe",
    "supports_color",
]
