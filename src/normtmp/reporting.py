"""
Warning sinks.

A sink is anything with a ``warn(message)`` method. Warnings are off unless
the caller (or the configuration) asks for them.
"""

import sys
from typing import Any, Optional, Protocol, TextIO

from normtmp.config import REPORTING_DEFAULT, REPORTING_DISABLED, get_config
from normtmp.errors import ConfigError
from normtmp.platform.tty import ColorPrinter


class WarningSink(Protocol):
    """Receives human-readable warnings."""

    def warn(self, message: str) -> None:
        ...


class NullSink:
    """Sink that drops every warning."""

    def warn(self, message: str) -> None:
        return None


class ConsoleSink:
    """Sink that writes warnings to stderr (or another stream), colored when possible."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.printer = ColorPrinter(stream or sys.stderr)

    def warn(self, message: str) -> None:
        self.printer.write(self.printer.warning(message))


def resolve_sink(reporting: Any = None) -> WarningSink:
    """
    Turn a ``reporting`` option into a sink.

    None defers to the configured setting; False or "disabled" gives a
    NullSink; True or "default" gives a ConsoleSink; any object with a
    callable ``warn`` attribute is used as is.

    Raises:
        ConfigError: For any other value
    """
    if reporting is None:
        reporting = get_config().reporting

    if reporting is False or reporting == REPORTING_DISABLED:
        return NullSink()
    if reporting is True or reporting == REPORTING_DEFAULT:
        return ConsoleSink()
    if callable(getattr(reporting, "warn", None)):
        return reporting

    raise ConfigError(
        f"reporting must be a bool, {REPORTING_DISABLED!r}, {REPORTING_DEFAULT!r} "
        f"or an object with a warn() method, got {reporting!r}"
    )


def short_path_warning(path: str) -> str:
    """Build the warning shown when the temp directory keeps a short segment."""
    return (
        "⚠️⚠️⚠️\n"
        f"WARNING: temp directory \"{path}\" contains a short (8.3) path segment which "
        "could not be expanded by available heuristics. This may cause issues with tests "
        "or utilities which rely on path comparisons.\n"
        "⚠️⚠️⚠️"
    )
