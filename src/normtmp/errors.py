# Copyright (c) 2024 Normtmp Contributors
# MIT License

"""
Normtmp Error Classes.

Configuration problems surface to callers as ``ConfigError``. Expansion
problems are raised as ``ExpansionError`` subclasses inside the expander and
never escape it: ``ShortPathExpander.expand`` turns every one of them into
the ``Unsupported`` outcome.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Exit codes of the normtmp CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    CONFIG_ERROR = 3
    UNSUPPORTED = 4
    KEYBOARD_INTERRUPT = 130


class NormtmpError(Exception):
    """Base exception for all normtmp errors."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigError(NormtmpError):
    """Invalid configuration value or configuration file."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: str | None = None,
    ) -> None:
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"Config error{location}: {message}", details)


class ExpansionError(NormtmpError):
    """A short path could not be expanded."""

    exit_code: int = ExitCode.UNSUPPORTED

    def __init__(self, path: str, message: str, details: str | None = None) -> None:
        self.path = path
        super().__init__(f"Cannot expand {path!r}: {message}", details)


class UnsupportedPlatformError(ExpansionError):
    """Short-path expansion was requested on a platform other than Windows."""

    def __init__(self, path: str, platform_name: str) -> None:
        self.platform_name = platform_name
        super().__init__(path, f"8.3 short paths only exist on Windows, not {platform_name}")


class UnsupportedPathShapeError(ExpansionError):
    """The path is relative, a network (UNC) path, or not a Windows path at all."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "not a local absolute drive path")


class IdentityMismatchError(ExpansionError):
    """The short user directory could not be proven to be the home directory."""

    def __init__(self, path: str, home_dir: str, reason: str) -> None:
        self.home_dir = home_dir
        super().__init__(path, f"user directory is not {home_dir!r}", reason)


class QueryFailureError(ExpansionError):
    """The external short-name query failed or returned unusable output."""

    def __init__(self, path: str, output: str | None = None, details: str | None = None) -> None:
        self.output = output
        if details is None and output:
            details = f"output: {output[:200]}"
        super().__init__(path, "short-name query failed", details)


class VerificationError(ExpansionError):
    """The fully expanded path does not exist."""

    def __init__(self, path: str, expanded: str) -> None:
        self.expanded = expanded
        super().__init__(path, f"expanded path {expanded!r} does not exist")
