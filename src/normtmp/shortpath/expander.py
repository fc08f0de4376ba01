"""
Short-path expansion.

Expansion is all-or-nothing: either every short segment is resolved and the
result verified, or the outcome is ``Unsupported``. No partially expanded
path is ever returned.
"""

import ntpath
from dataclasses import dataclass
from typing import Callable, Optional, Union

from normtmp import platform as host
from normtmp.config import get_config
from normtmp.errors import (
    ExpansionError,
    IdentityMismatchError,
    QueryFailureError,
    UnsupportedPathShapeError,
    UnsupportedPlatformError,
    VerificationError,
)
from normtmp.platform import paths
from normtmp.shortpath import classifier
from normtmp.shortpath.query import parse_query_output, run_query


SEPARATOR = "\\"

# Takes a partial path, returns the raw text output of the short-name query
QueryFunc = Callable[[str], str]


@dataclass(frozen=True)
class Expanded:
    """A path whose short segments were all resolved (or which had none)."""

    path: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Unsupported:
    """The path could not be expanded, for whatever reason."""

    @property
    def ok(self) -> bool:
        return False


UNSUPPORTED = Unsupported()

ExpansionResult = Union[Expanded, Unsupported]


class ShortPathExpander:
    """
    Expands Windows paths containing 8.3 short segments.

    Args:
        query: Callable running the short-name query for one partial path
            and returning its raw output. Defaults to running
            ``query_command`` from the configuration.
        command: Override for the configured query command
        timeout: Override for the configured per-query timeout
    """

    def __init__(
        self,
        query: Optional[QueryFunc] = None,
        *,
        command: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._query = query
        self.command = command
        self.timeout = timeout

    def expand(self, short_path: str) -> ExpansionResult:
        """
        Expand every short segment of an absolute drive path.

        Returns ``Expanded`` with the long path, ``Expanded`` with the input
        itself when it has no short segment, or ``Unsupported`` when not on
        Windows, for non-drive paths, or when any segment cannot be
        verified.
        """
        try:
            return Expanded(self._expand(short_path))
        except ExpansionError:
            return UNSUPPORTED

    def _expand(self, short_path: str) -> str:
        if not host.is_windows():
            raise UnsupportedPlatformError(short_path, host.system_name())
        if not classifier.is_drive_path(short_path):
            raise UnsupportedPathShapeError(short_path)
        if not classifier.has_short_marker(short_path):
            return short_path

        # Try the home directory first to avoid spawning a process
        from_home = self._expand_from_home(short_path)
        if from_home is not None:
            return from_home

        return self._expand_segments(short_path)

    def _expand_from_home(self, short_path: str) -> Optional[str]:
        """
        Replace a short user directory with the home directory.

        Only applies when the user name is the only short segment; returns
        None when it does not apply or the directories cannot be proven equal.
        """
        user_dir = classifier.match_user_directory(short_path)
        if user_dir is None:
            return None

        prefix, remainder = user_dir
        if not classifier.has_short_marker(prefix) or classifier.has_short_marker(remainder):
            return None

        home_dir = paths.get_home_dir()
        try:
            _prove_same_directory(short_path, prefix, home_dir)
        except IdentityMismatchError:
            return None
        return home_dir + remainder

    def _expand_segments(self, short_path: str) -> str:
        segments = short_path.split(SEPARATOR)

        # Each query only expands the last segment, so walk left to right
        for i in range(1, len(segments)):
            if not classifier.has_short_marker(segments[i]):
                continue

            partial_path = SEPARATOR.join(segments[: i + 1])
            try:
                output = self._run_query(partial_path)
                expanded = parse_query_output(output)
                same_dir = expanded is not None and (
                    ntpath.dirname(expanded.lower()) == ntpath.dirname(partial_path.lower())
                )
            except Exception as e:
                raise QueryFailureError(short_path, details=f"{type(e).__name__}: {e}") from e

            if not same_dir:
                raise QueryFailureError(short_path, output)

            segments[i] = ntpath.basename(expanded)

        result = SEPARATOR.join(segments)
        if not paths.exists(result):
            raise VerificationError(short_path, result)
        return result

    def _run_query(self, partial_path: str) -> str:
        if self._query is not None:
            return self._query(partial_path)

        config = get_config()
        return run_query(
            partial_path,
            command=self.command or config.query_command,
            timeout=self.timeout if self.timeout is not None else config.query_timeout,
        )


def _prove_same_directory(short_path: str, prefix: str, home_dir: str) -> None:
    """Raise IdentityMismatchError unless *prefix* and *home_dir* are one directory."""
    if classifier.has_short_marker(home_dir):
        raise IdentityMismatchError(short_path, home_dir, "home directory is itself a short path")
    if not paths.exists(prefix):
        raise IdentityMismatchError(short_path, home_dir, f"{prefix} does not exist")
    try:
        same = paths.file_id(prefix) == paths.file_id(home_dir)
    except OSError as e:
        raise IdentityMismatchError(short_path, home_dir, str(e)) from e
    if not same:
        raise IdentityMismatchError(short_path, home_dir, "file ids differ")


def expand_short_path(short_path: str) -> Optional[str]:
    """
    Expand a Windows path with short (8.3) segments to a long path.

    Returns the expanded path, or None if not on Windows, for network,
    relative or non-Windows paths, or if any segment cannot be expanded.
    """
    result = ShortPathExpander().expand(short_path)
    if isinstance(result, Expanded):
        return result.path
    return None
