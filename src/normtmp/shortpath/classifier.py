"""String-level recognition of Windows path shapes."""

import re
from typing import Optional, Tuple

from normtmp import platform as host


SHORT_MARKER = "~"

_DRIVE_PATH_RE = re.compile(r"^[a-z]:\\", re.IGNORECASE)

# 1 = path through the user name segment, 2 = rest of the path
_USER_DIR_RE = re.compile(r"^([a-z]:\\Users\\[^\\]+)(.*)", re.IGNORECASE | re.DOTALL)


def has_short_marker(path: str) -> bool:
    """Check if any segment of *path* looks like an 8.3 short name."""
    return SHORT_MARKER in path


def is_drive_path(path: str) -> bool:
    """
    Check if *path* is a local absolute drive path like ``C:\\foo``.

    Relative paths, POSIX paths, forward-slash drive paths and UNC paths
    (``\\\\server\\share``) are all rejected.
    """
    return bool(_DRIVE_PATH_RE.match(path))


def is_supported_short_path(path: str) -> bool:
    """Check if *path* is a drive path with a short segment, on Windows."""
    return host.is_windows() and is_drive_path(path) and has_short_marker(path)


def match_user_directory(path: str) -> Optional[Tuple[str, str]]:
    """
    Split a path under ``<drive>:\\Users\\<name>`` into the user directory and the rest.

    >>> match_user_directory("C:\\\\Users\\\\VERYLO~1\\\\AppData")
    ('C:\\\\Users\\\\VERYLO~1', '\\\\AppData')
    """
    match = _USER_DIR_RE.match(path)
    if not match:
        return None
    return match.group(1), match.group(2)
