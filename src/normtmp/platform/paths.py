"""
Host path primitives.

Thin wrappers over os/tempfile so the expansion code has a single place to
ask the host about paths. Callers reference these through the module
(``paths.exists(...)``) so tests can patch them.
"""

import os
import tempfile
from typing import Tuple, Union


PathLike = Union[str, os.PathLike]

# (st_dev, st_ino) pair identifying a filesystem object
FileId = Tuple[int, int]


def get_temp_dir() -> str:
    """Get the system temporary directory as reported by the OS."""
    return tempfile.gettempdir()


def get_home_dir() -> str:
    """Get current user's home directory."""
    return os.path.expanduser("~")


def exists(path: PathLike) -> bool:
    """Check if a path exists."""
    return os.path.exists(str(path))


def realpath(path: PathLike) -> str:
    """Get real path, resolving symlinks."""
    return os.path.realpath(str(path))


def file_id(path: PathLike) -> FileId:
    """
    Get a value identifying the filesystem object behind *path*.

    Two paths with the same id denote the same directory, whatever their
    spelling. On Windows, ``st_ino`` holds the NTFS file index.

    Raises:
        OSError: If the path cannot be stat'ed
    """
    st = os.stat(str(path))
    return (st.st_dev, st.st_ino)
