"""
Platform abstraction layer.

Everything normtmp needs from the host (platform identity, filesystem
primitives, subprocesses, the terminal) goes through this package, so the
short-path logic can be exercised on any OS by patching these functions.
"""

import platform as _platform

# Detect current platform
IS_WINDOWS = _platform.system() == "Windows"


def system_name() -> str:
    """Return the lowercased OS family name ("windows", "linux", "darwin")."""
    return _platform.system().lower()


def is_windows() -> bool:
    """Check whether the process runs on Windows, the only 8.3-prone platform."""
    return system_name() == "windows"
