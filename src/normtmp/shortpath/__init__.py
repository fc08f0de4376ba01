"""
Windows 8.3 short-path expansion.

Turns paths such as ``C:\\Users\\VERYLO~1\\AppData\\Local\\Temp`` into their
long form, first by matching the user directory against the home
directory, then by asking ``attrib.exe`` about each short segment.
"""

from normtmp.shortpath.cache import TmpdirCache
from normtmp.shortpath.expander import (
    UNSUPPORTED,
    Expanded,
    ExpansionResult,
    ShortPathExpander,
    Unsupported,
)

__all__ = [
    "TmpdirCache",
    "ShortPathExpander",
    "Expanded",
    "Unsupported",
    "UNSUPPORTED",
    "ExpansionResult",
]
