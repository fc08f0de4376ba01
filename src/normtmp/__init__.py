# Copyright (c) 2024 Normtmp Contributors
# MIT License

"""
Normtmp: a temp directory path you can compare against.

Returns the OS temp directory with symlinks resolved and, on Windows, with
8.3 short segments (``VERYLO~1``) expanded to their long names, so that
path comparisons in tests and tools behave.

Example:
    >>> from normtmp import normalized_tmpdir
    >>> normalized_tmpdir(reporting=True)
"""

from __future__ import annotations

from normtmp.release import __version__, __author__
from normtmp.normalize import normalized_tmpdir, reset_cache
from normtmp.shortpath import (
    UNSUPPORTED,
    Expanded,
    ShortPathExpander,
    TmpdirCache,
    Unsupported,
)
from normtmp.shortpath.expander import expand_short_path

__all__ = [
    "__version__",
    "__author__",
    "normalized_tmpdir",
    "expand_short_path",
    "reset_cache",
    "ShortPathExpander",
    "TmpdirCache",
    "Expanded",
    "Unsupported",
    "UNSUPPORTED",
]
