"""
Normalized temp directory.

``tempfile.gettempdir()`` can disagree with other spellings of the same
directory: on macOS ``/var/folders/...`` is a symlink into ``/private/var``,
and on Windows the TEMP variable often holds an 8.3 short path such as
``C:\\Users\\VERYLO~1\\AppData\\Local\\Temp``. Tests and tools comparing
paths then see two different strings for one directory.
"""

from typing import Any, Optional

from normtmp import platform as host
from normtmp.platform import paths
from normtmp.reporting import resolve_sink, short_path_warning
from normtmp.shortpath.cache import TmpdirCache
from normtmp.shortpath.classifier import has_short_marker
from normtmp.shortpath.expander import Expanded, ShortPathExpander


# Process-wide memo used when no cache is passed in
default_cache = TmpdirCache()


def normalized_tmpdir(
    reporting: Any = None,
    *,
    cache: Optional[TmpdirCache] = None,
    expander: Optional[ShortPathExpander] = None,
) -> str:
    """
    Return a normalized path to the OS temp directory.

    The real path is resolved on every call. On Windows, short segments are
    then expanded once per distinct temp directory and the outcome cached.
    If expansion fails, the resolved (still short) path is returned and a
    warning goes to the reporting sink.

    Args:
        reporting: None (use configuration), False/"disabled", True/"default"
            (warn on stderr), or an object with a ``warn(message)`` method
        cache: Cache to use instead of the process-wide one
        expander: Expander to use on a cache miss

    Raises:
        ConfigError: If *reporting* is not one of the accepted values
    """
    sink = resolve_sink(reporting)
    tmpdir = paths.realpath(paths.get_temp_dir())

    if not host.is_windows() or not has_short_marker(tmpdir):
        return tmpdir

    if cache is None:
        cache = default_cache
    if expander is None:
        expander = ShortPathExpander()

    outcome = cache.get_or_compute(tmpdir, expander.expand)
    if isinstance(outcome, Expanded):
        tmpdir = outcome.path

    if has_short_marker(tmpdir):
        sink.warn(short_path_warning(tmpdir))

    return tmpdir


def reset_cache() -> None:
    """Clear the process-wide cache."""
    default_cache.reset()
