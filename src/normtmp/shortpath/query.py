r"""
The external short-name query.

``attrib.exe`` exists to get and set file attributes, but it also prints the
path it was given with the last segment expanded to its long name::

    >attrib C:\Users\VERYLO~1
                       C:\Users\verylongusername

It only expands the last segment, and it reports errors as text with a zero
exit status::

    >attrib C:\badname
    File not found - C:\badname

All knowledge of that output format lives in ``parse_query_output``.
"""

import re
from typing import Optional

from normtmp.platform import proc


ATTRIB_COMMAND = "attrib.exe"

# A drive path not preceded by the "- " of an inline error message
_EXPANDED_PATH_RE = re.compile(r"(?<!- )[a-z]:\\.*", re.IGNORECASE)


def run_query(
    partial_path: str,
    *,
    command: str = ATTRIB_COMMAND,
    timeout: Optional[float] = None,
) -> str:
    """
    Run the short-name query for *partial_path* and return its trimmed output.

    The exit status is ignored since attrib does not use it for errors.

    Raises:
        OSError: If the command cannot be started
        subprocess.TimeoutExpired: If *timeout* elapses
    """
    result = proc.run([command, partial_path], timeout=timeout)
    return result.stdout.strip()


def parse_query_output(output: str) -> Optional[str]:
    """Extract the expanded path from query output, or None on error output."""
    match = _EXPANDED_PATH_RE.search(output)
    if not match:
        return None
    return match.group(0).rstrip("\r")
