"""
Memo of temp directory expansions.

There will usually be exactly one key per process (the value of
``tempfile.gettempdir()``), but changing TMP/TEMP at runtime adds more.
Entries are never evicted; ``reset()`` drops them all.
"""

import threading
from typing import Callable, Dict, Optional

from normtmp.shortpath.expander import ExpansionResult


class TmpdirCache:
    """
    Maps a raw temp directory path to its expansion outcome.

    A missing key means expansion was never attempted; a stored
    ``Unsupported`` means it was attempted and failed, and is reused as is.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ExpansionResult] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[ExpansionResult]:
        """Return the stored outcome, or None if never attempted."""
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: ExpansionResult) -> None:
        with self._lock:
            self._entries[key] = value

    def get_or_compute(
        self,
        key: str,
        compute: Callable[[str], ExpansionResult],
    ) -> ExpansionResult:
        """
        Return the stored outcome for *key*, computing and storing it on a miss.

        The lock is held while computing, so concurrent callers for one key
        run *compute* only once.
        """
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                value = compute(key)
                self._entries[key] = value
            return value

    def reset(self) -> None:
        """Forget every stored outcome."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        return f"TmpdirCache(entries={len(self)})"
