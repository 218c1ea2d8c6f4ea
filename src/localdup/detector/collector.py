"""Thread-safe accumulation of duplicate matches."""

from threading import Lock

from .models import DuplicateMatch


class DuplicateCollector:
    """Unordered container written concurrently by group workers.

    Each file belongs to exactly one size group, so no two workers can ever
    propose the same duplicate and no deduplication is done here.
    """

    def __init__(self) -> None:
        self._matches: list[DuplicateMatch] = []
        self._lock = Lock()

    def add(self, match: DuplicateMatch) -> None:
        """Record a duplicate match."""
        with self._lock:
            self._matches.append(match)

    def drain(self) -> list[DuplicateMatch]:
        """Return everything collected so far and empty the collector."""
        with self._lock:
            matches = self._matches
            self._matches = []
        return matches

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)
