from collections import Counter
from threading import Lock


class WordTally:
    """Global word counts, merged from per-page tallies by summing."""

    def __init__(self):
        self._lock = Lock()
        self._counts: Counter[str] = Counter()

    def merge(self, counts) -> None:
        with self._lock:
            self._counts.update(counts)

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        with self._lock:
            return self._counts.most_common(n)

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)
