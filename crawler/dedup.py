from threading import Lock


class DedupSet:
    """Normalized URLs already claimed for crawling.

    `admit` is the only way in, and it hands out True exactly once per URL,
    so whoever gets True is the one worker allowed to fetch that page.
    """

    def __init__(self):
        self._lock = Lock()
        self._seen: set[str] = set()

    def admit(self, url: str) -> bool:
        with self._lock:
            if url in self._seen:
                return False
            self._seen.add(url)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)

    def snapshot(self) -> list[str]:
        """Sorted copy of everything admitted so far."""
        with self._lock:
            return sorted(self._seen)
