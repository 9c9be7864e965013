from collections import deque
from dataclasses import dataclass
from threading import Condition

from utils import get_logger


@dataclass(frozen=True)
class FrontierSnapshot:
    """Counters read together under the frontier lock."""
    submitted: int
    completed: int
    in_flight: int
    pending: int

    @property
    def quiescent(self) -> bool:
        return (self.pending == 0 and self.in_flight == 0
                and self.submitted == self.completed)


class Frontier:
    """Unbounded queue of raw URLs shared by every worker thread.

    Besides the queue itself it keeps two monotonically increasing counters,
    `submitted` (bumped in add_url) and `completed` (bumped in
    mark_url_complete). A worker adds the links it found before it marks its
    own URL complete, so `submitted == completed` only once all work is gone.
    """

    def __init__(self):
        self.logger = get_logger("FRONTIER")
        self._cond = Condition()  # guards everything below

        # Raw URLs waiting for a worker, FIFO so the crawl stays roughly breadth-first
        self.to_be_downloaded: deque[str] = deque()

        self._submitted = 0
        self._completed = 0
        self._in_flight = 0
        self._closed = False

    # --- Public methods used by the worker threads ---

    def add_url(self, url: str):
        """Queue a URL; filtering and dedup happen when a worker picks it up."""
        with self._cond:
            if self._closed:
                self.logger.warning(f"Frontier closed, dropping {url}")
                return
            self._submitted += 1
            self.to_be_downloaded.append(url)
            self._cond.notify()

    def get_tbd_url(self) -> str | None:
        """Block until a URL is available. Returns None once the frontier is closed."""
        with self._cond:
            while not self.to_be_downloaded and not self._closed:
                self._cond.wait()

            if not self.to_be_downloaded:
                return None

            self._in_flight += 1
            return self.to_be_downloaded.popleft()

    def mark_url_complete(self, url: str):
        """Called exactly once per URL handed out by get_tbd_url."""
        with self._cond:
            if self._in_flight == 0:
                self.logger.error(f"Completed URL {url} was never handed out.")
                return
            self._in_flight -= 1
            self._completed += 1

    # --- Used by the completion detector and the engine ---

    def snapshot(self) -> FrontierSnapshot:
        with self._cond:
            return FrontierSnapshot(
                submitted=self._submitted,
                completed=self._completed,
                in_flight=self._in_flight,
                pending=len(self.to_be_downloaded),
            )

    def close(self):
        """Wake every idle worker; they exit once the queue is drained."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()
