import time
from enum import Enum

from utils import get_logger


class State(Enum):
    RUNNING = "running"
    DONE = "done"


class CompletionDetector:
    """Polls the frontier from outside the worker pool until the crawl is quiescent."""

    def __init__(self, frontier, poll_interval: float):
        self.logger = get_logger("DETECTOR")
        self.frontier = frontier
        self.poll_interval = poll_interval
        self.state = State.RUNNING

    def poll(self) -> State:
        if self.state is State.DONE:
            return self.state

        snap = self.frontier.snapshot()
        self.logger.debug(
            f"submitted={snap.submitted} completed={snap.completed} "
            f"in_flight={snap.in_flight} pending={snap.pending}")

        if snap.quiescent:
            self.logger.info(f"Crawl quiescent after {snap.completed} URLs.")
            self.state = State.DONE
        return self.state

    def wait(self):
        """Block the launching thread until the crawl has drained."""
        while self.poll() is State.RUNNING:
            time.sleep(self.poll_interval)
