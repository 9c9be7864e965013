from utils import get_logger, parse_seed
from utils.cache import PageCache
from utils.download import download
from crawler.completion import CompletionDetector
from crawler.dedup import DedupSet
from crawler.fetcher import Fetcher
from crawler.frontier import Frontier
from crawler.tally import WordTally
from crawler.worker import Worker


# This is the main controller class for running the crawler
class Crawler(object):
    def __init__(self, config, frontier_factory=Frontier, worker_factory=Worker,
                 transport=download):
        # Save the configuration settings
        self.config = config

        # Set up a logger to track progress and errors
        self.logger = get_logger("CRAWLER")

        # A bad seed aborts before any thread exists
        self.seed_url = parse_seed(config.seed_url)

        # Queue of URLs waiting for a worker, plus the quiescence counters
        self.frontier = frontier_factory()

        # Shared state every worker goes through
        self.seen = DedupSet()
        self.word_tally = WordTally() if config.word_tally else None

        cache = PageCache(config.cache_root) if config.use_cache else None
        self.fetcher = Fetcher(config, cache, transport)

        self.detector = CompletionDetector(self.frontier, config.poll_interval)

        # List to hold all the worker threads
        self.workers = list()

        # Assign the worker factory (how each worker gets created)
        self.worker_factory = worker_factory

    # Seeds the frontier and starts all the workers asynchronously
    def start_async(self):
        self.logger.info(
            f"Crawling from {self.seed_url} with {self.config.threads_count} workers "
            f"(cache {'on' if self.fetcher.cache is not None else 'off'}, "
            f"word tally {'on' if self.word_tally is not None else 'off'})")
        self.frontier.add_url(self.seed_url)

        self.workers = [
            self.worker_factory(worker_id, self)
            for worker_id in range(self.config.threads_count)
        ]
        for worker in self.workers:
            worker.start()

    # Runs the crawl to quiescence, then shuts the pool down
    def start(self):
        self.start_async()
        self.detector.wait()
        self.stop()
        self.join()
        self.logger.info(f"Done, {len(self.seen)} URLs visited.")

    def stop(self):
        self.frontier.close()

    # Waits for all workers to complete (blocking)
    def join(self):
        for worker in self.workers:
            worker.join()

    def visited(self) -> list[str]:
        return self.seen.snapshot()

    def top_words(self, n: int | None = None) -> list[tuple[str, int]]:
        if self.word_tally is None:
            return []
        return self.word_tally.most_common(n)
