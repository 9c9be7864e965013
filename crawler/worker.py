from threading import Thread

from utils import get_logger, normalize
from crawler.fetcher import FetchError
import scraper  # scraper.py module


class Worker(Thread):
    """Crawler worker thread.

    Each Worker repeatedly:
      1. blocks on the Frontier for the next URL,
      2. normalizes it and drops it if forbidden or already claimed,
      3. fetches the page through the cache,
      4. enqueues every link found on it,
      5. merges the page's word counts (when enabled), and
      6. marks the URL complete, whatever happened above.
    """

    def __init__(self, worker_id: int, crawler):
        self.logger = get_logger("WORKER", "Worker")
        self.config = crawler.config
        self.frontier = crawler.frontier
        self.seen = crawler.seen
        self.fetcher = crawler.fetcher
        self.word_tally = crawler.word_tally

        super().__init__(name=f"Worker-{worker_id}", daemon=True)

    #  Main receive–process loop
    def run(self):
        while True:
            url = self.frontier.get_tbd_url()
            if url is None:
                self.logger.debug("Frontier closed – shutting down thread.")
                break

            try:
                self.process(url)
            except Exception:
                # Nothing a single page does may take the worker down
                self.logger.exception(f"Unexpected error while crawling {url}")
            finally:
                self.frontier.mark_url_complete(url)

    def process(self, url: str):
        try:
            url = normalize(url)
        except ValueError as exc:
            self.logger.debug(f"Dropping unparseable URL {url!r}: {exc}")
            return

        if scraper.is_forbidden(url, self.config.forbidden_hosts, self.config.forbidden_paths):
            return

        if not self.seen.admit(url):
            return

        try:
            body = self.fetcher.fetch(url)
        except FetchError as exc:
            # The URL stays claimed and is never retried
            self.logger.warning(f"Giving up on {url}: {exc}")
            return

        outlinks = scraper.extract_next_links(url, body)
        for link in outlinks:
            self.frontier.add_url(link)
        self.logger.debug(f"{url} yielded {len(outlinks)} links")

        if self.word_tally is not None:
            self.word_tally.merge(scraper.count_words(body))
