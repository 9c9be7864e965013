from utils import get_logger
from utils.cache import CacheError
from utils.download import download


class FetchError(Exception):
    """The page could not be obtained from the cache or the network."""


class Fetcher:
    """Read-through, write-through page cache in front of the transport."""

    def __init__(self, config, cache=None, transport=download):
        self.logger = get_logger("FETCHER")
        self.config = config
        self.cache = cache
        self.transport = transport

    def fetch(self, url: str) -> bytes:
        if self.cache is not None:
            try:
                body = self.cache.get(url)
            except CacheError as exc:
                # Unreadable entries are refetched and overwritten
                self.logger.warning(f"Corrupt cache entry for {url}, refetching: {exc}")
                body = None
            if body is not None:
                self.logger.debug(f"Cache hit {url}")
                return body

        resp = self.transport(url, self.config, self.logger)
        if not resp.ok:
            raise FetchError(resp.error)

        self.logger.info(f"Downloaded {url} [status {resp.status} {resp.reason}]")
        body = resp.content or b""
        if self.cache is not None:
            self.cache.put(url, body)
        return body
