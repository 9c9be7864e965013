import re

import psutil

DEFAULT_SEED = "https://doc.rust-lang.org/"
DEFAULT_FORBIDDEN_HOSTS = "google,youtube,facebook,github"
DEFAULT_FORBIDDEN_PATHS = "legal,privacy,support"

# Crawl tasks spend nearly all their time blocked on sockets and disk
THREADS_PER_CORE = 40


def _split_list(value: str) -> frozenset[str]:
    return frozenset(item.strip() for item in value.split(",") if item.strip())


def default_threads_count() -> int:
    """A large multiple of the physical core count."""
    cores = psutil.cpu_count(logical=False) or psutil.cpu_count() or 1
    return cores * THREADS_PER_CORE


class Config(object):
    def __init__(self, config):
        # Read the user agent from the config file
        self.user_agent = config.get("IDENTIFICATION", "USERAGENT", fallback="bfs crawler").strip()

        # Make sure the user agent is customized (not left as default)
        assert self.user_agent != "DEFAULT AGENT", "Set useragent in config.ini"

        # Ensure the user agent has only allowed characters
        assert re.match(r"^[a-zA-Z0-9_ ,]+$", self.user_agent), \
            "User agent should not have any special characters outside '_', ',' and 'space'"

        # Number of worker threads, 0 means size the pool from the machine
        threads = config.getint("LOCAL PROPERTIES", "THREADCOUNT", fallback=0)
        self.threads_count = threads if threads > 0 else default_threads_count()

        # On-disk page cache
        self.use_cache = config.getboolean("CACHE", "ENABLED", fallback=True)
        self.cache_root = config.get("CACHE", "ROOT", fallback="cache")

        # Where the crawl starts when no seed is given on the command line
        self.seed_url = config.get("CRAWLER", "SEEDURL", fallback=DEFAULT_SEED).strip()

        # How often the completion detector samples the frontier (seconds)
        self.poll_interval = config.getfloat("CRAWLER", "POLLINTERVAL", fallback=1.0)

        # Transport timeout per request (seconds)
        self.timeout = config.getfloat("CRAWLER", "TIMEOUT", fallback=30.0)

        # Substring blocklists applied before a URL is admitted
        self.forbidden_hosts = _split_list(
            config.get("CRAWLER", "FORBIDDENHOSTS", fallback=DEFAULT_FORBIDDEN_HOSTS))
        self.forbidden_paths = _split_list(
            config.get("CRAWLER", "FORBIDDENPATHS", fallback=DEFAULT_FORBIDDEN_PATHS))

        # Optional word frequency report
        self.word_tally = config.getboolean("WORDS", "ENABLED", fallback=False)
        self.top_words = config.getint("WORDS", "TOP", fallback=50)
