from pathlib import Path
import logging
from urllib.parse import urlsplit, urlunsplit

# Every component logs into this directory as well as the console
LOG_DIR = Path("Logs")


class MalformedSeedUrl(ValueError):
    """The seed URL cannot start a crawl."""


def get_logger(name: str, filename: str | None = None) -> logging.Logger:
    """
    This sets up a logger that writes messages to both a file and the console.
    If the logger was already created before, it just reuses it (to avoid duplicates).
    """
    logger = logging.getLogger(name)

    # If this logger is already setup, just return it
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    LOG_DIR.mkdir(exist_ok=True)

    # Log file path (defaults to using the logger name)
    log_path = LOG_DIR / f"{filename or name}.log"

    # Write logs to file and console
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    stream_handler = logging.StreamHandler()

    # Workers share one logger, the thread name tells them apart
    fmt = logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s  [%(threadName)s]  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(fmt)
    stream_handler.setFormatter(fmt)

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)
    return logger


# Ports a scheme implies, dropped from the canonical form
DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize(url: str) -> str:
    """
    Canonicalise a URL (lowercase scheme and host, no default port, "/" for an
    empty path) and strip the query string and fragment, so that every
    spelling of a page maps onto the same dedup and cache identity.
    Raises ValueError if the URL cannot be parsed.
    """
    parsed = urlsplit(url.strip())
    scheme = parsed.scheme.lower()
    if not parsed.netloc:
        return urlunsplit((scheme, "", parsed.path, "", ""))

    # Lowercase the hostname, keeping IPv6 brackets
    host = (parsed.hostname or "").lower()
    netloc = f"[{host}]" if ":" in host else host

    # Remove default ports from netloc
    port = parsed.port
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{netloc}:{port}"

    userinfo, _, _ = parsed.netloc.rpartition("@")
    if userinfo:
        netloc = f"{userinfo}@{netloc}"

    return urlunsplit((scheme, netloc, parsed.path or "/", "", ""))


def parse_seed(url: str) -> str:
    """Check that the seed is an absolute URL we can actually crawl from."""
    try:
        parsed = urlsplit(url.strip())
    except ValueError as exc:
        raise MalformedSeedUrl(f"Cannot parse seed URL {url!r}: {exc}") from exc

    if not parsed.scheme or not parsed.netloc:
        raise MalformedSeedUrl(f"Seed URL {url!r} needs a scheme and a host")
    return parsed.geturl()
