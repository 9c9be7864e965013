from collections import Counter
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup, Comment

from utils import get_logger

# Hosts we never crawl (substring match on the hostname)
FORBIDDEN_HOSTS = frozenset({"google", "youtube", "facebook", "github"})

# Paths we never crawl (substring match on the path)
FORBIDDEN_PATHS = frozenset({"legal", "privacy", "support"})

# Only these schemes can go through the transport
ALLOWED_SCHEMES = frozenset({"http", "https"})

# Tags whose text content (including inline markup inside them) feeds the word tally
TEXT_TAGS = ["a", "p", "h1", "h2", "h3", "h4", "h5", "h6", "span"]

# Never prose, even when nested inside a text tag
NON_TEXT_TAGS = ["script", "style", "noscript"]

logger = get_logger("SCRAPER")


# --- FILTER OUT FORBIDDEN URLS ---

def is_forbidden(url: str, hosts=FORBIDDEN_HOSTS, paths=FORBIDDEN_PATHS) -> bool:
    """Returns True if this URL must never be admitted or fetched."""
    try:
        parsed = urlsplit(url)
    except ValueError:
        return True

    if parsed.scheme not in ALLOWED_SCHEMES:
        return True

    host = parsed.hostname or ""
    if any(blocked in host for blocked in hosts):
        return True

    return any(blocked in parsed.path for blocked in paths)


# --- EXTRACT LINKS FROM A PAGE ---

def decode_body(body: bytes) -> str:
    """Network bytes are not trusted to be valid UTF-8."""
    return body.decode("utf-8", errors="replace")


def resolve_href(page_url: str, href: str) -> str | None:
    """Absolute hrefs pass through untouched, relative ones are joined."""
    href = href.strip()
    try:
        if urlsplit(href).scheme:
            return href
    except ValueError:
        pass

    try:
        return urljoin(page_url, href)
    except ValueError:
        return None


def extract_next_links(url: str, body: bytes) -> list[str]:
    """Gets all <a> links from the page and turns them into absolute URLs."""
    try:
        soup = BeautifulSoup(decode_body(body), "lxml")
    except Exception as exc:
        logger.warning(f"Could not parse {url}: {exc}")
        return []

    outlinks: list[str] = []
    for tag in soup.find_all("a", href=True):
        link = resolve_href(url, tag["href"])
        if link is None:
            logger.debug(f"Dropping unresolvable href {tag['href']!r} on {url}")
            continue
        outlinks.append(link)

    return outlinks


# --- WORD FREQUENCIES ---

def count_words(body: bytes) -> Counter:
    """Lowercased whitespace tokens from the text of links, paragraphs, headings and spans."""
    words: Counter[str] = Counter()
    try:
        soup = BeautifulSoup(decode_body(body), "lxml")
    except Exception as exc:
        logger.warning(f"Could not parse page text: {exc}")
        return words

    # Each text node is counted once, if any ancestor is a text tag
    for text in soup.find_all(string=True):
        if isinstance(text, Comment) or text.parent is None:
            continue
        if text.find_parent(NON_TEXT_TAGS) is not None:
            continue
        if text.find_parent(TEXT_TAGS) is not None:
            words.update(token.lower() for token in text.split())

    return words
