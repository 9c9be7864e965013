from configparser import ConfigParser
from threading import Lock

import pytest

from utils.config import Config
from utils.response import Response


class FakeWeb:
    """In-memory stand-in for the network transport, counting every GET."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls: list[str] = []
        self._lock = Lock()

    def __call__(self, url, config, logger=None):
        with self._lock:
            self.calls.append(url)
        if url not in self.pages:
            return Response({"url": url, "status": None,
                             "error": f"Connection refused for {url}"})
        body = self.pages[url]
        if isinstance(body, str):
            body = body.encode("utf-8")
        return Response({"url": url, "status": 200, "reason": "OK", "content": body})

    def count(self, url):
        with self._lock:
            return self.calls.count(url)


def page(*hrefs, text=""):
    links = "".join(f'<a href="{href}"></a>' for href in hrefs)
    return f"<html><body><p>{text}</p>{links}</body></html>"


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        cparser = ConfigParser()
        cparser.read_dict({
            "LOCAL PROPERTIES": {"THREADCOUNT": "4"},
            "CACHE": {"ENABLED": "no", "ROOT": str(tmp_path / "cache")},
            "CRAWLER": {"POLLINTERVAL": "0.01", "TIMEOUT": "5"},
        })
        config = Config(cparser)
        for key, value in overrides.items():
            setattr(config, key, value)
        return config
    return _make
