from unittest.mock import MagicMock, patch

import requests

from utils.download import download
from utils.response import Response


def test_success_keeps_body_and_status(make_config):
    fake = MagicMock(status_code=404, reason="Not Found", content=b"<p>missing</p>")
    with patch("utils.download.requests.get", return_value=fake) as get:
        resp = download("https://example.com/a", make_config())

    assert resp.ok
    assert (resp.status, resp.reason, resp.content) == (404, "Not Found", b"<p>missing</p>")
    _, kwargs = get.call_args
    assert kwargs["headers"] == {"User-Agent": "bfs crawler"}
    assert kwargs["timeout"] == 5.0


def test_transport_error_becomes_error_response(make_config):
    logger = MagicMock()
    with patch("utils.download.requests.get",
               side_effect=requests.ConnectionError("refused")):
        resp = download("https://example.com/a", make_config(), logger)

    assert not resp.ok
    assert resp.status is None
    assert "refused" in resp.error
    logger.warning.assert_called_once()


def test_response_defaults():
    resp = Response({"url": "https://example.com/"})
    assert resp.ok
    assert resp.content == b""
    assert resp.status is None
