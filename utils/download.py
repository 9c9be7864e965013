import requests

from utils.response import Response


# This function performs the actual network GET for a page
def download(url, config, logger=None):
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout)
    except requests.RequestException as e:
        # Connection refused, DNS failure, timeout, bad scheme...
        if logger:
            logger.warning(f"Transport error with url {url}: {e}")
        return Response({
            "error": f"Transport error {e!r} with url {url}.",
            "status": None,
            "url": url})

    return Response({
        "url": url,
        "status": resp.status_code,
        "reason": resp.reason,
        "content": resp.content})
