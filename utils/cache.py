import base64
import os
import struct
import threading
from pathlib import Path
from urllib.parse import urlsplit

import lz4.block

from utils import get_logger

BODY_FILE = "body.lz4"

# Longest directory name we create; longer keys are nested
SEGMENT_LEN = 200

_SIZE = struct.Struct("<I")


class CacheError(Exception):
    """A cache entry exists but cannot be read back."""


def compress(data: bytes) -> bytes:
    """Frame `data` as a little-endian u32 size followed by an LZ4 block."""
    header = _SIZE.pack(len(data))
    if not data:
        return header
    return header + lz4.block.compress(data, store_size=False)


def decompress(frame: bytes) -> bytes:
    if len(frame) < _SIZE.size:
        raise CacheError(f"Frame too short ({len(frame)} bytes)")

    (size,) = _SIZE.unpack_from(frame)
    payload = frame[_SIZE.size:]
    if size == 0:
        if payload:
            raise CacheError("Empty frame carries a payload")
        return b""
    if not payload:
        raise CacheError(f"Frame announces {size} bytes but has no payload")

    try:
        data = lz4.block.decompress(payload, uncompressed_size=size)
    except (lz4.block.LZ4BlockError, ValueError) as exc:
        raise CacheError(f"Corrupt LZ4 block: {exc}") from exc

    if len(data) != size:
        raise CacheError(f"Expected {size} bytes, got {len(data)}")
    return data


def cache_key(url: str) -> str:
    """Host followed by the URL-safe base64 of the whole URL (reversible)."""
    host = urlsplit(url).hostname or ""
    encoded = base64.urlsafe_b64encode(url.encode("utf-8")).decode("ascii")
    return host + encoded


class PageCache:
    """Compressed, write-through store of page bodies on local disk.

    Entries are never invalidated, so two workers racing on the same key
    write identical content and either write may win.
    """

    def __init__(self, root):
        self.logger = get_logger("CACHE")
        self.root = Path(root)

        # Failing to create the root is fatal for a cached crawl
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, url: str) -> Path:
        key = cache_key(url)
        segments = [key[i:i + SEGMENT_LEN] for i in range(0, len(key), SEGMENT_LEN)]
        return self.root.joinpath(*segments) / BODY_FILE

    def get(self, url: str) -> bytes | None:
        """Return the cached body, None on a miss, CacheError if unreadable."""
        path = self.path_for(url)
        try:
            frame = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise CacheError(f"Cannot read {path}: {exc}") from exc

        return decompress(frame)

    def put(self, url: str, body: bytes) -> bool:
        """Best effort write; returns False instead of raising on failure."""
        path = self.path_for(url)
        tmp = path.with_name(f"{BODY_FILE}.{os.getpid()}.{threading.get_ident()}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(compress(body))
            os.replace(tmp, path)
        except OSError as exc:
            self.logger.warning(f"Could not cache {url}: {exc}")
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass
            return False
        return True
