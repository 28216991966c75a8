"""Local file cache for fetched schedule documents."""

import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 60


class DocumentCache:
    """Keeps the last fetched copy of each document as a file.

    A copy is fresh while its modification time is no older than the TTL.
    """

    def __init__(self, cache_dir: Path | str, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS) -> None:
        """Initialize the cache.

        Args:
            cache_dir: Directory holding the cached documents.
            ttl_seconds: Freshness window in seconds.
        """
        self._cache_dir = Path(cache_dir)
        self._ttl_seconds = ttl_seconds

    def path_for(self, file_name: str) -> Path:
        """Return the path of a cached document."""
        return self._cache_dir / file_name

    def is_fresh(self, file_name: str) -> bool:
        """Check whether a cached copy exists and is within the freshness window."""
        path = self.path_for(file_name)
        try:
            modified = path.stat().st_mtime
        except FileNotFoundError:
            return False
        return modified + self._ttl_seconds >= time.time()

    def read(self, file_name: str) -> str:
        """Read a cached document as text."""
        return self.path_for(file_name).read_bytes().decode("utf-8", errors="replace")

    def write(self, file_name: str, content: bytes) -> Path:
        """Store a freshly fetched document."""
        path = self.path_for(file_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.debug(f"{path} fetched ({len(content)} bytes)")
        return path
