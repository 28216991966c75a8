"""Tests for the document cache."""

import os
import time
from pathlib import Path

from njt_departures.adapters.njt_html import DocumentCache


class TestDocumentCache:
    """Tests for DocumentCache."""

    def test_missing_file_is_not_fresh(self, tmp_path: Path) -> None:
        """Given no cached copy, when checking, then it is not fresh."""
        cache = DocumentCache(tmp_path)

        assert cache.is_fresh("njtransit-NP.html") is False

    def test_new_file_is_fresh(self, tmp_path: Path) -> None:
        """Given a copy just written, when checking, then it is fresh."""
        cache = DocumentCache(tmp_path)
        cache.write("njtransit-NP.html", b"<table></table>")

        assert cache.is_fresh("njtransit-NP.html") is True

    def test_old_file_is_stale(self, tmp_path: Path) -> None:
        """Given a copy older than the TTL, when checking, then it is stale."""
        cache = DocumentCache(tmp_path, ttl_seconds=60)
        path = cache.write("njtransit-NP.html", b"<table></table>")
        old = time.time() - 120
        os.utime(path, (old, old))

        assert cache.is_fresh("njtransit-NP.html") is False

    def test_write_creates_missing_directory(self, tmp_path: Path) -> None:
        """Given a cache directory that does not exist, when writing, then it is created."""
        cache = DocumentCache(tmp_path / "nested" / "cache")

        path = cache.write("njtransit-NP.html", b"x")

        assert path == tmp_path / "nested" / "cache" / "njtransit-NP.html"
        assert path.read_bytes() == b"x"

    def test_read_replaces_invalid_bytes(self, tmp_path: Path) -> None:
        """Given bytes that are not UTF-8, when reading, then they are replaced."""
        cache = DocumentCache(tmp_path)
        cache.write("njtransit-NP.html", b"Trenton\xff")

        assert cache.read("njtransit-NP.html") == "Trenton�"
