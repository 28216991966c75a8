"""Forward-only scanner over text enclosed by a pair of tag patterns."""

import re
from collections.abc import Iterator

from njt_departures.domain.errors import MalformedInputError


def trim_inner_text(text: str) -> str:
    """Trim whitespace and trailing nested markup from an inner-text slice.

    Leading whitespace is dropped, then the text is cut at the first ``<`` and
    trailing whitespace and ``<`` characters are removed.
    """
    text = text.lstrip()
    cut = text.find("<")
    if cut >= 0:
        text = text[:cut]
    return text.rstrip()


class TagScanner:
    """Yields successive slices found between an open and a close pattern.

    The scanner never modifies the buffer: each match is reported as start and
    end offsets into it. Once exhausted it stays exhausted.
    """

    def __init__(
        self,
        text: str,
        open_pattern: str | re.Pattern[str],
        close_pattern: str | re.Pattern[str],
        length: int | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            text: Buffer to scan.
            open_pattern: Regular expression matching the start tag.
            close_pattern: Regular expression matching the end tag.
            length: Number of characters of ``text`` to consider, defaults to all.
        """
        self._text = text
        self._end = len(text) if length is None else min(length, len(text))
        self._open = re.compile(open_pattern) if isinstance(open_pattern, str) else open_pattern
        self._close = (
            re.compile(close_pattern) if isinstance(close_pattern, str) else close_pattern
        )
        self._cursor = 0
        self.start: int | None = None
        self.end: int | None = None

    @property
    def text(self) -> str:
        """The scanned buffer."""
        return self._text

    def next_span(self) -> tuple[int, int] | None:
        """Advance to the next tag pair and return the inner ``(start, end)`` offsets.

        Returns:
            The offsets, or None when no further open tag exists.

        Raises:
            MalformedInputError: An open tag has no matching close tag.
        """
        opened = self._open.search(self._text, self._cursor, self._end)
        if opened is None:
            self._cursor = self._end
            return None

        closed = self._close.search(self._text, opened.end(), self._end)
        if closed is None:
            raise MalformedInputError(
                f"No closing {self._close.pattern!r} after {self._open.pattern!r} "
                f"at offset {opened.start()}"
            )

        self.start, self.end = opened.end(), closed.start()
        self._cursor = closed.end()
        return self.start, self.end

    def next_raw(self) -> str | None:
        """Return the untrimmed inner text of the next tag pair."""
        span = self.next_span()
        if span is None:
            return None
        return self._text[span[0] : span[1]]

    def next_slice(self) -> str | None:
        """Return the trimmed inner text of the next tag pair."""
        raw = self.next_raw()
        if raw is None:
            return None
        return trim_inner_text(raw)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the remaining trimmed slices."""
        while (item := self.next_slice()) is not None:
            yield item
