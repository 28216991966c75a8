"""Tests for the tag-delimited scanner."""

import pytest

from njt_departures.adapters.njt_html.constants import CELL_CLOSE_PATTERN, CELL_OPEN_PATTERN
from njt_departures.adapters.njt_html.tag_scanner import TagScanner, trim_inner_text
from njt_departures.domain.errors import MalformedInputError


def _cells(text: str, length: int | None = None) -> TagScanner:
    return TagScanner(text, CELL_OPEN_PATTERN, CELL_CLOSE_PATTERN, length)


class TestTrimInnerText:
    """Tests for inner-text trimming."""

    def test_when_leading_whitespace_then_removed(self) -> None:
        """Given leading whitespace and newlines, when trimming, then they are dropped."""
        assert trim_inner_text("\n   6:05") == "6:05"

    def test_when_nested_markup_then_cut_at_first_tag(self) -> None:
        """Given stray nested markup, when trimming, then text before the first tag remains."""
        assert trim_inner_text(" Hoboken&nbsp;-<span>SEC</span>") == "Hoboken&nbsp;-"

    def test_when_whitespace_before_tag_then_trimmed_backward(self) -> None:
        """Given whitespace before a nested tag, when trimming, then it is removed too."""
        assert trim_inner_text("Track 3   <br/>") == "Track 3"

    def test_when_only_markup_then_empty(self) -> None:
        """Given a slice holding only markup, when trimming, then the result is empty."""
        assert trim_inner_text("  <img src='x.png'/>") == ""


class TestTagScanner:
    """Tests for TagScanner."""

    def test_yields_slices_in_document_order(self) -> None:
        """Given several cells, when scanning, then slices come in document order."""
        scanner = _cells("<td>a</td><td class='x'> b </td><td>c<br></td>")

        assert list(scanner) == ["a", "b", "c"]

    def test_when_exhausted_then_returns_none_repeatedly(self) -> None:
        """Given a consumed scanner, when asking again, then it keeps returning None."""
        scanner = _cells("<td>only</td>")

        assert scanner.next_slice() == "only"
        assert scanner.next_slice() is None
        assert scanner.next_slice() is None

    def test_when_no_open_tag_then_returns_none(self) -> None:
        """Given text without cells, when scanning, then nothing is found."""
        assert _cells("plain text").next_slice() is None

    def test_when_close_tag_missing_then_raises_malformed_input(self) -> None:
        """Given an open tag without close tag, when scanning, then MalformedInputError is raised."""
        scanner = _cells("<td>a</td><td>dangling")

        assert scanner.next_slice() == "a"
        with pytest.raises(MalformedInputError):
            scanner.next_slice()

    def test_spans_are_offsets_into_unchanged_buffer(self) -> None:
        """Given a buffer, when scanning, then spans point into it and it stays intact."""
        text = "<td> 6:05 </td><td>NEC</td>"
        scanner = _cells(text)

        start, end = scanner.next_span()  # type: ignore[misc]

        assert text[start:end] == " 6:05 "
        assert (scanner.start, scanner.end) == (start, end)
        assert scanner.text == text
        assert scanner.next_raw() == "NEC"

    def test_when_length_given_then_scan_is_bounded(self) -> None:
        """Given a length bound, when scanning, then cells beyond it are ignored."""
        text = "<td>a</td><td>b</td>"

        assert list(_cells(text, length=len("<td>a</td>"))) == ["a"]

    def test_slices_do_not_overlap(self) -> None:
        """Given adjacent cells, when scanning spans, then each starts after the previous ends."""
        scanner = _cells("<td>1</td><td>2</td><td>3</td>")
        spans = []
        while (span := scanner.next_span()) is not None:
            spans.append(span)

        assert len(spans) == 3
        for (_, previous_end), (next_start, _) in zip(spans, spans[1:]):
            assert next_start > previous_end
