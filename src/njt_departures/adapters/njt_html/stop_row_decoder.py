"""Decoder for the rows of a train stop list."""

import logging
import re
from typing import TYPE_CHECKING

from njt_departures.adapters.njt_html.constants import (
    PARAGRAPH_CLOSE_PATTERN,
    PARAGRAPH_OPEN_PATTERN,
    ROW_CLOSE_PATTERN,
    ROW_OPEN_PATTERN,
    STOP_STATUS_SEPARATOR,
)
from njt_departures.adapters.njt_html.tag_scanner import TagScanner, trim_inner_text
from njt_departures.domain.models import QueryOptions, Stop, StopSequence

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from njt_departures.domain.ports import StationDirectory

MARKUP_PATTERN = re.compile(r"<[^>]*>")


def split_stop_text(paragraph: str) -> tuple[str, str]:
    """Split a stop paragraph into its name and status parts.

    The status is empty when the separator is absent; markup around the
    status text is dropped.
    """
    name, separator, status = paragraph.partition(STOP_STATUS_SEPARATOR)
    if not separator:
        return trim_inner_text(name), ""
    return trim_inner_text(name), MARKUP_PATTERN.sub("", status).strip()


class StopRowDecoder:
    """Builds a StopSequence from a train stop list document."""

    def __init__(
        self, directory: "StationDirectory", options: QueryOptions | None = None
    ) -> None:
        """Initialize with the station directory used to resolve stop names."""
        self._directory = directory
        self._options = options or QueryOptions()

    def decode_row(self, row_text: str) -> Stop | None:
        """Decode one row into a Stop.

        Rows without a paragraph and rows naming an unknown station yield None.
        """
        paragraph = TagScanner(
            row_text, PARAGRAPH_OPEN_PATTERN, PARAGRAPH_CLOSE_PATTERN
        ).next_raw()
        if paragraph is None:
            return None

        if self._options.verbose:
            logger.debug(f"  p raw: {paragraph}")

        name, status = split_stop_text(paragraph)
        code = self._directory.code_for_name(name)
        if code is None:
            logger.warning(f"Skipping stop with unknown station name: {name!r}")
            return None

        if self._options.verbose:
            logger.debug(f"stop_name: {name}, stop_status: {status}")
        return Stop(name=name, code=code, status=status)

    def decode_document(self, text: str) -> StopSequence:
        """Decode every stop row, earliest stop first."""
        stops: list[Stop] = []
        rows = TagScanner(text, ROW_OPEN_PATTERN, ROW_CLOSE_PATTERN)

        while (row := rows.next_raw()) is not None:
            stop = self.decode_row(row)
            if stop is not None:
                stops.append(stop)

        return StopSequence.of(stops)
