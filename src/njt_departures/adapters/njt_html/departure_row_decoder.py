"""Decoder for the rows of a station departure board."""

import logging
from typing import TYPE_CHECKING

from njt_departures.adapters.njt_html.constants import (
    CELL_CLOSE_PATTERN,
    CELL_OPEN_PATTERN,
    COLSPAN_MARKER,
    HEADER_MARKER,
    ROW_CLOSE_PATTERN,
    ROW_OPEN_PATTERN,
    SECONDARY_PLATFORM_ANNOTATION,
    SECONDARY_PLATFORM_MARKER,
    SINGLE_TRACK_LABEL,
    SINGLE_TRACK_NUMBER,
)
from njt_departures.adapters.njt_html.tag_scanner import TagScanner
from njt_departures.domain.errors import LookupFailureError, MalformedInputError
from njt_departures.domain.models import Departure, DepartureCatalog, QueryOptions

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from njt_departures.domain.ports import StationDirectory

# Mandatory cells in board order, with the message used when one is missing
MANDATORY_FIELDS: tuple[tuple[str, str], ...] = (
    ("time", "first table cell doesn't contain a time"),
    ("destination", "second table cell doesn't contain a destination station"),
    ("track", "cannot parse track"),
    ("line", "cannot parse line"),
    ("train", "cannot parse train"),
)


def normalize_destination(destination: str) -> str:
    """Replace a trailing secondary platform marker with its annotation.

    ``"Hoboken&nbsp;-"`` becomes ``"Hoboken (SEC)"``.
    """
    if not destination.endswith(SECONDARY_PLATFORM_MARKER):
        return destination
    return destination[: -len(SECONDARY_PLATFORM_MARKER)] + SECONDARY_PLATFORM_ANNOTATION


def normalize_track(track: str) -> str:
    """Map the single-track label to track number 1."""
    return SINGLE_TRACK_NUMBER if track == SINGLE_TRACK_LABEL else track


class DepartureRowDecoder:
    """Turns board rows into Departure records."""

    def __init__(
        self, directory: "StationDirectory", options: QueryOptions | None = None
    ) -> None:
        """Initialize with the station directory used to resolve destinations."""
        self._directory = directory
        self._options = options or QueryOptions()

    def decode_row(self, row_text: str) -> Departure | None:
        """Decode the text between a row's start and end tags.

        Returns:
            The departure, or None for header and divider rows.

        Raises:
            MalformedInputError: A mandatory cell is missing.
            LookupFailureError: The destination is not a known station name.
        """
        if COLSPAN_MARKER in row_text:
            return None

        scanner = TagScanner(row_text, CELL_OPEN_PATTERN, CELL_CLOSE_PATTERN)
        fields: dict[str, str] = {}

        for name, error in MANDATORY_FIELDS:
            value = scanner.next_slice()
            if value is None:
                raise MalformedInputError(f"{error}: missing {name} cell")
            if name == "time" and value.startswith(HEADER_MARKER):
                return None
            fields[name] = value

        status = scanner.next_slice()

        destination = normalize_destination(fields["destination"])
        code = self._directory.code_for_name(destination)
        if code is None:
            raise LookupFailureError(destination)

        departure = Departure(
            time=fields["time"],
            destination=destination,
            destination_code=code,
            line=fields["line"],
            train=fields["train"],
            track=normalize_track(fields["track"]),
            status=status,
        )
        if self._options.verbose:
            logger.debug(f"Decoded departure: {departure}")
        return departure

    def decode_document(self, text: str) -> DepartureCatalog:
        """Decode every data row of a station board document."""
        catalog = DepartureCatalog()
        rows = TagScanner(text, ROW_OPEN_PATTERN, ROW_CLOSE_PATTERN)

        while (row := rows.next_raw()) is not None:
            if self._options.verbose:
                logger.debug(f"tr: {row}")
            departure = self.decode_row(row)
            if departure is not None:
                catalog.append(departure)

        return catalog
