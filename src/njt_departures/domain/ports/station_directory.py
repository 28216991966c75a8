"""Station directory port."""

from typing import Protocol

from njt_departures.domain.models.station_entry import StationEntry


class StationDirectory(Protocol):
    """Port for the static station name/code table."""

    def code_for_name(self, name: str) -> str | None:
        """Return the code of a station by its exact published name."""
        ...

    def name_for_code(self, code: str) -> str | None:
        """Return the canonical name of a station code."""
        ...

    def verify_code(self, code: str | None) -> str | None:
        """Return ``code`` if it is a known station code, otherwise None."""
        ...

    def list_stations(self) -> list[StationEntry]:
        """Return every station entry in table order."""
        ...
