"""Station directory backed by the static station table."""

from njt_departures.adapters.station_directory.stations_data import STATIONS
from njt_departures.domain.models import StationEntry
from njt_departures.domain.ports.station_directory import StationDirectory


class StaticStationDirectory(StationDirectory):
    """Exact-match lookups over a fixed list of (name, code) pairs."""

    def __init__(self, stations: tuple[tuple[str, str], ...] = STATIONS) -> None:
        """Initialize with (name, code) pairs; the first name of a code is canonical."""
        self._entries = [StationEntry(name=name, code=code) for name, code in stations]
        self._codes_by_name: dict[str, str] = {}
        self._names_by_code: dict[str, str] = {}
        for entry in self._entries:
            self._codes_by_name.setdefault(entry.name, entry.code)
            self._names_by_code.setdefault(entry.code, entry.name)

    def code_for_name(self, name: str) -> str | None:
        """Return the code of a station by its exact published name."""
        return self._codes_by_name.get(name)

    def name_for_code(self, code: str) -> str | None:
        """Return the canonical name of a station code."""
        return self._names_by_code.get(code)

    def verify_code(self, code: str | None) -> str | None:
        """Return ``code`` if it is a known station code, otherwise None."""
        if code is None:
            return None
        return code if code in self._names_by_code else None

    def list_stations(self) -> list[StationEntry]:
        """Return every station entry in table order."""
        return list(self._entries)
