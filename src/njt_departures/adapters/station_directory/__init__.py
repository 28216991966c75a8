"""Static station directory adapter."""

from njt_departures.adapters.station_directory.static_station_directory import (
    StaticStationDirectory,
)

__all__ = ["StaticStationDirectory"]
