"""Domain models for NJ TRANSIT departures."""

from njt_departures.domain.models.departure import Departure
from njt_departures.domain.models.departure_catalog import DepartureCatalog
from njt_departures.domain.models.error_details import ErrorDetails
from njt_departures.domain.models.query_options import DEFAULT_MAX_RANKED_TRAINS, QueryOptions
from njt_departures.domain.models.station import Station
from njt_departures.domain.models.station_entry import StationEntry
from njt_departures.domain.models.stop import Stop
from njt_departures.domain.models.stop_sequence import StopSequence

__all__ = [
    "DEFAULT_MAX_RANKED_TRAINS",
    "Departure",
    "DepartureCatalog",
    "ErrorDetails",
    "QueryOptions",
    "Station",
    "StationEntry",
    "Stop",
    "StopSequence",
]
