"""Domain layer - core business logic and models."""

from njt_departures.domain.models import (
    Departure,
    DepartureCatalog,
    QueryOptions,
    Station,
    StationEntry,
    Stop,
    StopSequence,
)
from njt_departures.domain.ports import (
    ReportNotifier,
    ScheduleRepository,
    StationDirectory,
)

__all__ = [
    "Departure",
    "DepartureCatalog",
    "QueryOptions",
    "ReportNotifier",
    "ScheduleRepository",
    "Station",
    "StationDirectory",
    "StationEntry",
    "Stop",
    "StopSequence",
]
