"""Adapters layer - external system integrations."""

from njt_departures.adapters.config import AppConfig
from njt_departures.adapters.njt_html import NjtHttpClient, NjtScheduleRepository
from njt_departures.adapters.station_directory import StaticStationDirectory

__all__ = [
    "AppConfig",
    "NjtHttpClient",
    "NjtScheduleRepository",
    "StaticStationDirectory",
]
