"""Ports (interfaces) for the ports-and-adapters architecture."""

from njt_departures.domain.ports.report_notifier import ReportNotifier
from njt_departures.domain.ports.schedule_repository import ScheduleRepository
from njt_departures.domain.ports.station_directory import StationDirectory

__all__ = [
    "ReportNotifier",
    "ScheduleRepository",
    "StationDirectory",
]
