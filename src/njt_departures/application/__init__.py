"""Application layer - use cases orchestrating the domain."""

from njt_departures.application.report_builder import CREDITS, ReportBuilder
from njt_departures.application.route_resolver import RouteResolver
from njt_departures.application.services import UpcomingTrainsService

__all__ = [
    "CREDITS",
    "ReportBuilder",
    "RouteResolver",
    "UpcomingTrainsService",
]
