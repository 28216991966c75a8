"""Adapters for the NJ TRANSIT DepartureVision HTML pages."""

from njt_departures.adapters.njt_html.departure_row_decoder import DepartureRowDecoder
from njt_departures.adapters.njt_html.document_cache import DocumentCache
from njt_departures.adapters.njt_html.http_client import NjtHttpClient
from njt_departures.adapters.njt_html.njt_schedule_repository import NjtScheduleRepository
from njt_departures.adapters.njt_html.stop_row_decoder import StopRowDecoder
from njt_departures.adapters.njt_html.tag_scanner import TagScanner

__all__ = [
    "DepartureRowDecoder",
    "DocumentCache",
    "NjtHttpClient",
    "NjtScheduleRepository",
    "StopRowDecoder",
    "TagScanner",
]
