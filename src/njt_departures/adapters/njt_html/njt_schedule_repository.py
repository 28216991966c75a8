"""Schedule repository adapter for the DepartureVision mobile pages."""

import logging
from typing import TYPE_CHECKING

from njt_departures.adapters.njt_html.constants import (
    ALTERNATE_STATION_PATH,
    ALTERNATE_TRAIN_STOPS_PATH,
    NJT_ALTERNATE_BASE_URL,
    NJT_LIVE_BASE_URL,
    SHORT_TRAIN_ID_LENGTH,
    SHORT_TRAIN_ID_PREFIX,
    STATION_CACHE_FILE,
    STATION_PATH,
    TRAIN_STOPS_CACHE_FILE,
    TRAIN_STOPS_PATH,
)
from njt_departures.adapters.njt_html.departure_row_decoder import DepartureRowDecoder
from njt_departures.adapters.njt_html.stop_row_decoder import StopRowDecoder
from njt_departures.domain.errors import LookupFailureError
from njt_departures.domain.models import QueryOptions, Station, StopSequence
from njt_departures.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from njt_departures.adapters.njt_html.http_client import NjtHttpClient
    from njt_departures.domain.ports import StationDirectory


class NjtScheduleRepository(ScheduleRepository):
    """Fetches boards and stop lists and decodes them into domain objects."""

    def __init__(
        self,
        client: "NjtHttpClient",
        directory: "StationDirectory",
        options: QueryOptions | None = None,
        live_base_url: str = NJT_LIVE_BASE_URL,
        alternate_base_url: str = NJT_ALTERNATE_BASE_URL,
    ) -> None:
        """Initialize with the HTTP client and the station directory."""
        self._client = client
        self._directory = directory
        self._options = options or QueryOptions()
        self._live_base_url = live_base_url.rstrip("/")
        self._alternate_base_url = alternate_base_url.rstrip("/")
        self._departure_decoder = DepartureRowDecoder(directory, self._options)
        self._stop_decoder = StopRowDecoder(directory, self._options)

    def station_url(self, station_code: str) -> str:
        """Build the board URL of a station."""
        if self._options.use_alternate_source:
            return f"{self._alternate_base_url}/{ALTERNATE_STATION_PATH.format(code=station_code)}"
        return f"{self._live_base_url}/{STATION_PATH.format(code=station_code)}"

    def train_stops_url(self, origin_code: str, train: str) -> str:
        """Build the stop list URL of a train as seen from the origin."""
        if self._options.use_alternate_source:
            path = ALTERNATE_TRAIN_STOPS_PATH.format(origin=origin_code, prefix="", train=train)
            return f"{self._alternate_base_url}/{path}"

        prefix = SHORT_TRAIN_ID_PREFIX if len(train) == SHORT_TRAIN_ID_LENGTH else ""
        path = TRAIN_STOPS_PATH.format(origin=origin_code, prefix=prefix, train=train)
        return f"{self._live_base_url}/{path}"

    async def get_station(self, station_code: str) -> Station:
        """Fetch and decode the departure board of a station."""
        name = self._directory.name_for_code(station_code)
        if name is None:
            raise LookupFailureError(station_code, kind="code")

        text = await self._client.fetch_cached(
            self.station_url(station_code), STATION_CACHE_FILE.format(code=station_code)
        )
        catalog = self._departure_decoder.decode_document(text)
        logger.debug(f"Decoded {len(catalog)} departures for {name}({station_code})")
        return Station(code=station_code, name=name, departures=catalog)

    async def get_train_stops(self, origin_code: str, train: str) -> StopSequence:
        """Fetch and decode the published stops of a train."""
        text = await self._client.fetch_cached(
            self.train_stops_url(origin_code, train),
            TRAIN_STOPS_CACHE_FILE.format(origin=origin_code, train=train),
        )
        stops = self._stop_decoder.decode_document(text)
        if self._options.verbose:
            for stop in stops:
                logger.debug(f"stop: {stop.name}({stop.code}), {stop.status}")
        return stops
