"""Schedule repository port."""

from typing import Protocol

from njt_departures.domain.models.station import Station
from njt_departures.domain.models.stop_sequence import StopSequence


class ScheduleRepository(Protocol):
    """Port for retrieving decoded station boards and train routes."""

    async def get_station(self, station_code: str) -> Station:
        """Fetch and decode the departure board of a station."""
        ...

    async def get_train_stops(self, origin_code: str, train: str) -> StopSequence:
        """Fetch and decode the published stops of a train as seen from the origin."""
        ...
