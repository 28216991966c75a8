"""Reconstruction of a train's path and the status reported along it."""

import asyncio
import logging
from typing import TYPE_CHECKING

from njt_departures.domain.errors import NoRouteFoundError, RouteInconsistencyError
from njt_departures.domain.models import QueryOptions

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from njt_departures.domain.ports import ScheduleRepository


class RouteResolver:
    """Collects the status of a train at the stations it passed before the origin."""

    def __init__(
        self, repository: "ScheduleRepository", options: QueryOptions | None = None
    ) -> None:
        """Initialize with the schedule repository."""
        self._repository = repository
        self._options = options or QueryOptions()

    async def previous_stops_status(
        self, origin_code: str, train: str, destination_code: str
    ) -> list[str]:
        """Return ``"name(code): status"`` lines, most recent station first.

        The train's route is reversed so the origin comes before every station
        the train has already served; each of those boards is then searched
        for the same train.

        Raises:
            NoRouteFoundError: The train's stop list is empty.
            RouteInconsistencyError: The origin is not on the train's route.
        """
        route = await self._repository.get_train_stops(origin_code, train)
        if not route:
            raise NoRouteFoundError(train, origin_code, destination_code)

        preceding = route.reversed().after(origin_code)
        if preceding is None:
            raise RouteInconsistencyError(
                f"Origin {origin_code} is missing from the route of train {train}"
            )

        if self._options.verbose:
            logger.debug(
                f"Train {train} passed {len(preceding)} station(s) before {origin_code}: "
                + ", ".join(stop.code for stop in preceding)
            )

        tasks = [
            asyncio.ensure_future(self._station_status(stop.code, train)) for stop in preceding
        ]
        try:
            per_station = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return [line for lines in per_station for line in lines]

    async def _station_status(self, station_code: str, train: str) -> list[str]:
        """Return the non-empty status lines a station reports for a train."""
        station = await self._repository.get_station(station_code)
        return [
            f"{station.name}({station.code}): {departure.status}"
            for departure in station.departures.for_train(train)
            if departure.has_status
        ]
