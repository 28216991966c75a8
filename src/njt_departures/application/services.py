"""Application services (use cases) for departure queries."""

import logging
from typing import TYPE_CHECKING

from njt_departures.application.destination_selection import select_destination
from njt_departures.application.report_builder import ReportBuilder
from njt_departures.application.route_resolver import RouteResolver
from njt_departures.domain.errors import NoRouteFoundError, NoUpcomingTrainsError
from njt_departures.domain.models import QueryOptions, Station, StopSequence

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from njt_departures.domain.ports import ScheduleRepository, StationDirectory


class UpcomingTrainsService:
    """Answers "next trains from A toward B" with previous-stop status."""

    def __init__(
        self,
        repository: "ScheduleRepository",
        directory: "StationDirectory",
        options: QueryOptions | None = None,
    ) -> None:
        """Initialize with a schedule repository and the station directory."""
        self._repository = repository
        self._directory = directory
        self._options = options or QueryOptions()
        self._resolver = RouteResolver(repository, self._options)

    async def get_upcoming_report(
        self, origin_code: str, destination_code: str | None = None
    ) -> str:
        """Build the report for the next trains from the origin to the destination.

        At most ``max_ranked_trains`` trains are resolved in detail. A train
        whose stop list is empty gets a "no route found" line; every other
        failure aborts the query.

        Raises:
            DisambiguationRequiredError: The destination has to be chosen by the user.
            NoUpcomingTrainsError: No train on the board heads to the destination.
        """
        origin = await self._repository.get_station(origin_code)
        destination_code = select_destination(origin.departures, destination_code, self._directory)
        destination_name = self._directory.name_for_code(destination_code) or destination_code

        count = origin.departures.rank(destination_code)
        if count == 0:
            raise NoUpcomingTrainsError(destination_name, destination_code)
        logger.debug(f"number of next trains to {destination_code}: {count}")

        report = ReportBuilder()
        report.add_header(origin.name, destination_name)

        for departure in origin.departures.ranked(limit=self._options.max_ranked_trains):
            logger.debug(
                f"get status for next train {departure.train} to {destination_code}, "
                f"idx: {departure.rank}"
            )
            report.add_departure(departure)
            try:
                status_lines = await self._resolver.previous_stops_status(
                    origin.code, departure.train, destination_code
                )
            except NoRouteFoundError as e:
                logger.info(str(e))
                report.add_no_route(e.train, e.origin_code, e.destination_code)
                continue
            report.add_previous_status(status_lines)

        return report.build()

    async def get_board(self, station_code: str) -> Station:
        """Return the full departure board of a station."""
        return await self._repository.get_station(station_code)

    async def get_train_stops(self, origin_code: str, train: str) -> StopSequence:
        """Return the published stops of a train as seen from the origin."""
        return await self._repository.get_train_stops(origin_code, train)
