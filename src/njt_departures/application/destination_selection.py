"""Choosing the destination of an upcoming-trains query."""

import logging
from typing import TYPE_CHECKING

from njt_departures.domain.errors import DisambiguationRequiredError, NoUpcomingTrainsError
from njt_departures.domain.models import DepartureCatalog, StationEntry

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from njt_departures.domain.ports import StationDirectory


def select_destination(
    catalog: DepartureCatalog,
    requested_code: str | None,
    directory: "StationDirectory",
) -> str:
    """Return the destination code to rank departures against.

    A known requested code is used as is. Otherwise the board's destinations
    decide: a single destination is chosen implicitly.

    Raises:
        NoUpcomingTrainsError: The board lists no departures at all.
        DisambiguationRequiredError: The board serves more than one destination.
    """
    code = directory.verify_code(requested_code)
    if code is not None:
        return code

    if requested_code is not None:
        logger.info(f"Unknown destination code {requested_code!r}, looking at the board instead")

    codes = catalog.destination_codes()
    if not codes:
        raise NoUpcomingTrainsError()
    if len(codes) == 1:
        return codes[0]

    candidates = [
        StationEntry(name=directory.name_for_code(c) or c, code=c) for c in codes
    ]
    raise DisambiguationRequiredError(candidates)
