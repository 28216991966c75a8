"""Errors raised while fetching, decoding and resolving schedules."""

from njt_departures.domain.models.error_details import ErrorDetails
from njt_departures.domain.models.station_entry import StationEntry


class DeparturesError(Exception):
    """Base class for every error raised by the departures core."""


class MalformedInputError(DeparturesError):
    """An upstream document lacks an expected tag pair or mandatory field."""


class LookupFailureError(DeparturesError):
    """A station name or code is not present in the station directory."""

    def __init__(self, value: str, kind: str = "name") -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"Unknown station {kind}: {value!r}")


class RouteInconsistencyError(DeparturesError):
    """The origin station is missing from its own train's route."""


class NoRouteFoundError(DeparturesError):
    """The per-train stop list came back empty."""

    def __init__(self, train: str, origin_code: str, destination_code: str) -> None:
        self.train = train
        self.origin_code = origin_code
        self.destination_code = destination_code
        super().__init__(
            f"No route found for train {train} from {origin_code} to {destination_code}"
        )


class DisambiguationRequiredError(DeparturesError):
    """No destination was given and the board serves more than one."""

    def __init__(self, candidates: list[StationEntry]) -> None:
        self.candidates = candidates
        super().__init__(
            "Multiple destinations found: " + ", ".join(c.code for c in candidates)
        )


class NoUpcomingTrainsError(DeparturesError):
    """No departure on the board heads to the chosen destination."""

    def __init__(
        self, destination_name: str | None = None, destination_code: str | None = None
    ) -> None:
        self.destination_name = destination_name
        self.destination_code = destination_code
        if destination_code is None:
            super().__init__("No departures found on the board")
        else:
            super().__init__(f"No next trains to {destination_name}({destination_code}) found")


class FetchError(DeparturesError):
    """A schedule document could not be retrieved."""

    def __init__(self, url: str, details: ErrorDetails) -> None:
        self.url = url
        self.details = details
        status = f" (HTTP {details.status_code})" if details.status_code is not None else ""
        super().__init__(f"Cannot fetch {url}{status}: {details.reason}")
