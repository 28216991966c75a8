"""Plain-text report of upcoming trains and previous-stop status."""

from njt_departures.domain.models import Departure

CREDITS = (
    "\n"
    "**********************************\n"
    "Data provided by NJ TRANSIT, which\n"
    "is the sole owner of the Data.\n"
    "**********************************\n"
)

NO_PREVIOUS_STATUS = " No previous stops status.\n"
PREVIOUS_STATUS_HEADER = " Previous stops status:\n\n"


class ReportBuilder:
    """Accumulates report fragments in order and renders them as one text."""

    def __init__(self) -> None:
        """Initialize an empty report."""
        self._parts: list[str] = []

    def add_header(self, origin_name: str, destination_name: str) -> None:
        """Add the "Trains from ... to ..." heading."""
        self._parts.append(f"\nTrains from {origin_name} to {destination_name}:\n\n")

    def add_departure(self, departure: Departure) -> None:
        """Add the time, train, track and board status of one train."""
        line = f"{departure.time} #{departure.train}, Track {departure.track}"
        if departure.status:
            line += f" {departure.status}"
        self._parts.append(line + ".")

    def add_no_route(self, train: str, origin_code: str, destination_code: str) -> None:
        """Add the line for a train whose stop list came back empty."""
        self._parts.append(
            f" No route found for train {train} from {origin_code} to {destination_code}\n"
        )

    def add_previous_status(self, status_lines: list[str]) -> None:
        """Add the status reported by preceding stations, or the fallback line."""
        if not status_lines:
            self._parts.append(NO_PREVIOUS_STATUS)
        else:
            self._parts.append(PREVIOUS_STATUS_HEADER)
            self._parts.extend(f"    {line}\n" for line in status_lines)
        self._parts.append("\n")

    def build(self) -> str:
        """Render the report followed by the credits block."""
        return "".join(self._parts) + CREDITS
