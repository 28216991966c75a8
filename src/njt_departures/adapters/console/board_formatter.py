"""Console formatting for boards, stop lists and station listings."""

from rich.console import Group
from rich.table import Table
from rich.text import Text

from njt_departures.domain.models import Departure, Station, StationEntry, StopSequence

TRAIN_STYLE = "red"
DESTINATION_STYLE = "yellow"
TRACK_STYLE = "green"

BOARD_HEADER = Departure(
    time="DEP",
    destination="TO",
    destination_code="SC",
    line="",
    train="TRAIN",
    track="TRK",
    status="STATUS",
)


def board_grid() -> Table:
    """Create the borderless grid holding the board columns."""
    grid = Table.grid(padding=(0, 1, 0, 0))
    grid.add_column(justify="right", min_width=7, no_wrap=True)
    grid.add_column(justify="right", min_width=5, no_wrap=True, style=TRAIN_STYLE)
    grid.add_column(justify="left", no_wrap=True)
    grid.add_column(justify="left", min_width=20, no_wrap=True, style=DESTINATION_STYLE)
    grid.add_column(justify="right", min_width=3, no_wrap=True, style=TRACK_STYLE)
    grid.add_column(justify="left")
    return grid


def add_departure_row(grid: Table, departure: Departure) -> None:
    """Add one board row: time, train, code, destination, track and status."""
    cells = (
        departure.time,
        departure.train,
        departure.destination_code,
        departure.destination,
        departure.track,
        departure.status or "",
    )
    grid.add_row(*(Text(cell) for cell in cells))


def format_board(station: Station) -> Group:
    """Render the full departure board of a station."""
    grid = board_grid()
    add_departure_row(grid, BOARD_HEADER)
    for departure in station.departures:
        add_departure_row(grid, departure)

    banner = Text(
        f"=== {station.name}({station.code}) === [{len(station.departures)}] "
        "====================="
    )
    return Group(banner, grid, Text("--"))


def format_station_list(entries: list[StationEntry]) -> str:
    """Format the station directory as name and code columns."""
    return "".join(f"{entry.name:<40}    {entry.code:>2}\n" for entry in entries)


def format_stops(stops: StopSequence) -> str:
    """Format a train's stops, one ``name(code) status`` per line."""
    return "".join(f"{stop.name}({stop.code}) {stop.status}".rstrip() + "\n" for stop in stops)


def format_destination_candidates(candidates: list[StationEntry]) -> str:
    """Format the destinations a user can choose from."""
    header = "Multiple destinations found.\nUse -t parameter and station code from the list:\n"
    return header + "".join(f"{c.name:<20} {c.code}\n" for c in candidates)
