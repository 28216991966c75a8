"""Station directory entry domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationEntry:
    """A station name and its short station code."""

    name: str
    code: str
