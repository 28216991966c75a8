"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """One entry in a train's published route."""

    name: str
    code: str
    status: str = ""
