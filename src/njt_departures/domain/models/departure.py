"""Departure domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Departure:
    """Represents a single scheduled train event at a station."""

    time: str
    destination: str
    destination_code: str
    line: str
    train: str
    track: str
    status: str | None = None
    rank: int = 0  # 1-based position among trains to the chosen destination, 0 if not relevant

    @property
    def has_status(self) -> bool:
        """Whether the board reports any status text for this train."""
        return bool(self.status)
