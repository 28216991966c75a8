"""Stop sequence (route) domain model."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from njt_departures.domain.models.stop import Stop


@dataclass(frozen=True)
class StopSequence:
    """Ordered stops of one train as published, earliest stop first."""

    stops: tuple[Stop, ...] = ()

    @classmethod
    def of(cls, stops: Iterable[Stop]) -> "StopSequence":
        """Build a sequence from any iterable of stops."""
        return cls(tuple(stops))

    def __len__(self) -> int:
        return len(self.stops)

    def __iter__(self) -> Iterator[Stop]:
        return iter(self.stops)

    def __bool__(self) -> bool:
        return bool(self.stops)

    def reversed(self) -> "StopSequence":
        """Return a new sequence in the opposite order."""
        return StopSequence(self.stops[::-1])

    def index_of(self, station_code: str) -> int | None:
        """Return the position of the first stop at ``station_code``."""
        for index, stop in enumerate(self.stops):
            if stop.code == station_code:
                return index
        return None

    def after(self, station_code: str) -> "StopSequence | None":
        """Return the stops following the first stop at ``station_code``.

        Returns None when the station is not part of the sequence.
        """
        index = self.index_of(station_code)
        if index is None:
            return None
        return StopSequence(self.stops[index + 1 :])
