"""Ordered collection of the departures published for one station."""

from collections.abc import Iterator
from dataclasses import replace

from njt_departures.domain.models.departure import Departure


class DepartureCatalog:
    """Departures of one station board, kept in document order."""

    def __init__(self, departures: list[Departure] | None = None) -> None:
        """Initialize with optional departures already in document order."""
        self._departures: list[Departure] = list(departures or [])

    def append(self, departure: Departure) -> None:
        """Add a decoded departure after the last one added."""
        self._departures.append(departure)

    def __len__(self) -> int:
        return len(self._departures)

    def __iter__(self) -> Iterator[Departure]:
        return iter(self._departures)

    def __getitem__(self, index: int) -> Departure:
        return self._departures[index]

    def rank(self, destination_code: str) -> int:
        """Number the departures heading to a destination.

        Departures whose destination code matches get ranks 1, 2, 3, ... in
        document order; every other departure is reset to rank 0.

        Returns:
            The number of ranked departures.
        """
        count = 0
        for index, departure in enumerate(self._departures):
            if departure.destination_code == destination_code:
                count += 1
                self._departures[index] = replace(departure, rank=count)
            elif departure.rank:
                self._departures[index] = replace(departure, rank=0)
        return count

    def ranked(self, limit: int | None = None) -> list[Departure]:
        """Return ranked departures in rank order, optionally capped at ``limit``."""
        ranked = [d for d in self._departures if d.rank > 0]
        return ranked if limit is None else ranked[:limit]

    def destination_codes(self) -> list[str]:
        """Return the distinct destination codes, sorted."""
        return sorted({d.destination_code for d in self._departures})

    def for_train(self, train: str) -> list[Departure]:
        """Return every departure of the given train identifier."""
        return [d for d in self._departures if d.train == train]
