"""Station domain model."""

from dataclasses import dataclass, field

from njt_departures.domain.models.departure_catalog import DepartureCatalog


@dataclass
class Station:
    """A schedule snapshot for one station."""

    code: str
    name: str
    departures: DepartureCatalog = field(default_factory=DepartureCatalog)
