"""Tests for destination selection and disambiguation."""

import pytest

from njt_departures.adapters.station_directory import StaticStationDirectory
from njt_departures.application.destination_selection import select_destination
from njt_departures.domain.errors import DisambiguationRequiredError
from njt_departures.domain.models import Departure, DepartureCatalog

DIRECTORY = StaticStationDirectory(
    (("New York Penn Station", "NY"), ("Hoboken", "HOB"), ("Trenton", "TR"))
)


def _catalog(*codes: str) -> DepartureCatalog:
    return DepartureCatalog(
        [
            Departure(
                time="6:00",
                destination=code,
                destination_code=code,
                line="NEC",
                train=str(n),
                track="1",
            )
            for n, code in enumerate(codes)
        ]
    )


def test_known_requested_code_is_used() -> None:
    """Given a valid destination code, when selecting, then it is used as is."""
    assert select_destination(_catalog("NY", "HOB"), "TR", DIRECTORY) == "TR"


def test_single_destination_is_chosen_implicitly() -> None:
    """Given one destination on the board and no target, when selecting, then it is chosen."""
    assert select_destination(_catalog("NY", "NY"), None, DIRECTORY) == "NY"


def test_multiple_destinations_require_disambiguation() -> None:
    """Given NY, HOB, NY and no target, when selecting, then both candidates are reported."""
    with pytest.raises(DisambiguationRequiredError) as exc_info:
        select_destination(_catalog("NY", "HOB", "NY"), None, DIRECTORY)

    candidates = exc_info.value.candidates
    assert [c.code for c in candidates] == ["HOB", "NY"]
    assert [c.name for c in candidates] == ["Hoboken", "New York Penn Station"]


def test_unknown_requested_code_is_treated_as_absent() -> None:
    """Given an unknown code and a single-destination board, when selecting, then the board decides."""
    assert select_destination(_catalog("HOB"), "XX", DIRECTORY) == "HOB"


def test_unknown_requested_code_with_several_destinations_requires_disambiguation() -> None:
    """Given an unknown code and several destinations, when selecting, then the user must choose."""
    with pytest.raises(DisambiguationRequiredError):
        select_destination(_catalog("HOB", "TR"), "XX", DIRECTORY)
