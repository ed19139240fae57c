"""Shared pytest fixtures for all test suites."""

import pytest

from backend.app.models.common import GroupType, Interest, TripType
from backend.app.models.preferences import TripPreferences


@pytest.fixture
def sample_prefs() -> TripPreferences:
    """Family trip with two picks."""
    return TripPreferences(
        trip_type=TripType.adventure,
        group_type=GroupType.family,
        days=3,
        interests=(Interest.parasailing, Interest.snorkeling),
    )


@pytest.fixture
def sample_response_text() -> str:
    """A model answer in the structure the prompt requests."""
    return (
        "### Parasailing Thrills\n"
        "_Chosen because you selected: Parasailing, Snorkeling, Family, 3 days_\n"
        "Soar 500 feet above the Gulf with the whole crew.\n"
        "- Why it's a must-do: unbeatable views of The Boardwalk\n"
        "- Tip: morning flights have calmer winds\n"
        "- Practical info: riders must be 6+\n"
        "\n"
        "[Check Availability]"
        "(https://destinboardwalk.com/parasailing-adventures-in-destin-destin-boardwalk/)\n"
    )
