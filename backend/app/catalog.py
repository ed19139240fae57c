"""Static activity catalog and terminology rules.

The catalog is embedded whole in every prompt so the model can only cite
whitelisted destinboardwalk.com URLs.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from backend.app.models.common import GroupType, Interest, TripType

# Order matches the list the concierge prompt presents
ACTIVITY_CATALOG: Mapping[Interest, str] = MappingProxyType(
    {
        Interest.crab_island: (
            "https://destinboardwalk.com/crab-island-destin-florida-things-to-do-destin-boardwalk/"
        ),
        Interest.boat_rentals: (
            "https://destinboardwalk.com/destin-florida-boat-rentals-destin-boardwalk/"
        ),
        Interest.charter_fishing: "https://destinboardwalk.com/charter-fishing-in-destin-florida/",
        Interest.parasailing: (
            "https://destinboardwalk.com/parasailing-adventures-in-destin-destin-boardwalk/"
        ),
        Interest.jet_ski_rentals: (
            "https://destinboardwalk.com/jet-ski-and-waverunners-rental-destin-boardwalk/"
        ),
        Interest.dolphin_tours: "https://destinboardwalk.com/sailing-charters/",
        Interest.paddleboard_kayak: (
            "https://destinboardwalk.com/paddleboards-and-kayaks-rentals-destin-boardwalk/"
        ),
        Interest.snorkeling: "https://destinboardwalk.com/snorkeling-in-destin/",
        Interest.dinner_cruises: "https://destinboardwalk.com/destin-sunset-and-dinner-cruises/",
    }
)

_missing = set(Interest) - set(ACTIVITY_CATALOG)
if _missing:
    raise RuntimeError(f"Activity catalog missing entries for: {sorted(i.value for i in _missing)}")

# Form options, in display order
ACTIVITY_OPTIONS: tuple[Interest, ...] = tuple(Interest)
TRIP_TYPE_OPTIONS: tuple[TripType, ...] = tuple(TripType)
GROUP_TYPE_OPTIONS: tuple[GroupType, ...] = tuple(GroupType)

# Terminology
FORBIDDEN_TERM = "Harbor"
PREFERRED_TERMS = ("Destin Boardwalk", "The Boardwalk")

_FORBIDDEN_RE = re.compile(re.escape(FORBIDDEN_TERM), re.IGNORECASE)


def activity_url(interest: Interest) -> str:
    """Whitelisted URL for an activity."""
    return ACTIVITY_CATALOG[interest]


def scrub_forbidden_term(text: str) -> str:
    """Replace any casing of the forbidden term with the primary preferred term."""
    return _FORBIDDEN_RE.sub(PREFERRED_TERMS[0], text)
