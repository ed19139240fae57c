"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class TripType(str, Enum):
    """Trip vibe."""

    adventure = "Adventure"
    laid_back = "Laid Back"
    family = "Family"
    romantic = "Romantic"


class GroupType(str, Enum):
    """Who is travelling."""

    family = "Family"
    couples = "Couples"
    group = "Group"
    friends = "Friends"


class Interest(str, Enum):
    """Boardwalk activity categories, in display order."""

    parasailing = "Parasailing"
    charter_fishing = "Charter Fishing"
    boat_rentals = "Boat Rentals"
    dolphin_tours = "Dolphin Tours & Cruises"
    jet_ski_rentals = "Jet Ski Rentals"
    dinner_cruises = "Dinner & Sunset Cruises"
    snorkeling = "Snorkeling"
    crab_island = "Crab Island Adventures"
    paddleboard_kayak = "Paddleboard & Kayak Rentals"
