"""Catalog endpoint - GET /catalog, form options for every UI variant."""

from fastapi import APIRouter

from backend.app.catalog import (
    ACTIVITY_OPTIONS,
    GROUP_TYPE_OPTIONS,
    TRIP_TYPE_OPTIONS,
    activity_url,
)
from backend.app.models.preferences import TripPreferences
from backend.app.models.recommendation import ActivityOption, CatalogResponse

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    """Return activities (with their booking URLs), vibes, crews and defaults."""
    return CatalogResponse(
        activities=[
            ActivityOption(name=interest.value, url=activity_url(interest))
            for interest in ACTIVITY_OPTIONS
        ],
        trip_types=list(TRIP_TYPE_OPTIONS),
        group_types=list(GROUP_TYPE_OPTIONS),
        defaults=TripPreferences(),
    )
