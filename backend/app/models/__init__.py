"""Models package - re-exports for convenience."""

from backend.app.models.blocks import (
    BodyText,
    BulletItem,
    CallToAction,
    Caption,
    DisplayBlock,
    Heading,
    Spacer,
)
from backend.app.models.common import Geo, GroupType, Interest, TripType
from backend.app.models.preferences import TripPreferences
from backend.app.models.recommendation import (
    ActivityOption,
    CatalogResponse,
    GenerationRequest,
    RecommendationRequest,
    RecommendationResponse,
)

__all__ = [
    # Common
    "Geo",
    "TripType",
    "GroupType",
    "Interest",
    # Preferences
    "TripPreferences",
    # Blocks
    "DisplayBlock",
    "Heading",
    "Caption",
    "BodyText",
    "BulletItem",
    "CallToAction",
    "Spacer",
    # Recommendation
    "GenerationRequest",
    "RecommendationRequest",
    "RecommendationResponse",
    "ActivityOption",
    "CatalogResponse",
]
