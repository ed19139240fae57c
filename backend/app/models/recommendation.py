"""Request/response models for the recommendation flow."""

from typing import Literal

from pydantic import BaseModel, Field

from backend.app.models.blocks import DisplayBlock
from backend.app.models.common import Geo, GroupType, TripType
from backend.app.models.preferences import TripPreferences


class GenerationRequest(BaseModel):
    """Everything the external text-generation call needs.

    Coordinates travel here as retrieval configuration; they are never
    interpolated into ``prompt``.
    """

    prompt: str
    model: str
    temperature: float = Field(..., ge=0, le=2)
    enable_search: bool = True
    lat_lng: Geo | None = None


class RecommendationRequest(BaseModel):
    """Body of POST /recommendations."""

    preferences: TripPreferences
    coords: Geo | None = None


class RecommendationResponse(BaseModel):
    """Concierge answer: raw model text plus the rendered blocks."""

    text: str = Field(..., description="Model text, or the no-results placeholder")
    blocks: list[DisplayBlock] = Field(default_factory=list)
    source: Literal["gemini", "stub"] = Field(
        ..., description="'gemini' for a real model call, 'stub' for the offline client"
    )
    placeholder: bool = Field(
        False, description="True when the model returned no text and the placeholder was used"
    )


class ActivityOption(BaseModel):
    """One catalog entry as offered to the UI."""

    name: str
    url: str


class CatalogResponse(BaseModel):
    """Form options for any UI variant."""

    activities: list[ActivityOption]
    trip_types: list[TripType]
    group_types: list[GroupType]
    defaults: TripPreferences
