"""Recommendation endpoints - POST /recommendations, POST /prompt/preview."""

import logging

from fastapi import APIRouter, HTTPException, status

from backend.app.models.recommendation import RecommendationRequest, RecommendationResponse
from backend.app.prompts.compiler import compile_prompt
from backend.app.services.recommendations import (
    ConciergeUnavailableError,
    EmptySelectionError,
    ensure_interests_selected,
    get_travel_recommendations,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/recommendations",
    response_model=RecommendationResponse,
    status_code=status.HTTP_200_OK,
)
async def create_recommendations(body: RecommendationRequest) -> RecommendationResponse:
    """Generate Boardwalk recommendations for the submitted preferences.

    Args:
        body: Preferences plus optional coordinates

    Returns:
        RecommendationResponse with model text and display blocks

    Raises:
        HTTPException: 422 for an empty interest selection, 502 if the model
            cannot be reached
    """
    prefs = body.preferences
    logger.info(f"[POST /recommendations] interests={prefs.interests_label}, days={prefs.days}")

    try:
        response = await get_travel_recommendations(prefs, coords=body.coords)
    except EmptySelectionError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    except ConciergeUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    logger.info(
        f"[POST /recommendations] source={response.source}, "
        f"{len(response.blocks)} blocks, placeholder={response.placeholder}"
    )
    return response


@router.post("/prompt/preview", status_code=status.HTTP_200_OK)
async def preview_prompt(body: RecommendationRequest) -> dict[str, str]:
    """Return the compiled prompt without calling the model."""
    try:
        ensure_interests_selected(body.preferences)
    except EmptySelectionError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return {"prompt": compile_prompt(body.preferences)}
