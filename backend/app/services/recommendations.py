"""Recommendation service - preferences in, rendered concierge answer out.

Owns the caller-side rules around the pure compiler and renderer: rejecting
empty selections, the unavailable fallback, and the no-results placeholder.
"""

import logging

from backend.app.config import Settings, get_settings
from backend.app.llm.client import LLMCallError, LLMClient, get_llm_client
from backend.app.models.common import Geo
from backend.app.models.preferences import TripPreferences
from backend.app.models.recommendation import RecommendationResponse
from backend.app.prompts.compiler import build_generation_request
from backend.app.render.renderer import render_response
from backend.app.utils.metrics import PrometheusLLMMetrics

logger = logging.getLogger(__name__)


class EmptySelectionError(ValueError):
    """No activity interests were selected."""

    pass


class ConciergeUnavailableError(Exception):
    """The model could not be reached; message is user-facing."""

    pass


def ensure_interests_selected(prefs: TripPreferences, settings: Settings | None = None) -> None:
    """Reject an empty interest selection before any prompt is built.

    Raises:
        EmptySelectionError: With the configured user-facing message
    """
    settings = settings or get_settings()
    if not prefs.interests:
        raise EmptySelectionError(settings.empty_selection_message)


async def get_travel_recommendations(
    prefs: TripPreferences,
    coords: Geo | None = None,
    client: LLMClient | None = None,
    settings: Settings | None = None,
) -> RecommendationResponse:
    """Compile, call the model, and render its answer.

    Args:
        prefs: Trip preferences (interests must be non-empty)
        coords: Optional user location, passed to the provider for retrieval
        client: LLM client (default: chosen from settings)
        settings: Settings override (default: cached settings)

    Returns:
        RecommendationResponse with raw text and display blocks

    Raises:
        EmptySelectionError: If no interests were selected
        ConciergeUnavailableError: If the model call fails
    """
    settings = settings or get_settings()
    ensure_interests_selected(prefs, settings)

    request = build_generation_request(prefs, coords=coords, settings=settings)
    client = client or get_llm_client()

    logger.info(
        f"Requesting recommendations: interests={prefs.interests_label}, "
        f"group={prefs.group_type.value}, days={prefs.days}"
    )

    try:
        result = await client.generate(request)
    except LLMCallError as e:
        logger.error(f"Recommendation call failed: {e}")
        raise ConciergeUnavailableError(settings.unavailable_message) from e

    text = result.text
    placeholder = False
    if not text.strip():
        logger.warning("Model returned empty text, using no-results placeholder")
        PrometheusLLMMetrics().inc_placeholder()
        text = settings.no_results_message
        placeholder = True

    blocks = render_response(
        text,
        blank_lines=settings.blank_line_mode,
        cta_label=settings.cta_label,
    )

    return RecommendationResponse(
        text=text,
        blocks=blocks,
        source=result.source,
        placeholder=placeholder,
    )
