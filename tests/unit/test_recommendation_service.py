"""Tests for the recommendation service (caller-side rules around the core)."""

from unittest.mock import AsyncMock

import pytest

from backend.app.config import Settings
from backend.app.llm.client import DeterministicStubClient, LLMCallError, LLMResult
from backend.app.models.blocks import BodyText, Spacer
from backend.app.models.common import Geo
from backend.app.models.preferences import TripPreferences
from backend.app.services.recommendations import (
    ConciergeUnavailableError,
    EmptySelectionError,
    ensure_interests_selected,
    get_travel_recommendations,
)


def fake_client(text: str = "", error: Exception | None = None) -> AsyncMock:
    """LLM client double returning fixed text or raising."""
    client = AsyncMock()
    if error is not None:
        client.generate = AsyncMock(side_effect=error)
    else:
        client.generate = AsyncMock(return_value=LLMResult(text=text, source="gemini"))
    return client


def test_ensure_interests_selected_rejects_empty() -> None:
    """Test the empty-selection guard and its message."""
    with pytest.raises(EmptySelectionError, match="Please select at least one activity category!"):
        ensure_interests_selected(TripPreferences())


def test_ensure_interests_selected_accepts_picks(sample_prefs: TripPreferences) -> None:
    """Test that a non-empty selection passes."""
    ensure_interests_selected(sample_prefs)


@pytest.mark.asyncio
async def test_empty_selection_never_calls_model() -> None:
    """Test that validation happens before any model call."""
    client = fake_client("unused")

    with pytest.raises(EmptySelectionError):
        await get_travel_recommendations(TripPreferences(), client=client)

    client.generate.assert_not_called()


@pytest.mark.asyncio
async def test_renders_model_text(
    sample_prefs: TripPreferences, sample_response_text: str
) -> None:
    """Test the happy path end to end with a fake client."""
    client = fake_client(sample_response_text)

    response = await get_travel_recommendations(sample_prefs, client=client)

    assert response.text == sample_response_text
    assert response.source == "gemini"
    assert response.placeholder is False
    assert [b.kind for b in response.blocks][0] == "heading"
    assert response.blocks[-1].kind == "cta"


@pytest.mark.asyncio
async def test_passes_coordinates_to_client(sample_prefs: TripPreferences) -> None:
    """Test that coordinates reach the generation request."""
    client = fake_client("Plain sentence.")
    coords = Geo(latitude=30.39, longitude=-86.5)

    await get_travel_recommendations(sample_prefs, coords=coords, client=client)

    request = client.generate.call_args.args[0]
    assert request.lat_lng == coords


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   \n  "])
async def test_blank_model_text_uses_placeholder(sample_prefs: TripPreferences, text: str) -> None:
    """Test the no-results placeholder substitution."""
    settings = Settings()

    response = await get_travel_recommendations(
        sample_prefs, client=fake_client(text), settings=settings
    )

    assert response.placeholder is True
    assert response.text == settings.no_results_message
    assert response.blocks == [BodyText(text=settings.no_results_message)]


@pytest.mark.asyncio
async def test_model_failure_becomes_unavailable_error(sample_prefs: TripPreferences) -> None:
    """Test the unavailable fallback message."""
    client = fake_client(error=LLMCallError("boom"))

    with pytest.raises(
        ConciergeUnavailableError, match="Unable to reach Boardwalk Assist. Please try again."
    ):
        await get_travel_recommendations(sample_prefs, client=client)


@pytest.mark.asyncio
async def test_settings_control_rendering(sample_prefs: TripPreferences) -> None:
    """Test that blank-line mode and CTA label come from settings."""
    settings = Settings(blank_line_mode="spacer", cta_label="Reserve")
    client = fake_client("Intro\n\n[x](https://example.com/x)")

    response = await get_travel_recommendations(sample_prefs, client=client, settings=settings)

    assert response.blocks[1] == Spacer()
    assert response.blocks[2].label == "Reserve"


@pytest.mark.asyncio
async def test_stub_client_round_trip(sample_prefs: TripPreferences) -> None:
    """Test the full flow with the offline stub client."""
    response = await get_travel_recommendations(sample_prefs, client=DeterministicStubClient())

    assert response.source == "stub"
    assert response.placeholder is False
    assert sum(1 for b in response.blocks if b.kind == "cta") == 2
