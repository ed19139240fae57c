"""Unit tests for UI helper functions."""

from unittest.mock import MagicMock, patch

import httpx

from ui.helpers import (
    INVALID_REQUEST_MESSAGE,
    WIZARD_STEPS,
    block_to_markdown,
    build_preferences,
    call_recommendations,
    error_detail,
    step_days,
    toggle_interest,
    wizard_back,
    wizard_next,
)


def test_toggle_interest_adds_in_pick_order() -> None:
    """Test that selecting appends to the end."""
    result = toggle_interest(["Snorkeling"], "Parasailing")
    assert result == ["Snorkeling", "Parasailing"]


def test_toggle_interest_removes_selected() -> None:
    """Test that selecting again deselects."""
    result = toggle_interest(["Snorkeling", "Parasailing"], "Snorkeling")
    assert result == ["Parasailing"]


def test_toggle_interest_does_not_mutate_input() -> None:
    """Test that the original list is left alone."""
    selected = ["Snorkeling"]
    toggle_interest(selected, "Parasailing")
    assert selected == ["Snorkeling"]


def test_step_days_floor_is_one() -> None:
    """Test the days stepper."""
    assert step_days(1, -1) == 1
    assert step_days(3, -1) == 2
    assert step_days(3, 1) == 4
    assert step_days(99, 1) == 100


def test_wizard_navigation() -> None:
    """Test next/back through the wizard steps."""
    assert wizard_next("activities") == "vibe"
    assert wizard_next("duration") == "results"
    assert wizard_next(WIZARD_STEPS[-1]) == WIZARD_STEPS[-1]
    assert wizard_back("vibe") == "activities"
    assert wizard_back(WIZARD_STEPS[0]) == WIZARD_STEPS[0]


def test_build_preferences_payload() -> None:
    """Test request payload shape."""
    prefs = build_preferences(["Snorkeling"], "Romantic", "Couples", 2)

    assert prefs == {
        "trip_type": "Romantic",
        "group_type": "Couples",
        "days": 2,
        "interests": ["Snorkeling"],
    }
    assert "destination" not in prefs


def test_build_preferences_with_destination() -> None:
    """Test optional destination."""
    prefs = build_preferences([], "Adventure", "Friends", 3, destination="Destin")
    assert prefs["destination"] == "Destin"


def test_block_to_markdown() -> None:
    """Test per-kind markdown for rendered blocks."""
    assert block_to_markdown({"kind": "heading", "text": "Sail"}) == "### Sail"
    assert block_to_markdown({"kind": "caption", "text": "Why"}) == "_Why_"
    assert block_to_markdown({"kind": "bullet", "text": "Tip"}) == "✓ Tip"
    assert block_to_markdown({"kind": "body", "text": "Hello."}) == "Hello."
    assert block_to_markdown({"kind": "cta", "url": "u", "label": "l"}) is None
    assert block_to_markdown({"kind": "spacer"}) is None


def test_call_recommendations_posts_body() -> None:
    """Test backend call payload (mocked)."""
    mock_response = MagicMock()
    mock_response.json.return_value = {"text": "", "blocks": [], "source": "stub"}

    with patch("ui.helpers.httpx.post", return_value=mock_response) as mock_post:
        result = call_recommendations(
            "http://backend",
            {"interests": ["Snorkeling"]},
            coords={"latitude": 1.0, "longitude": 2.0},
        )

    mock_post.assert_called_once()
    assert mock_post.call_args.args[0] == "http://backend/recommendations"
    assert mock_post.call_args.kwargs["json"] == {
        "preferences": {"interests": ["Snorkeling"]},
        "coords": {"latitude": 1.0, "longitude": 2.0},
    }
    mock_response.raise_for_status.assert_called_once()
    assert result["source"] == "stub"


def _status_error(status_code: int, payload: dict) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "http://backend/recommendations")
    response = httpx.Response(status_code, json=payload, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def test_error_detail_uses_validation_message() -> None:
    """Test that 422 details are shown to the user."""
    error = _status_error(422, {"detail": "Please select at least one activity category!"})
    assert error_detail(error, "fallback") == "Please select at least one activity category!"


def test_error_detail_falls_back_for_other_errors() -> None:
    """Test the fixed fallback for upstream failures."""
    assert error_detail(_status_error(502, {"detail": "x"}), "fallback") == "fallback"
    assert error_detail(httpx.ConnectError("refused"), "fallback") == "fallback"


def test_error_detail_maps_structured_validation_errors() -> None:
    """Test that pydantic error lists get the validation message, not the fallback."""
    error = _status_error(422, {"detail": [{"loc": ["body", "preferences", "days"], "msg": "bad"}]})

    assert error_detail(error, "fallback") == INVALID_REQUEST_MESSAGE
    assert error_detail(error, "fallback", invalid="Check your trip") == "Check your trip"
