"""Helper functions for UI - backend client, form state, block formatting."""

from typing import Any

import httpx

# Wizard steps, in order
WIZARD_STEPS = [
    "activities",
    "vibe",
    "duration",
    "results",
]

# Trust badges shown under every call-to-action
CTA_BADGES = ["Free cancellation", "No extra fees", "Instant confirmation"]

BULLET_MARK = "✓"

INVALID_REQUEST_MESSAGE = "Some trip details are invalid. Please check your selections."


def toggle_interest(selected: list[str], option: str) -> list[str]:
    """Add or remove an activity from a multi-select, keeping pick order."""
    if option in selected:
        return [item for item in selected if item != option]
    return [*selected, option]


def step_days(days: int, delta: int) -> int:
    """Adjust trip length; never below one day, no upper bound."""
    return max(1, days + delta)


def wizard_next(step: str) -> str:
    """Step after ``step``; the last step stays put."""
    index = WIZARD_STEPS.index(step)
    return WIZARD_STEPS[min(index + 1, len(WIZARD_STEPS) - 1)]


def wizard_back(step: str) -> str:
    """Step before ``step``; the first step stays put."""
    index = WIZARD_STEPS.index(step)
    return WIZARD_STEPS[max(index - 1, 0)]


def build_preferences(
    interests: list[str],
    trip_type: str,
    group_type: str,
    days: int,
    destination: str | None = None,
) -> dict[str, Any]:
    """Build the TripPreferences payload for the backend."""
    prefs: dict[str, Any] = {
        "trip_type": trip_type,
        "group_type": group_type,
        "days": days,
        "interests": interests,
    }
    if destination:
        prefs["destination"] = destination
    return prefs


def block_to_markdown(block: dict[str, Any]) -> str | None:
    """Markdown for one rendered block.

    Call-to-action and spacer blocks need widgets rather than markdown, so
    they return None.
    """
    kind = block.get("kind")
    if kind == "heading":
        return f"### {block['text']}"
    if kind == "caption":
        return f"_{block['text']}_"
    if kind == "bullet":
        return f"{BULLET_MARK} {block['text']}"
    if kind == "body":
        return str(block["text"])
    return None


def fetch_catalog(backend_url: str) -> dict[str, Any]:
    """Call GET /catalog for form options.

    Raises:
        httpx.HTTPStatusError: If request fails
    """
    response = httpx.get(f"{backend_url}/catalog", timeout=10.0)
    response.raise_for_status()
    result: dict[str, Any] = response.json()
    return result


def call_recommendations(
    backend_url: str,
    preferences: dict[str, Any],
    coords: dict[str, float] | None = None,
) -> dict[str, Any]:
    """Call POST /recommendations.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:8000)
        preferences: TripPreferences payload (see build_preferences)
        coords: Optional {"latitude": ..., "longitude": ...}

    Returns:
        RecommendationResponse dict

    Raises:
        httpx.HTTPStatusError: If request fails
    """
    body: dict[str, Any] = {"preferences": preferences}
    if coords:
        body["coords"] = coords

    response = httpx.post(
        f"{backend_url}/recommendations",
        json=body,
        timeout=90.0,  # Model calls with search grounding are slow
    )
    response.raise_for_status()
    result: dict[str, Any] = response.json()
    return result


def error_detail(
    error: Exception,
    fallback: str,
    invalid: str = INVALID_REQUEST_MESSAGE,
) -> str:
    """User-facing message for a failed backend call.

    A 422 shows its string ``detail`` (the empty-selection message) or, for
    field-level validation errors, the ``invalid`` message. Everything else
    gets the fixed fallback.
    """
    if isinstance(error, httpx.HTTPStatusError) and error.response.status_code == 422:
        try:
            detail = error.response.json().get("detail")
        except ValueError:
            detail = None
        if isinstance(detail, str) and detail:
            return detail
        return invalid
    return fallback
