"""Prompt compiler - turns trip preferences into the concierge prompt.

Pure and deterministic: no I/O, no validation. Callers reject empty
interest selections before compiling.
"""

from backend.app.catalog import (
    ACTIVITY_CATALOG,
    FORBIDDEN_TERM,
    PREFERRED_TERMS,
    scrub_forbidden_term,
)
from backend.app.config import Settings, get_settings
from backend.app.models.common import Geo
from backend.app.models.preferences import TripPreferences
from backend.app.models.recommendation import GenerationRequest

ASSISTANT_NAME = "Boardwalk Assist"
SITE_NAME = "destinboardwalk.com"


def _catalog_lines() -> list[str]:
    return [f"   - {interest.value}: {url}" for interest, url in ACTIVITY_CATALOG.items()]


def compile_prompt(prefs: TripPreferences) -> str:
    """Build the instruction string for the generative model.

    Args:
        prefs: User preferences (interests expected non-empty)

    Returns:
        Prompt text. The full activity catalog is always included, whatever
        was selected, and the selected interests are echoed in the general
        rules and in the per-activity caption instruction.
    """
    categories = prefs.interests_label
    group = prefs.group_type.value
    vibe = prefs.trip_type.value
    days = prefs.days
    destination = scrub_forbidden_term(prefs.destination)
    preferred_a, preferred_b = PREFERRED_TERMS

    lines = [
        f'You are "{ASSISTANT_NAME}", the official AI concierge for {SITE_NAME}.',
        "",
        f"The user is visiting {destination} for {days} days.",
        f"Interests: {categories}",
        f"Vibe: {vibe}, Group: {group}",
        "",
        "CRITICAL RULES:",
        f'1. TERMINOLOGY: NEVER use the word "{FORBIDDEN_TERM.upper()}" in any capitalization. '
        f'Always use "{preferred_a}" or "{preferred_b}".',
        "2. SOURCE OF TRUTH (Use these EXACT URLs for the corresponding categories):",
        *_catalog_lines(),
        "",
        f"3. QUANTITY: For EACH category selected ({categories}), provide specific suggestions "
        f"that can realistically be done during a {days}-day trip.",
        "",
        f'4. PERSONALIZATION: Ensure descriptions strictly match the "Group" ({group}). '
        'If "Family" is selected, do NOT reference "friends". '
        "Focus on how it suits their specific crew.",
        "",
        "5. STRUCTURE: For each activity, output exactly in this format:",
        "   ### [Activity/Business Name]",
        f"   _Chosen because you selected: {categories}, {group}, {days} days_",
        "   [A short, high-impact description (max 2 sentences) tailored specifically "
        f"for a {group} on a {vibe} trip.]",
        "   - [Highlight bullet 1: Why it's a must-do]",
        "   - [Highlight bullet 2: A quick tip or insight]",
        "   - [Highlight bullet 3: Practical info]",
        "",
        "   [Check Availability](EXACT_URL_FROM_LIST_ABOVE)",
        "",
        "6. NO EXTERNAL LINKS: Every single link provided must be from the list above.",
        "7. NO CITATIONS: Do not include footnotes or sources.",
        "8. NO FILLER: Just the Markdown results.",
    ]
    return "\n".join(lines)


def build_generation_request(
    prefs: TripPreferences,
    coords: Geo | None = None,
    settings: Settings | None = None,
) -> GenerationRequest:
    """Compile the prompt and attach model configuration.

    Coordinates only bias retrieval on the provider side; the prompt text is
    identical with or without them.
    """
    settings = settings or get_settings()
    return GenerationRequest(
        prompt=compile_prompt(prefs),
        model=settings.gemini_model,
        temperature=settings.llm_temperature,
        enable_search=settings.enable_search_grounding,
        lat_lng=coords,
    )
