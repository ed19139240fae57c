"""Streamlit UI for Boardwalk Assist - single-page form or multi-step wizard.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Any  # noqa: E402

import streamlit as st  # noqa: E402

from backend.app.config import get_settings  # noqa: E402
from ui.helpers import (  # noqa: E402
    CTA_BADGES,
    WIZARD_STEPS,
    block_to_markdown,
    build_preferences,
    call_recommendations,
    error_detail,
    fetch_catalog,
    step_days,
    toggle_interest,
    wizard_back,
    wizard_next,
)

settings = get_settings()
BACKEND_URL = settings.backend_url

# Page config
st.set_page_config(
    page_title="Boardwalk Assist",
    page_icon="🌊",
    layout="centered",
)

# Initialize session state
defaults: dict[str, Any] = {
    "interests": [],
    "trip_type": "Adventure",
    "group_type": "Friends",
    "days": 3,
    "response": None,
    "error": None,
    "loading": False,
    "step": "activities",
    "show_preferences": True,
}
for key, value in defaults.items():
    if key not in st.session_state:
        st.session_state[key] = value


@st.cache_data(ttl=300)
def load_catalog() -> dict[str, Any]:
    """Form options from the backend."""
    return fetch_catalog(BACKEND_URL)


def start_submit() -> None:
    """Submit callback: validate, then flag a request for the next run."""
    if not st.session_state.interests:
        st.session_state.error = settings.empty_selection_message
        return

    st.session_state.loading = True
    st.session_state.error = None


def run_pending_request() -> None:
    """Call the backend once the disabled submit button has been drawn."""
    try:
        st.session_state.response = call_recommendations(
            BACKEND_URL,
            build_preferences(
                interests=st.session_state.interests,
                trip_type=st.session_state.trip_type,
                group_type=st.session_state.group_type,
                days=st.session_state.days,
            ),
        )
        st.session_state.show_preferences = False
        st.session_state.step = "results"
    except Exception as e:
        st.session_state.error = error_detail(
            e, settings.unavailable_message, invalid=settings.invalid_request_message
        )
    finally:
        st.session_state.loading = False
    st.rerun()


def edit_trip() -> None:
    st.session_state.show_preferences = True
    st.session_state.step = "activities"


# -----------------------------------------------------------------------------
# Form pieces shared by both layouts
# -----------------------------------------------------------------------------
def activity_picker(catalog: dict[str, Any]) -> None:
    st.markdown("#### Your Adventure Picks")
    cols = st.columns(3)
    for i, activity in enumerate(catalog["activities"]):
        name = activity["name"]
        selected = name in st.session_state.interests
        with cols[i % 3]:
            if st.button(
                name,
                key=f"interest_{name}",
                type="primary" if selected else "secondary",
                width="stretch",
            ):
                st.session_state.interests = toggle_interest(st.session_state.interests, name)
                st.rerun()


def vibe_and_crew(catalog: dict[str, Any]) -> None:
    col_vibe, col_crew = st.columns(2)
    with col_vibe:
        st.session_state.trip_type = st.radio(
            "Vacation Vibe",
            catalog["trip_types"],
            index=catalog["trip_types"].index(st.session_state.trip_type),
        )
    with col_crew:
        st.session_state.group_type = st.radio(
            "The Crew",
            catalog["group_types"],
            index=catalog["group_types"].index(st.session_state.group_type),
        )


def duration() -> None:
    st.markdown("#### Days in Destin")
    col_minus, col_days, col_plus = st.columns([1, 2, 1])
    with col_minus:
        if st.button("−", key="days_minus", width="stretch"):
            st.session_state.days = step_days(st.session_state.days, -1)
            st.rerun()
    with col_days:
        st.markdown(f"### {st.session_state.days} Days")
    with col_plus:
        if st.button("+", key="days_plus", width="stretch"):
            st.session_state.days = step_days(st.session_state.days, 1)
            st.rerun()


def show_error() -> None:
    if st.session_state.error and not st.session_state.loading:
        st.error(st.session_state.error)


def submit_button() -> None:
    label = "Consulting Concierge..." if st.session_state.loading else "Build My Destin Plan"
    st.button(
        label,
        key="submit",
        type="primary",
        disabled=st.session_state.loading,
        on_click=start_submit,
        width="stretch",
    )


def results() -> None:
    response = st.session_state.response
    if not response:
        st.info("No plan yet.")
        return

    st.success(f"Personalized Plan Ready - optimized for your {st.session_state.group_type} trip")

    for block in response.get("blocks", []):
        kind = block.get("kind")
        if kind == "cta":
            st.link_button(block["label"], block["url"], type="primary")
            st.caption(" · ".join(CTA_BADGES))
        elif kind == "spacer":
            st.write("")
        elif kind == "caption":
            st.caption(block_to_markdown(block))
        else:
            markdown = block_to_markdown(block)
            if markdown:
                st.markdown(markdown)

    st.button("Edit Trip", on_click=edit_trip)


# -----------------------------------------------------------------------------
# Layout
# -----------------------------------------------------------------------------
st.title("Boardwalk Assist")
st.caption("Official Concierge · DestinBoardwalk.com")

layout = st.sidebar.radio(
    "Layout",
    ["single", "wizard"],
    index=["single", "wizard"].index(settings.ui_layout),
    format_func=lambda v: "Single page" if v == "single" else "Step by step",
)

try:
    catalog = load_catalog()
except Exception:
    st.error(settings.unavailable_message)
    st.stop()

if layout == "single":
    if st.session_state.show_preferences:
        activity_picker(catalog)
        vibe_and_crew(catalog)
        duration()
        show_error()
        submit_button()
    else:
        results()
else:
    step = st.session_state.step
    st.progress((WIZARD_STEPS.index(step) + 1) / len(WIZARD_STEPS))

    if step == "activities":
        activity_picker(catalog)
    elif step == "vibe":
        vibe_and_crew(catalog)
    elif step == "duration":
        duration()
        show_error()
        submit_button()
    else:
        results()

    if step != "results":
        col_back, col_next = st.columns(2)
        with col_back:
            if step != "activities" and st.button("Back", width="stretch"):
                st.session_state.step = wizard_back(step)
                st.rerun()
        with col_next:
            if step != "duration" and st.button("Next", width="stretch"):
                st.session_state.step = wizard_next(step)
                st.rerun()

if st.session_state.loading:
    run_pending_request()
