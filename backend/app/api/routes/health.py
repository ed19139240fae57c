"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter

from backend.app.config import Settings, get_settings

router = APIRouter()


def check_llm(settings: Settings) -> str:
    """Report whether a real model key is configured.

    Returns:
        "configured" or "stub"
    """
    key = settings.gemini_api_key
    if key and key.get_secret_value():
        return "configured"
    return "stub"


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz() -> dict[str, Any]:
    """Health check with component details.

    The stub client keeps the API usable without a key, so a missing key is
    reported but does not degrade status.
    """
    settings = get_settings()
    return {
        "status": "ok",
        "components": {
            "llm": check_llm(settings),
            "model": settings.gemini_model,
        },
    }
