"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # LLM (Gemini via its OpenAI-compatible endpoint)
    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-3-pro-preview"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    llm_temperature: float = 0.2
    llm_timeout_s: float = 60.0
    enable_search_grounding: bool = True

    # Trip defaults
    default_destination: str = "Destin Boardwalk"

    # Rendering
    cta_label: str = "Check Availability"
    blank_line_mode: Literal["skip", "spacer"] = "skip"

    # User-facing messages
    empty_selection_message: str = "Please select at least one activity category!"
    unavailable_message: str = "Unable to reach Boardwalk Assist. Please try again."
    no_results_message: str = (
        "No active experiences found on the Destin Boardwalk for those selections right now."
    )
    invalid_request_message: str = "Some trip details are invalid. Please check your selections."

    # UI
    backend_url: str = "http://localhost:8000"
    ui_layout: Literal["single", "wizard"] = "single"

    @field_validator("cta_label")
    @classmethod
    def cta_label_not_blank(cls, v: str) -> str:
        """Call-to-action links need visible text to render as links again."""
        v = v.strip()
        if not v:
            raise ValueError("cta_label must not be blank")
        if "[" in v or "]" in v:
            raise ValueError("cta_label must not contain square brackets")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
