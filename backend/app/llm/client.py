"""LLM client for concierge recommendations.

Talks to Gemini through its OpenAI-compatible endpoint using the OpenAI SDK.
Security: the API key comes from settings (environment) only, never hardcoded.
Provides a deterministic stub when no key is present, for local runs and tests.
"""

import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from openai import AsyncOpenAI

from backend.app.catalog import activity_url
from backend.app.config import settings
from backend.app.models.common import Interest
from backend.app.models.recommendation import GenerationRequest
from backend.app.utils.logging import StructuredLLMLogger
from backend.app.utils.metrics import PrometheusLLMMetrics

logger = logging.getLogger(__name__)


class LLMCallError(Exception):
    """The external text-generation call failed."""

    pass


@dataclass(frozen=True)
class LLMResult:
    """Raw model output."""

    text: str
    source: Literal["gemini", "stub"]


class LLMClient(Protocol):
    """Protocol for LLM client implementations."""

    async def generate(self, request: GenerationRequest) -> LLMResult:
        """Run the prompt and return the model's text (may be empty)."""
        ...


_INTERESTS_LINE_RE = re.compile(r"^Interests: (.*)$", re.MULTILINE)
_INTEREST_VALUES = {i.value for i in Interest}


class DeterministicStubClient:
    """Deterministic stub client for testing (no API key required).

    Answers in the same line structure the real prompt asks for, one block per
    interest listed on the prompt's "Interests:" line.
    """

    async def generate(self, request: GenerationRequest) -> LLMResult:
        """Generate deterministic stub recommendations."""
        match = _INTERESTS_LINE_RE.search(request.prompt)
        names = [n.strip() for n in match.group(1).split(",")] if match else []
        interests = [Interest(n) for n in names if n in _INTEREST_VALUES]

        sections: list[str] = []
        for interest in interests:
            sections.append(
                "\n".join(
                    [
                        f"### {interest.value} on The Boardwalk",
                        f"_Chosen because you selected: {interest.value}_",
                        "A placeholder recommendation generated without a model call.",
                        "- Why it's a must-do: a Destin Boardwalk favourite",
                        "- Tip: book a morning slot for calmer water",
                        "- Practical info: check the listing for current times",
                        "",
                        f"[Check Availability]({activity_url(interest)})",
                    ]
                )
            )

        return LLMResult(text="\n\n".join(sections), source="stub")


class GeminiClient:
    """Gemini-backed client via the OpenAI-compatible API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/",
        timeout_s: float = 60.0,
    ):
        """Initialize the client.

        Args:
            api_key: Gemini API key (read from environment)
            base_url: OpenAI-compatible endpoint
            timeout_s: Per-request timeout in seconds
        """
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout_s)
        self.call_logger = StructuredLLMLogger()
        self.metrics = PrometheusLLMMetrics()

    async def generate(self, request: GenerationRequest) -> LLMResult:
        """Generate recommendations using the model."""
        started = time.perf_counter()
        kwargs: dict[str, Any] = {
            "model": request.model,
            "messages": [{"role": "user", "content": request.prompt}],
            "temperature": request.temperature,
        }
        google_options = self._build_google_options(request)
        if google_options:
            kwargs["extra_body"] = {"extra_body": {"google": google_options}}

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except Exception as e:
            latency_ms = (time.perf_counter() - started) * 1000
            reason = type(e).__name__
            logger.error(f"Gemini API call failed: {e}")
            self.call_logger.log_call(request, "error", latency_ms, error_reason=reason)
            self.metrics.record_latency(request.model, "error", latency_ms)
            self.metrics.inc_error(request.model, reason)
            raise LLMCallError(str(e)) from e

        latency_ms = (time.perf_counter() - started) * 1000
        text = ""
        if response.choices:
            text = response.choices[0].message.content or ""

        outcome = "success" if text.strip() else "empty"
        self.call_logger.log_call(request, outcome, latency_ms, response_chars=len(text))
        self.metrics.record_latency(request.model, outcome, latency_ms)

        return LLMResult(text=text, source="gemini")

    def _build_google_options(self, request: GenerationRequest) -> dict[str, Any]:
        """Provider-specific search tool and location-biased retrieval config."""
        options: dict[str, Any] = {}
        if request.enable_search:
            options["tools"] = [{"google_search": {}}]
        if request.lat_lng is not None:
            options["tool_config"] = {
                "retrieval_config": {
                    "lat_lng": {
                        "latitude": request.lat_lng.latitude,
                        "longitude": request.lat_lng.longitude,
                    }
                }
            }
        return options


def get_llm_client() -> LLMClient:
    """Factory function to get appropriate LLM client based on config.

    Returns:
        GeminiClient if API key is configured, DeterministicStubClient otherwise
    """
    api_key = settings.gemini_api_key

    if api_key and api_key.get_secret_value():
        logger.info("Using Gemini client for recommendations")
        return GeminiClient(
            api_key=api_key.get_secret_value(),
            base_url=settings.gemini_base_url,
            timeout_s=settings.llm_timeout_s,
        )
    else:
        logger.warning("No Gemini API key configured, using deterministic stub client")
        return DeterministicStubClient()
