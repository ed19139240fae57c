"""Structured logging for LLM calls."""

import logging
from typing import Any

from backend.app.models.recommendation import GenerationRequest

logger = logging.getLogger(__name__)


class StructuredLLMLogger:
    """Structured logger for text-generation calls."""

    def log_call(
        self,
        request: GenerationRequest,
        outcome: str,
        latency_ms: float,
        response_chars: int | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log one model call with structured data (never the prompt itself)."""
        log_data: dict[str, Any] = {
            "model": request.model,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "prompt_chars": len(request.prompt),
            "search": request.enable_search,
            "location_biased": request.lat_lng is not None,
        }

        if response_chars is not None:
            log_data["response_chars"] = response_chars
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"LLM call: {request.model} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
