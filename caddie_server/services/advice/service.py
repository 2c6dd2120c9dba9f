from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from caddie_server.config import get_settings
from caddie_server.courses.models import HoleRecord

from .providers import (
    CaddieProvider,
    CaddieProviderError,
    CaddieProviderTimeout,
    MockCaddieProvider,
    OpenAICaddieProvider,
)

_LOG = logging.getLogger(__name__)

FALLBACK_TEXT = (
    "Your caddie is taking longer than expected. Please try again in a moment."
)
DEFAULT_KEY_THOUGHT = "Focus on your setup."
STANDARD_HOLE_CONTEXT = "Standard hole"


@dataclass(frozen=True)
class ShotContext:
    user_name: str
    course: str
    hole: str
    distance: str
    club: str


def provider_from_settings() -> CaddieProvider:
    settings = get_settings()
    name = settings.caddie_provider.strip().lower()
    if name == "mock":
        return MockCaddieProvider()
    return OpenAICaddieProvider(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout,
    )


def hole_context(hole: str, record: Optional[HoleRecord]) -> str:
    if record is None:
        return STANDARD_HOLE_CONTEXT
    return (
        f"Hole {hole}: Par {record.par}, {record.distance_for('white')} yards "
        f"(white tees), Notes: {record.notes}"
    )


def build_advice_prompt(shot: ShotContext, record: Optional[HoleRecord]) -> str:
    return (
        "You are an AI golf caddie. Based on the following:\n"
        f"Course: {shot.course}\n"
        f"{hole_context(shot.hole, record)}\n"
        f"Player: {shot.user_name}\n"
        f"Shot: {shot.distance} yards with {shot.club}\n"
        "Provide personalized club recommendation and key tips. "
        "Keep it concise and professional."
    )


def build_swing_prompt(user_name: str, course: str, hole: str) -> str:
    return (
        f"You are an AI golf swing coach. Analyze a practice swing for {user_name} "
        f"on {course} Hole {hole}.\n"
        "Provide feedback on tempo, posture, and common issues. "
        "Keep it encouraging and actionable."
    )


def split_advice(text: str) -> tuple[str, str]:
    """Return ``(recommendation, key_thought)``: the first two sentences of ``text``."""

    sentences = text.split(".")
    recommendation = sentences[0].strip()
    key_thought = sentences[1].strip() if len(sentences) > 1 else ""
    return recommendation, key_thought or DEFAULT_KEY_THOUGHT


def generate_advice(
    prompt: str,
    *,
    provider: CaddieProvider | None = None,
    max_tokens: int | None = None,
) -> dict[str, Any]:
    active_provider = provider or provider_from_settings()
    tokens = max_tokens if max_tokens is not None else get_settings().advice_max_tokens
    start = time.perf_counter()
    try:
        text = active_provider.generate(prompt, max_tokens=tokens)
        provider_name = getattr(
            active_provider, "name", active_provider.__class__.__name__
        )
        latency = int((time.perf_counter() - start) * 1000)
        return {"text": text, "provider": provider_name, "latency_ms": latency}
    except (CaddieProviderTimeout, httpx.TimeoutException, TimeoutError):
        latency = int((time.perf_counter() - start) * 1000)
        _LOG.warning("caddie provider timed out after %d ms", latency)
        return {"text": FALLBACK_TEXT, "provider": "fallback", "latency_ms": latency}
    except CaddieProviderError as exc:
        latency = int((time.perf_counter() - start) * 1000)
        _LOG.error("caddie provider failed: %s", exc)
        return {"text": FALLBACK_TEXT, "provider": "fallback", "latency_ms": latency}


__all__ = [
    "DEFAULT_KEY_THOUGHT",
    "FALLBACK_TEXT",
    "ShotContext",
    "build_advice_prompt",
    "build_swing_prompt",
    "generate_advice",
    "hole_context",
    "provider_from_settings",
    "split_advice",
]
