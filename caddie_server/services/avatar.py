"""HeyGen avatar video requests.

Video generation on HeyGen is asynchronous: a successful request only yields a
``video_id`` with status ``processing``. Polling for the finished video is not
done here.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import httpx

from caddie_server.config import get_settings

_LOG = logging.getLogger(__name__)

HEYGEN_GENERATE_URL = "https://api.heygen.com/v2/video/generate"


@dataclass
class AvatarResult:
    status: str
    video_url: Optional[str] = None
    video_id: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _http_client_factory(**kwargs: Any) -> httpx.Client:
    timeout = kwargs.pop("timeout", 10.0)
    return httpx.Client(timeout=timeout, **kwargs)


def _request_body(text: str, avatar_id: str, voice_id: str) -> Dict[str, Any]:
    return {
        "test": False,
        "caption": False,
        "title": "Golf Advice",
        "input_text": text,
        "avatar_id": avatar_id,
        "voice_id": voice_id,
        "background": {"type": "color", "value": "#ffffff"},
    }


def generate_avatar(text: str) -> AvatarResult:
    """Request an avatar video speaking ``text``; never raises."""

    settings = get_settings()
    _LOG.info("avatar requested for text length %d", len(text))

    if not settings.heygen_configured:
        _LOG.info("HeyGen API key or avatar id not configured, skipping avatar")
        return AvatarResult(status="not_configured")

    if not settings.heygen_enabled:
        return AvatarResult(
            status="disabled_for_demo",
            message="Avatar video generation disabled - using text response instead",
        )

    body = _request_body(text, settings.heygen_avatar_id, settings.heygen_voice_id)
    headers = {
        "Content-Type": "application/json",
        "X-Api-Key": settings.heygen_api_key,
    }
    try:
        with _http_client_factory(timeout=10.0) as client:
            response = client.post(HEYGEN_GENERATE_URL, json=body, headers=headers)
            response.raise_for_status()
            payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        _LOG.error("HeyGen avatar request failed: %s", exc)
        return AvatarResult(status="error", error=str(exc))

    data = payload.get("data") if isinstance(payload, dict) else None
    video_id = data.get("video_id") if isinstance(data, dict) else None
    if not video_id:
        return AvatarResult(status="error", error="HeyGen response missing video_id")
    return AvatarResult(
        status="processing",
        video_id=str(video_id),
        message="Video is being generated, check back in 1-2 minutes",
    )


__all__ = ["AvatarResult", "HEYGEN_GENERATE_URL", "generate_avatar"]
