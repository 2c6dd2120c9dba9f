"""Google Cloud Text-to-Speech synthesis.

Every failure mode resolves to a result with ``fallback=True`` so the browser
can fall back to its own speech synthesis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from caddie_server.config import get_settings

_LOG = logging.getLogger(__name__)

GOOGLE_TTS_URL = "https://texttospeech.googleapis.com/v1/text:synthesize"
DEFAULT_VOICE = "en-US-Neural2-F"


@dataclass
class SpeechResult:
    fallback: bool
    message: str
    success: bool = False
    audio_content: Optional[str] = None
    voice: Optional[str] = None
    format: Optional[str] = None
    error: Optional[str] = None

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"fallback": self.fallback, "message": self.message}
        if self.success:
            payload.update(
                success=True,
                audioContent=self.audio_content,
                voice=self.voice,
                format=self.format,
            )
        if self.error is not None:
            payload["error"] = self.error
        return payload


def _http_client_factory(**kwargs: Any) -> httpx.Client:
    timeout = kwargs.pop("timeout", 10.0)
    return httpx.Client(timeout=timeout, **kwargs)


def build_request(
    text: str,
    voice: Optional[str] = None,
    speed: Optional[float] = None,
    pitch: Optional[float] = None,
) -> Dict[str, Any]:
    return {
        "input": {"text": text},
        "voice": {
            "languageCode": "en-US",
            "name": voice or DEFAULT_VOICE,
            "ssmlGender": "FEMALE",
        },
        "audioConfig": {
            "audioEncoding": "MP3",
            "speakingRate": speed or 1.0,
            "pitch": pitch or 0.0,
            "volumeGainDb": 0.0,
            "sampleRateHertz": 22050,
        },
    }


def synthesize_speech(
    text: str,
    *,
    voice: Optional[str] = None,
    speed: Optional[float] = None,
    pitch: Optional[float] = None,
) -> SpeechResult:
    settings = get_settings()
    if not settings.google_tts_configured:
        _LOG.info("Google TTS API key not configured, using fallback")
        return SpeechResult(
            fallback=True, message="Google TTS not configured, use browser fallback"
        )

    request = build_request(text, voice, speed, pitch)
    voice_name = request["voice"]["name"]
    _LOG.info("sending Google TTS request with voice %s", voice_name)
    try:
        with _http_client_factory(timeout=settings.tts_request_timeout_s) as client:
            response = client.post(
                GOOGLE_TTS_URL,
                params={"key": settings.google_tts_api_key},
                json=request,
            )
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as exc:
        _LOG.error(
            "Google TTS API error: %s %s",
            exc.response.status_code,
            exc.response.text,
        )
        return _unavailable(exc, settings.is_development)
    except (httpx.HTTPError, ValueError) as exc:
        _LOG.error("Google TTS error: %s", exc)
        return _unavailable(exc, settings.is_development)

    audio = data.get("audioContent") if isinstance(data, dict) else None
    if not audio:
        _LOG.warning("Google TTS returned no audio content")
        return SpeechResult(
            fallback=True, message="Google TTS returned no audio, use browser fallback"
        )
    return SpeechResult(
        fallback=False,
        success=True,
        message="Google TTS synthesis complete",
        audio_content=audio,
        voice=voice_name,
        format="mp3",
    )


def _unavailable(exc: Exception, expose_error: bool) -> SpeechResult:
    return SpeechResult(
        fallback=True,
        message="Google TTS unavailable, use browser fallback",
        error=str(exc) if expose_error else None,
    )


__all__ = [
    "DEFAULT_VOICE",
    "GOOGLE_TTS_URL",
    "SpeechResult",
    "build_request",
    "synthesize_speech",
]
