from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from caddie_server.config import get_settings
from caddie_server.metrics import record_provider_call
from caddie_server.schemas.speech import TextToSpeechRequest
from caddie_server.services.speech import synthesize_speech
from caddie_server.services.speech_text import clean_text_for_speech

_LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["speech"])


@router.post("/text-to-speech")
async def text_to_speech(req: TextToSpeechRequest) -> Dict[str, Any]:
    text = req.text or ""
    if req.cleanText:
        text = clean_text_for_speech(text)
    if not text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid text input",
                "fallback": True,
                "message": "Text is required for speech synthesis",
            },
        )

    timeout = get_settings().tts_timeout_s
    try:
        result = await asyncio.wait_for(
            run_in_threadpool(
                synthesize_speech,
                text,
                voice=req.voice,
                speed=req.speed,
                pitch=req.pitch,
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        _LOG.error("Google TTS request timed out after %.1fs", timeout)
        record_provider_call("google_tts", "timeout")
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail={
                "error": "Request timed out",
                "fallback": True,
                "message": "Google TTS took too long, use browser fallback",
            },
        ) from exc

    record_provider_call("google_tts", "ok" if result.success else "fallback")
    return result.as_payload()


__all__ = ["router"]
