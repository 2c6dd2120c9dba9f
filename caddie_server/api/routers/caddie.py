from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from caddie_server.config import get_settings
from caddie_server.courses import CourseCatalog, find_hole
from caddie_server.courses.store import get_course_catalog
from caddie_server.metrics import record_provider_call
from caddie_server.schemas.caddie import (
    CaddieAdviceRequest,
    CaddieAdviceResponse,
    SwingAnalysisRequest,
    SwingAnalysisResponse,
)
from caddie_server.services.advice import (
    ShotContext,
    build_advice_prompt,
    build_swing_prompt,
    generate_advice,
    split_advice,
)
from caddie_server.services.advice.providers import CaddieProvider
from caddie_server.services.advice.service import provider_from_settings
from caddie_server.services.avatar import generate_avatar

_LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["caddie"])

_TEST_SHOT = ShotContext(
    user_name="Test Player", course="Chateau", hole="6", distance="145", club="8-iron"
)


def get_caddie_provider() -> CaddieProvider:
    return provider_from_settings()


def _timed_out(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        detail={"error": "Request timed out", "message": message},
    )


def _record_advice(provider: CaddieProvider, produced_by: str) -> None:
    outcome = "fallback" if produced_by == "fallback" else "ok"
    record_provider_call(getattr(provider, "name", "provider"), outcome)


async def _avatar_video_url(text: str) -> Optional[str]:
    timeout = get_settings().avatar_timeout_s
    try:
        result = await asyncio.wait_for(
            run_in_threadpool(generate_avatar, text), timeout=timeout
        )
    except asyncio.TimeoutError:
        _LOG.info("avatar generation timed out after %.1fs, skipping", timeout)
        record_provider_call("heygen", "timeout")
        return None
    record_provider_call("heygen", result.status)
    return result.video_url


async def _advise(
    shot: ShotContext, catalog: CourseCatalog, provider: CaddieProvider
) -> CaddieAdviceResponse:
    record = find_hole(catalog.courses, shot.course, shot.hole)
    _LOG.info(
        "caddie advice for %s hole %s, course data found=%s",
        shot.course,
        shot.hole,
        record is not None,
    )
    prompt = build_advice_prompt(shot, record)
    result = await run_in_threadpool(generate_advice, prompt, provider=provider)
    _record_advice(provider, result["provider"])

    advice = result["text"]
    recommendation, key_thought = split_advice(advice)
    return CaddieAdviceResponse(
        advice=advice,
        recommendation=recommendation,
        keyThought=key_thought,
        avatarVideoUrl=await _avatar_video_url(advice),
        provider=result["provider"],
    )


async def _analyze_swing(
    user_name: str, course: str, hole: str, provider: CaddieProvider
) -> SwingAnalysisResponse:
    prompt = build_swing_prompt(user_name, course, hole)
    result = await run_in_threadpool(generate_advice, prompt, provider=provider)
    _record_advice(provider, result["provider"])
    feedback = result["text"]
    return SwingAnalysisResponse(
        feedback=feedback,
        avatarVideoUrl=await _avatar_video_url(feedback),
        provider=result["provider"],
    )


@router.post("/caddie-advice", response_model=CaddieAdviceResponse)
async def caddie_advice(
    req: CaddieAdviceRequest,
    catalog: CourseCatalog = Depends(get_course_catalog),
    provider: CaddieProvider = Depends(get_caddie_provider),
) -> CaddieAdviceResponse:
    if not (req.userName and req.course and req.hole and req.distance and req.club):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Missing required fields",
                "message": (
                    "Please provide all required information: name, course, "
                    "hole, distance, and club."
                ),
            },
        )

    shot = ShotContext(
        user_name=req.userName,
        course=req.course,
        hole=str(req.hole),
        distance=str(req.distance),
        club=req.club,
    )
    try:
        return await asyncio.wait_for(
            _advise(shot, catalog, provider),
            timeout=get_settings().advice_timeout_s,
        )
    except asyncio.TimeoutError as exc:
        _LOG.error("caddie advice request timed out")
        raise _timed_out(
            "The analysis took too long to complete. Please try again."
        ) from exc


@router.post("/swing-analysis", response_model=SwingAnalysisResponse)
async def swing_analysis(
    req: SwingAnalysisRequest,
    provider: CaddieProvider = Depends(get_caddie_provider),
) -> SwingAnalysisResponse:
    if not (req.userName and req.course and req.hole):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Missing required fields",
                "message": "Please provide your name, course, and hole number.",
            },
        )

    try:
        return await asyncio.wait_for(
            _analyze_swing(req.userName, req.course, str(req.hole), provider),
            timeout=get_settings().advice_timeout_s,
        )
    except asyncio.TimeoutError as exc:
        _LOG.error("swing analysis request timed out")
        raise _timed_out(
            "The swing analysis took too long to complete. Please try again."
        ) from exc


@router.post("/test-caddie", response_model=CaddieAdviceResponse)
async def test_caddie(
    catalog: CourseCatalog = Depends(get_course_catalog),
    provider: CaddieProvider = Depends(get_caddie_provider),
) -> CaddieAdviceResponse:
    """Run the advice flow with a canned shot."""
    _LOG.info("testing caddie advice with %s", _TEST_SHOT)
    return await _advise(_TEST_SHOT, catalog, provider)


@router.post("/test-swing", response_model=SwingAnalysisResponse)
async def test_swing(
    provider: CaddieProvider = Depends(get_caddie_provider),
) -> SwingAnalysisResponse:
    return await _analyze_swing(
        _TEST_SHOT.user_name, _TEST_SHOT.course, _TEST_SHOT.hole, provider
    )


__all__ = ["get_caddie_provider", "router"]
