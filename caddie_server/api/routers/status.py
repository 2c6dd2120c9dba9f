from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from caddie_server.config import get_settings
from caddie_server.courses import CourseCatalog
from caddie_server.courses.store import get_course_catalog

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/test")
def api_status(catalog: CourseCatalog = Depends(get_course_catalog)) -> Dict[str, Any]:
    """Report course data and provider configuration for smoke tests."""
    settings = get_settings()
    return {
        "status": "API is working",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "courseDataLoaded": len(catalog.courses) > 0,
        "courseDataSource": catalog.source,
        "availableCourses": catalog.course_names,
        "openaiConfigured": settings.openai_configured,
        "heygenConfigured": settings.heygen_configured,
        "googleTtsConfigured": settings.google_tts_configured,
    }


__all__ = ["router"]
