from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from caddie_server.api.health import health as _health_handler
from caddie_server.api.routers.caddie import router as caddie_router
from caddie_server.api.routers.courses import router as courses_router
from caddie_server.api.routers.sessions import router as sessions_router
from caddie_server.api.routers.speech import router as speech_router
from caddie_server.api.routers.status import router as status_router
from caddie_server.config import cors_origins, get_settings
from caddie_server.courses.store import init_course_catalog
from caddie_server.metrics import MetricsMiddleware, metrics_app
from caddie_server.startup_validation import validate_startup

_LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    validate_startup()
    init_course_catalog()
    _LOG.info("AI golf caddie server ready")
    yield


app = FastAPI(title="AI Golf Caddie", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)

app.include_router(caddie_router)
app.include_router(courses_router)
app.include_router(speech_router)
app.include_router(sessions_router)
app.include_router(status_router)
app.add_api_route(
    "/health",
    _health_handler,
    methods=["GET"],
    response_model=None,
    tags=["health"],
)


_metrics_router = APIRouter()


@_metrics_router.get("/metrics", include_in_schema=False)
async def _metrics_endpoint(request: Request):
    return await metrics_app(request)


app.include_router(_metrics_router)


_settings = get_settings()
if _settings.serve_web and _settings.web_dir.is_dir():
    app.mount("/", StaticFiles(directory=str(_settings.web_dir), html=True), name="web")
