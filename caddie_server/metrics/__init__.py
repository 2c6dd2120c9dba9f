"""Prometheus metrics for the caddie service."""

from __future__ import annotations

import os
import time
from typing import Any, Awaitable, Callable

from fastapi import Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()
HTTP_REQUESTS = Counter(
    "caddie_http_requests_total",
    "HTTP requests handled",
    ["route", "method", "status"],
    registry=REGISTRY,
)
HTTP_LATENCY = Histogram(
    "caddie_http_request_latency_seconds",
    "HTTP request latency (seconds)",
    ["route", "method"],
    registry=REGISTRY,
)
PROVIDER_CALLS = Counter(
    "caddie_provider_calls_total",
    "Outbound provider calls by outcome",
    ["provider", "outcome"],
    registry=REGISTRY,
)
COURSE_HOLES = Gauge(
    "caddie_course_holes",
    "Holes in the loaded course catalog",
    ["source"],
    registry=REGISTRY,
)

BUILD_VERSION = os.getenv("BUILD_VERSION", "dev")
GIT_SHA = os.getenv("GIT_SHA", "unknown")

_SERVICE_PREFIXES = ("/api/", "/health", "/metrics")


async def metrics_app(_req: Request | None = None) -> Response:
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


def record_provider_call(provider: str, outcome: str) -> None:
    PROVIDER_CALLS.labels(provider=provider, outcome=outcome).inc()


def record_course_catalog(source: str, hole_count: int) -> None:
    COURSE_HOLES.clear()
    COURSE_HOLES.labels(source=source).set(hole_count)


def _route_label(scope: dict[str, Any]) -> str:
    """Matched route template, or a fixed label for paths no route matched."""

    template = getattr(scope.get("route"), "path", None)
    if template:
        return template
    if scope.get("path", "").startswith(_SERVICE_PREFIXES):
        return "unmatched"
    return "static"


class MetricsMiddleware:
    def __init__(self, app: Callable[..., Awaitable[Any]]):
        self.app = app

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[..., Awaitable[Any]],
        send: Callable[..., Awaitable[Any]],
    ) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "GET")
        started = time.perf_counter()
        status_code = 500

        async def _send(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status", 200)
            await send(message)

        try:
            await self.app(scope, receive, _send)
        finally:
            route = _route_label(scope)
            HTTP_LATENCY.labels(route=route, method=method).observe(
                time.perf_counter() - started
            )
            HTTP_REQUESTS.labels(
                route=route, method=method, status=str(status_code)
            ).inc()


__all__ = [
    "BUILD_VERSION",
    "COURSE_HOLES",
    "GIT_SHA",
    "HTTP_LATENCY",
    "HTTP_REQUESTS",
    "MetricsMiddleware",
    "PROVIDER_CALLS",
    "REGISTRY",
    "metrics_app",
    "record_course_catalog",
    "record_provider_call",
]
