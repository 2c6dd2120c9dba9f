"""Shared pytest fixtures for caddie server tests."""

from __future__ import annotations

from typing import Callable, Iterable

import httpx
import pytest
from fastapi.testclient import TestClient

from caddie_server.api.routers.caddie import get_caddie_provider
from caddie_server.app import app
from caddie_server.config import reset_settings_cache
from caddie_server.courses import CourseCatalog, parse_course_document
from caddie_server.courses.store import get_course_catalog, reset_course_catalog
from caddie_server.services import sessions
from caddie_server.services.advice.providers import MockCaddieProvider

_ENV_KEYS = (
    "APP_ENV",
    "STAGING",
    "COURSE_DATA_PATH",
    "CADDIE_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_TIMEOUT",
    "ADVICE_MAX_TOKENS",
    "ADVICE_TIMEOUT_S",
    "HEYGEN_API_KEY",
    "HEYGEN_AVATAR_ID",
    "HEYGEN_VOICE_ID",
    "HEYGEN_ENABLED",
    "AVATAR_TIMEOUT_S",
    "GOOGLE_TTS_API_KEY",
    "Google_Text_2_Audio",
    "TTS_TIMEOUT_S",
    "TTS_REQUEST_TIMEOUT_S",
)

SAMPLE_DOCUMENT = """# Course guide

### **Chateau** Course: Hole-by-Hole Analysis

| Hole | Par | Gold | Green | White | Notes | Contest Fit | Rank |
|------|-----|------|-------|-------|-------|-------------|------|
| **6** | 3 | 150 | 140 | 136 | Excellent Option. |  |  |
| **8** | 3 | 172 | 163 | 155 | Excellent Option. A longer Par 3. | Yes | 2 |
| **9** | 5 | 528 | 503 | 479 |  | No | - |

### **Woodlands** Course: Hole-by-Hole Analysis

| **2** | 3 | 195 | 184 | 172 | Excellent Option. A Par 3 early in the round. | Yes | 2 |
| **13** | 3 | 155 | 144 | 134 | Another perfectly placed Par 3. | Yes | 1 |
"""


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    reset_course_catalog()
    sessions.reset()
    yield
    app.dependency_overrides.clear()
    reset_settings_cache()
    reset_course_catalog()
    sessions.reset()


@pytest.fixture
def sample_catalog() -> CourseCatalog:
    return CourseCatalog(courses=parse_course_document(SAMPLE_DOCUMENT))


@pytest.fixture
def client(sample_catalog: CourseCatalog) -> TestClient:
    app.dependency_overrides[get_course_catalog] = lambda: sample_catalog
    app.dependency_overrides[get_caddie_provider] = MockCaddieProvider
    return TestClient(app)


@pytest.fixture
def make_client_factory() -> Callable[..., Callable[..., httpx.Client]]:
    """Build an ``_http_client_factory`` replacement serving canned responses."""

    def build(
        handlers: Iterable[Callable[[httpx.Request], httpx.Response]],
    ) -> Callable[..., httpx.Client]:
        handler_iter = iter(handlers)

        def factory(**kwargs) -> httpx.Client:
            try:
                handler = next(handler_iter)
            except StopIteration as exc:
                raise AssertionError("unexpected extra HTTP call") from exc
            transport = httpx.MockTransport(handler)
            return httpx.Client(transport=transport, timeout=kwargs.get("timeout", 10.0))

        return factory

    return build
