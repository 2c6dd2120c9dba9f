"""Process-wide course catalog."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Optional

from caddie_server.config import get_settings
from caddie_server.metrics import record_course_catalog

from .loader import load_course_catalog
from .models import CourseCatalog

_LOG = logging.getLogger(__name__)

_CATALOG: Optional[CourseCatalog] = None
_LOCK = Lock()


def init_course_catalog() -> CourseCatalog:
    """Load the configured course document, replacing any cached catalog."""

    global _CATALOG
    settings = get_settings()
    catalog = load_course_catalog(settings.course_data_path)
    with _LOCK:
        _CATALOG = catalog
    record_course_catalog(catalog.source, catalog.hole_count)
    _LOG.info(
        "course catalog ready: source=%s courses=%s",
        catalog.source,
        catalog.course_names,
    )
    return catalog


def get_course_catalog() -> CourseCatalog:
    """FastAPI dependency returning the loaded catalog, loading it on first use."""

    global _CATALOG
    with _LOCK:
        if _CATALOG is not None:
            return _CATALOG
        settings = get_settings()
        _CATALOG = load_course_catalog(settings.course_data_path)
        record_course_catalog(_CATALOG.source, _CATALOG.hole_count)
        return _CATALOG


def reset_course_catalog() -> None:
    global _CATALOG
    with _LOCK:
        _CATALOG = None


__all__ = ["get_course_catalog", "init_course_catalog", "reset_course_catalog"]
