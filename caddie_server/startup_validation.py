from __future__ import annotations

from typing import List

from caddie_server.config import get_settings


def validate_startup() -> None:
    """Fail fast on missing critical configuration."""

    settings = get_settings()
    errors: List[str] = []

    if settings.heygen_enabled and not settings.heygen_configured:
        errors.append(
            "HEYGEN_API_KEY and HEYGEN_AVATAR_ID must be set when HEYGEN_ENABLED=1"
        )

    if settings.is_strict:
        if (
            settings.caddie_provider.strip().lower() != "mock"
            and not settings.openai_configured
        ):
            errors.append("OPENAI_API_KEY must be set unless CADDIE_PROVIDER=mock")
        if not settings.course_data_path.is_file():
            errors.append(
                f"COURSE_DATA_PATH does not point to a file: {settings.course_data_path}"
            )

    if errors:
        joined = "; ".join(errors)
        raise RuntimeError(f"Startup validation failed: {joined}")


__all__ = ["validate_startup"]
