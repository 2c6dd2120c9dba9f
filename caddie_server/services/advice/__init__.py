"""Language-model backed caddie advice."""

from .service import (
    DEFAULT_KEY_THOUGHT,
    FALLBACK_TEXT,
    ShotContext,
    build_advice_prompt,
    build_swing_prompt,
    generate_advice,
    split_advice,
)

__all__ = [
    "DEFAULT_KEY_THOUGHT",
    "FALLBACK_TEXT",
    "ShotContext",
    "build_advice_prompt",
    "build_swing_prompt",
    "generate_advice",
    "split_advice",
]
