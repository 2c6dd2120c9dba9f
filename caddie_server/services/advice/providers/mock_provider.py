from __future__ import annotations

from .base import CaddieProvider


class MockCaddieProvider(CaddieProvider):
    """Deterministic mock provider for local development and tests."""

    name = "mock"

    _TEXT = (
        "Take one more club than the yardage suggests and swing at 80 percent. "
        "Pick a small target on the fat side of the green and commit to it. "
        "Keep your tempo smooth and hold your finish."
    )

    def generate(self, prompt: str, *, max_tokens: int = 150) -> str:
        return self._TEXT
