from __future__ import annotations

import abc


class CaddieProviderError(Exception):
    """Base error raised by caddie advice providers."""


class CaddieProviderTimeout(CaddieProviderError):
    """Raised when a provider exceeds its timeout budget."""


class CaddieProvider(abc.ABC):
    """Interface for language-model backed caddie advice."""

    name: str = "provider"

    @abc.abstractmethod
    def generate(self, prompt: str, *, max_tokens: int = 150) -> str:
        """Return advice text for ``prompt``."""
