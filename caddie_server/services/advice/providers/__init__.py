"""Caddie advice provider implementations."""

from .base import CaddieProvider, CaddieProviderError, CaddieProviderTimeout
from .mock_provider import MockCaddieProvider
from .openai_provider import OpenAICaddieProvider

__all__ = [
    "CaddieProvider",
    "CaddieProviderError",
    "CaddieProviderTimeout",
    "MockCaddieProvider",
    "OpenAICaddieProvider",
]
