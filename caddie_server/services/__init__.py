"""Service layer exports."""

from . import advice, avatar, sessions, speech, speech_text

__all__ = ["advice", "avatar", "sessions", "speech", "speech_text"]
