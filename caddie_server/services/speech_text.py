from __future__ import annotations

import re

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"\*(.*?)\*")
_HEADING_RE = re.compile(r"#{1,6}\s+")
_LIST_NUMBER_RE = re.compile(r"^\d+\.\s+", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text_for_speech(text: str | None) -> str:
    """Strip markdown so advice text reads naturally when spoken."""

    if not text:
        return ""
    cleaned = _BOLD_RE.sub(r"\1", text)
    cleaned = _ITALIC_RE.sub(r"\1", cleaned)
    cleaned = _HEADING_RE.sub("", cleaned)
    cleaned = cleaned.replace("*", "")
    cleaned = _LIST_NUMBER_RE.sub("", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned)
    return cleaned.strip()


__all__ = ["clean_text_for_speech"]
