"""In-memory store for user sessions captured by the front-end."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional


@dataclass
class UserSession:
    session_id: str
    user_name: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    course: Optional[str]
    hole: Optional[str]
    timestamp: datetime


_STORE: Dict[str, UserSession] = {}
_LOCK = Lock()


def _now_ms() -> int:
    return int(time.time() * 1000)


def save(
    *,
    user_name: Optional[str] = None,
    phone: Optional[str] = None,
    email: Optional[str] = None,
    course: Optional[str] = None,
    hole: Optional[str] = None,
) -> UserSession:
    """Persist a session keyed by its creation time in milliseconds."""

    with _LOCK:
        stamp = _now_ms()
        while str(stamp) in _STORE:
            stamp += 1
        session = UserSession(
            session_id=str(stamp),
            user_name=user_name,
            phone=phone,
            email=email,
            course=course,
            hole=hole,
            timestamp=datetime.now(timezone.utc),
        )
        _STORE[session.session_id] = session
        return session


def get(session_id: str) -> Optional[UserSession]:
    with _LOCK:
        return _STORE.get(session_id)


def reset() -> None:
    with _LOCK:
        _STORE.clear()


__all__ = ["UserSession", "get", "reset", "save"]
