from __future__ import annotations

from fastapi import APIRouter

from caddie_server.schemas.sessions import SaveUserRequest, SaveUserResponse
from caddie_server.services import sessions

router = APIRouter(prefix="/api", tags=["sessions"])


@router.post("/save-user", response_model=SaveUserResponse)
def save_user(req: SaveUserRequest) -> SaveUserResponse:
    session = sessions.save(
        user_name=req.userName,
        phone=req.phone,
        email=req.email,
        course=req.course,
        hole=str(req.hole) if req.hole is not None else None,
    )
    return SaveUserResponse(sessionId=session.session_id)


__all__ = ["router"]
