from typing import Optional, Union

from pydantic import BaseModel, Field


class CaddieAdviceRequest(BaseModel):
    userName: Optional[str] = None
    course: Optional[str] = None
    hole: Optional[Union[int, str]] = None
    distance: Optional[Union[int, float, str]] = None
    club: Optional[str] = None


class CaddieAdviceResponse(BaseModel):
    advice: str
    recommendation: str
    keyThought: str
    avatarVideoUrl: Optional[str] = None
    provider: str = Field(..., description="provider that produced the advice")


class SwingAnalysisRequest(BaseModel):
    userName: Optional[str] = None
    course: Optional[str] = None
    hole: Optional[Union[int, str]] = None


class SwingAnalysisResponse(BaseModel):
    feedback: str
    avatarVideoUrl: Optional[str] = None
    provider: str
