from typing import Optional

from pydantic import BaseModel


class TextToSpeechRequest(BaseModel):
    text: Optional[str] = None
    voice: Optional[str] = None
    speed: Optional[float] = None
    pitch: Optional[float] = None
    cleanText: bool = True
