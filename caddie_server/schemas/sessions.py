from typing import Optional, Union

from pydantic import BaseModel


class SaveUserRequest(BaseModel):
    userName: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    course: Optional[str] = None
    hole: Optional[Union[int, str]] = None


class SaveUserResponse(BaseModel):
    sessionId: str
    message: str = "User data saved"
