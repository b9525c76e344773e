from typing import Optional

from pydantic import BaseModel


class VoiceRequest(BaseModel):
    text: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
