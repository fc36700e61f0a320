# /section_hub/models/messaging_model.py

from typing import Optional

from pydantic import BaseModel


class WhatsAppMessage(BaseModel):
    to: Optional[str] = None
    text: Optional[str] = None


class WhatsAppResponse(BaseModel):
    success: bool
    message: str
