# /section_hub/routers/whatsapp_router.py

import logging

from fastapi import APIRouter, HTTPException, status

from ..models.messaging_model import WhatsAppMessage, WhatsAppResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/send",
    response_model=WhatsAppResponse,
    summary="Send a WhatsApp Message (Simulated)",
    description="No message leaves the server; the request is logged and reported as delivered.",
)
def send_message(message: WhatsAppMessage):
    if not message.to or not message.text:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='"to" and "text" fields are required.')
    logger.info("--- SIMULATING WHATSAPP MESSAGE --- To: %s Message: %s", message.to, message.text)
    return {"success": True, "message": f"Message simulation to {message.to} was successful."}
