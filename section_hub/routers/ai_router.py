# /section_hub/routers/ai_router.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import AIServiceError
from ..models.ai_model import GenerateRequest, GenerateResponse, PaymentVerificationRequest
from ..services import ai_service
from ..services.gemini_service import GeminiService, get_gemini_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ai/generate", response_model=GenerateResponse, summary="Generate Text from a Prompt")
async def generate(request: GenerateRequest, gemini: GeminiService = Depends(get_gemini_service)):
    if not request.prompt:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required")
    try:
        text = await ai_service.generate_response(request.prompt, gemini)
    except AIServiceError as e:
        logger.error("AI Generation Error: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to generate AI response.")
    return {"text": text}


@router.post(
    "/verify-payment",
    response_model=GenerateResponse,
    summary="Verify a Fee Payment Screenshot",
    description="Asks the vision model to compare a payment screenshot against the expected amount and recipient.",
)
async def verify_payment(request: PaymentVerificationRequest, gemini: GeminiService = Depends(get_gemini_service)):
    if not request.mimeType or not request.imageData or not request.studentDetails:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing data for verification.")
    try:
        text = await ai_service.verify_payment(request.mimeType, request.imageData, request.studentDetails, gemini)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AIServiceError as e:
        logger.error("Payment Verification Error: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to verify payment.")
    return {"text": text}
