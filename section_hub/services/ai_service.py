# /section_hub/services/ai_service.py

"""
Business logic for the two AI endpoints: free-text generation and payment
screenshot verification. Both delegate the model call to GeminiService.
"""

import base64
import binascii
import io
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..models.ai_model import StudentPaymentDetails
from .gemini_service import GeminiService
from .prompt_library import PAYMENT_VERIFICATION_PROMPT

# Same ceiling the browser client was built against for JSON request bodies.
MAX_SCREENSHOT_BYTES = 10 * 1024 * 1024


async def generate_response(prompt: str, gemini: GeminiService) -> str:
    return await gemini.generate_text(prompt)


def decode_payment_screenshot(mime_type: str, image_data: str) -> Image.Image:
    """
    Turns the base64 payload sent by the browser into a Pillow image.
    Accepts both bare base64 and a `data:<mime>;base64,` URL.

    Raises:
        ValueError: if the MIME type is not an image, the payload is too large,
            or the bytes are not a readable image.
    """
    if not mime_type.startswith("image/"):
        raise ValueError(f"Unsupported file type for verification: {mime_type}")

    if image_data.startswith("data:") and "," in image_data:
        image_data = image_data.split(",", 1)[1]

    if len(image_data) > MAX_SCREENSHOT_BYTES:
        raise ValueError("Image data exceeds the 10 MB limit.")

    try:
        raw_bytes = base64.b64decode(image_data, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Image data is not valid base64.")

    try:
        image = Image.open(io.BytesIO(raw_bytes))
        image.load()
    except Image.DecompressionBombError:
        raise ValueError("Image dimensions are too large to verify.")
    except (UnidentifiedImageError, OSError):
        raise ValueError("Image data could not be read as an image.")
    return image


def build_verification_prompt(details: StudentPaymentDetails) -> str:
    return PAYMENT_VERIFICATION_PROMPT.format(
        student_name=details.name or "Unknown",
        expected_amount=_format_amount(details.expectedAmount),
        expected_recipient=details.expectedRecipient or "Unknown",
    )


def _format_amount(amount: Optional[float]) -> str:
    if amount is None:
        return "Unknown"
    return str(int(amount)) if float(amount).is_integer() else str(amount)


async def verify_payment(mime_type: str, image_data: str, details: StudentPaymentDetails, gemini: GeminiService) -> str:
    image = decode_payment_screenshot(mime_type, image_data)
    prompt = build_verification_prompt(details)
    return await gemini.generate_multimodal_response(prompt, [image])
