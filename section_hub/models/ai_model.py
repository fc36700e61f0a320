# /section_hub/models/ai_model.py

from typing import Optional

from pydantic import BaseModel, Field

# Request fields are optional here so that a missing value is reported by the
# router with the endpoint's own 400 message instead of a validation error.


class GenerateRequest(BaseModel):
    prompt: Optional[str] = Field(default=None, description="The text prompt to send to the model.")


class GenerateResponse(BaseModel):
    text: str


class StudentPaymentDetails(BaseModel):
    name: Optional[str] = None
    expectedAmount: Optional[float] = None
    expectedRecipient: Optional[str] = None


class PaymentVerificationRequest(BaseModel):
    mimeType: Optional[str] = Field(default=None, description="MIME type of the screenshot, e.g. image/png.")
    imageData: Optional[str] = Field(default=None, description="Base64-encoded screenshot bytes.")
    studentDetails: Optional[StudentPaymentDetails] = None
