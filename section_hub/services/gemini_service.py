# /section_hub/services/gemini_service.py

import logging
from functools import lru_cache
from typing import List, Optional

import google.generativeai as genai
from google.generativeai.types import GenerationConfig
from PIL import Image

from ..core.config import settings
from ..core.exceptions import AIServiceError

logger = logging.getLogger(__name__)


class GeminiService:
    """
    Thin wrapper around the Gemini SDK. One instance is built per process and
    handed to the routers as a dependency, so tests can swap in a fake.
    """

    def __init__(self, api_key: str, text_model: str, vision_model: Optional[str] = None):
        if not api_key:
            raise ValueError("FATAL ERROR: GOOGLE_API_KEY environment variable is not set.")
        genai.configure(api_key=api_key)
        self.text_model = text_model
        self.vision_model = vision_model or text_model

    async def generate_text(self, prompt: str, temperature: float = 0.5) -> str:
        """The workhorse for text-only, non-streaming tasks."""
        try:
            model = genai.GenerativeModel(self.text_model)
            config = GenerationConfig(temperature=temperature)
            response = await model.generate_content_async(prompt, generation_config=config)
            if not response.parts:
                raise AIServiceError("AI model returned an empty response.")
            return response.text
        except AIServiceError:
            raise
        except Exception as e:
            logger.error("generate_text failed with Gemini API: %s", e)
            raise AIServiceError(str(e)) from e

    async def generate_multimodal_response(self, prompt: str, images: List[Image.Image], temperature: float = 0.1) -> str:
        """Sends a prompt together with a list of Pillow images."""
        try:
            model = genai.GenerativeModel(self.vision_model)
            config = GenerationConfig(temperature=temperature)
            response = await model.generate_content_async([prompt, *images], generation_config=config)
            if not response.parts:
                raise AIServiceError("AI model returned an empty response for the multi-modal request.")
            return response.text
        except AIServiceError:
            raise
        except Exception as e:
            logger.error("generate_multimodal_response failed with Gemini API (%d images): %s", len(images), e)
            raise AIServiceError(str(e)) from e


@lru_cache(maxsize=1)
def get_gemini_service() -> GeminiService:
    return GeminiService(
        api_key=settings.google_api_key,
        text_model=settings.gemini_model,
        vision_model=settings.gemini_vision_model,
    )
