"""
Gemini API access for the analysis service.
Builds the client and performs the single image + prompt generation call.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types

from backend.ai_service.prompts import ANALYSIS_PROMPT
from backend.gateway.config import ServerConfig

logger = logging.getLogger(__name__)


def build_client(config: ServerConfig) -> Optional[genai.Client]:
    """
    Create the Gemini client for this process.

    Args:
        config (ServerConfig): Server configuration holding the API key.

    Returns:
        genai.Client: A ready client, or None when no key is configured.
    """
    if not config.has_key:
        return None
    return genai.Client(api_key=config.gemini_api_key)


def extract_text(response: types.GenerateContentResponse) -> str:
    """
    Return the text of the first part of the first candidate, or "".
    """
    candidates = response.candidates or []
    if not candidates:
        feedback = getattr(response, "prompt_feedback", None)
        logger.warning(f"Gemini returned no candidates (prompt_feedback={feedback})")
        return ""

    content = candidates[0].content
    if content is None or not content.parts:
        logger.warning(f"Gemini candidate has no content (finish_reason={candidates[0].finish_reason})")
        return ""

    return content.parts[0].text or ""


def request_analysis(client: genai.Client, config: ServerConfig, image_data: bytes, media_type: str) -> str:
    """
    Send one food image to Gemini and return the generated text.

    Args:
        client (genai.Client): Configured Gemini client.
        config (ServerConfig): Supplies the model and generation settings.
        image_data (bytes): Decoded image bytes.
        media_type (str): MIME type of the image, e.g. "image/jpeg".

    Returns:
        str: The reply text, possibly empty.

    Raises:
        google.genai.errors.APIError: If Gemini rejects the call.
    """
    response = client.models.generate_content(
        model=config.gemini_model,
        contents=[
            types.Part.from_bytes(data=image_data, mime_type=media_type),
            types.Part.from_text(text=ANALYSIS_PROMPT)
        ],
        config=types.GenerateContentConfig(
            temperature=config.temperature,
            max_output_tokens=config.max_output_tokens
        )
    )
    return extract_text(response)
