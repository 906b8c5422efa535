"""
AI service routes: Ayurvedic food-compatibility analysis of a food photo.
Forwards the image to Gemini and relays the parsed JSON verdict.
"""

import base64
import binascii
import logging
from typing import Any, Dict, Tuple

from flask import Blueprint, request, jsonify, Response, current_app
from google.genai.errors import APIError
from werkzeug.exceptions import HTTPException

from backend.ai_service.gemini_client import request_analysis
from backend.ai_service.parsing import decode_analysis

logger = logging.getLogger(__name__)

# --- BLUEPRINT SETUP ---
ai_blueprint = Blueprint('ai', __name__)

DEFAULT_MEDIA_TYPE = "image/jpeg"


def strip_data_url_prefix(b64: str) -> str:
    """
    Drop a data URL prefix, e.g. "data:image/png;base64,iVBOR..." -> "iVBOR...".
    """
    s = b64.strip()
    if "base64," in s:
        return s.split("base64,", 1)[-1].strip()
    if s.startswith("data:") and "," in s:
        return s.split(",", 1)[-1].strip()
    return s


def decode_image(b64: str) -> bytes:
    """
    Decode base64 image text, ignoring embedded whitespace.

    Raises:
        binascii.Error: If the text is not valid base64.
    """
    compact = "".join(b64.split())
    return base64.b64decode(compact, validate=True)


# --- ROUTES ---

@ai_blueprint.route('/analyze', methods=['POST'])
def handle_analyze() -> Tuple[Response, int]:
    """
    Analyze the food in an uploaded image.

    Expects:
    - imageBase64 (str): Base64 image data, optionally as a data URL.
    - mediaType (str, optional): Image MIME type, defaults to image/jpeg.

    Returns:
        200: Analysis document produced by the model.
        400: Missing or undecodable image, or a non-string mediaType.
        500: Missing API key, empty or unparseable model reply, other errors.
        4xx/5xx: Gemini's own status when it rejects the call.
    """
    config = current_app.config["SERVER_CONFIG"]
    client = current_app.extensions.get("gemini_client")

    if not config.has_key or client is None:
        logger.error("Analyze rejected: GEMINI_API_KEY not set")
        return jsonify({"error": "GEMINI_API_KEY not set on server"}), 500

    try:
        data: Dict[str, Any] = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            data = {}

        image_b64 = data.get("imageBase64")
        media_type = data.get("mediaType") or DEFAULT_MEDIA_TYPE

        if not image_b64:
            logger.warning("Analyze rejected: imageBase64 missing")
            return jsonify({"error": "imageBase64 is required"}), 400
        if not isinstance(image_b64, str):
            logger.warning(f"Analyze rejected: imageBase64 is {type(image_b64).__name__}")
            return jsonify({"error": "imageBase64 must be a base64 string"}), 400
        if not isinstance(media_type, str):
            logger.warning(f"Analyze rejected: mediaType is {type(media_type).__name__}")
            return jsonify({"error": "mediaType must be a string"}), 400

        image_b64 = strip_data_url_prefix(image_b64)
        if not image_b64:
            logger.warning("Analyze rejected: imageBase64 empty after data URL prefix")
            return jsonify({"error": "imageBase64 is required"}), 400

        try:
            image_data = decode_image(image_b64)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Rejected undecodable image: {e}")
            return jsonify({"error": "imageBase64 is not valid base64"}), 400

        logger.info(f"Analyzing image ({len(image_data)} bytes, {media_type})")

        try:
            text = request_analysis(client, config, image_data, media_type)
        except APIError as e:
            # Pass Gemini's status and message straight through
            status = e.code or 500
            message = e.message or "Gemini API error"
            logger.error(f"Gemini API error {status}: {message}")
            return jsonify({"error": message}), status

        if not text:
            logger.error("Empty response from Gemini")
            return jsonify({"error": "Empty response from Gemini"}), 500

        result = decode_analysis(text)
        if not result.ok:
            logger.error(f"Could not parse Gemini reply as JSON: {result.error}")
            return jsonify({"error": result.error}), 500

        return jsonify(result.payload), 200

    except HTTPException:
        # Framework errors such as 413 are rendered by the app-level handler
        raise

    except Exception as e:
        logger.exception("Analyze Error")
        return jsonify({"error": str(e) or "Internal server error"}), 500
