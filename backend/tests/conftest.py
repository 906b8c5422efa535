import base64

import pytest
from google.genai import types

from backend.gateway.config import ServerConfig
from backend.gateway.server import create_app

# JPEG magic bytes plus padding; the content is never decoded as an image
FAKE_JPEG = b"\xff\xd8\xff\xe0" + b"\x00" * 16


@pytest.fixture
def config():
    return ServerConfig(gemini_api_key="test-key")


@pytest.fixture
def app(config, mocker):
    # Never build a real Gemini client in tests
    mocker.patch("backend.ai_service.gemini_client.genai.Client")
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gemini(app):
    """
    The mocked Gemini client the analyze route talks to.
    """
    return app.extensions["gemini_client"]


@pytest.fixture
def image_bytes():
    return FAKE_JPEG


@pytest.fixture
def image_b64():
    return base64.b64encode(FAKE_JPEG).decode("ascii")


@pytest.fixture
def gemini_reply():
    """
    Factory building a real Gemini response whose first part carries `text`.
    """
    def _reply(text):
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(role="model", parts=[types.Part(text=text)])
                )
            ]
        )
    return _reply


@pytest.fixture
def sample_result():
    return {
        "identified_foods": ["banana", "milk"],
        "compatibility": "incompatible",
        "compatibility_score": 20,
        "verdict_title": "Classic Viruddha Ahara pairing",
        "verdict_subtitle": "Banana with milk is considered an incompatible combination.",
        "dosha_effects": {"vata": "neutral", "pitta": "increases", "kapha": "increases"},
        "dosha_notes": "Heavy and mucus-forming, aggravates Kapha.",
        "ayurveda_analysis": "Banana is sour in Vipaka while milk is sweet. Together they dampen Agni.",
        "cautions": ["May cause congestion", "Avoid in the evening"],
        "suggestions": ["Eat them separately", "Add cardamom", "Prefer ripe mango with milk"]
    }
