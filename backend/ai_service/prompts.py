"""
Prompt sent alongside every food image.
"""

import json

from backend.ai_service.models import COMPATIBILITY_VALUES, DOSHA_EFFECT_VALUES, DOSHAS

# Example document embedded in the prompt so the model copies its shape.
EXAMPLE_RESULT = {
    "identified_foods": ["food1", "food2"],
    "compatibility": COMPATIBILITY_VALUES[0],
    "compatibility_score": 75,
    "verdict_title": "4-6 word verdict",
    "verdict_subtitle": "One sentence explanation",
    "dosha_effects": dict(zip(DOSHAS, DOSHA_EFFECT_VALUES)),
    "dosha_notes": "1-2 sentence dosha note",
    "ayurveda_analysis": "3-5 sentence Ayurvedic analysis based on Viruddha Ahara, Rasa, Virya, Vipaka principles",
    "cautions": ["caution1", "caution2"],
    "suggestions": ["tip1", "tip2", "tip3"]
}


def _quoted(values) -> str:
    quoted = [f'"{v}"' for v in values]
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"


ANALYSIS_PROMPT = f"""You are an expert Ayurvedic nutritionist with deep knowledge of Charaka Samhita, Ashtanga Hridayam, and Sushruta Samhita. Analyze the food items in this image.

Respond ONLY with valid JSON and nothing else (no markdown, no code blocks, no extra text):
{json.dumps(EXAMPLE_RESULT, indent=2)}

compatibility must be exactly one of: {_quoted(COMPATIBILITY_VALUES)}.
Each dosha effect must be exactly one of: {_quoted(DOSHA_EFFECT_VALUES)}.
Score 0-100. If you cannot clearly see food, do your best based on what is visible."""
