"""
Shape of the analysis document the model is asked to return.
Nothing here is enforced at runtime; the parsed reply is relayed as-is.
"""

from typing import Dict, List, TypedDict

COMPATIBILITY_VALUES = ["compatible", "incompatible", "moderate"]
DOSHA_EFFECT_VALUES = ["increases", "neutral", "decreases"]
DOSHAS = ["vata", "pitta", "kapha"]


class AnalysisResult(TypedDict):
    identified_foods: List[str]
    compatibility: str  # one of COMPATIBILITY_VALUES
    compatibility_score: int  # 0-100
    verdict_title: str
    verdict_subtitle: str
    dosha_effects: Dict[str, str]  # DOSHAS -> DOSHA_EFFECT_VALUES
    dosha_notes: str
    ayurveda_analysis: str
    cautions: List[str]
    suggestions: List[str]
