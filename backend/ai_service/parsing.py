"""
Decoding of the model's reply text.

The Gemini envelope carries free text that is itself supposed to be a JSON
document. The model sometimes wraps it in markdown code fences, so those
are removed before parsing. Parsing never raises: the caller gets a tagged
result and decides how to report a failure.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

# Every ```json and ``` marker, wherever it appears.
CODE_FENCE_PATTERN = re.compile(r"```json|```")


@dataclass(frozen=True)
class AnalysisDecodeResult:
    payload: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code fence markers and surrounding whitespace.

    Args:
        text (str): Raw reply text from the model.

    Returns:
        str: The text with every ```json / ``` marker removed, trimmed.
    """
    return CODE_FENCE_PATTERN.sub("", text).strip()


def decode_analysis(text: str) -> AnalysisDecodeResult:
    """
    Parse the model's reply into the analysis document.

    No schema check is applied; any valid JSON value is accepted.

    Args:
        text (str): Raw reply text from the model.

    Returns:
        AnalysisDecodeResult: payload on success, error message otherwise.
    """
    clean = strip_code_fences(text)
    try:
        return AnalysisDecodeResult(payload=json.loads(clean))
    except json.JSONDecodeError as e:
        return AnalysisDecodeResult(error=str(e))
