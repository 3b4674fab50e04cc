"""
Parsing der LLM-Antworten für das Kriterien-Feedback.

Anders als bei heuristischen Auswertungen gibt es hier KEINEN Fallback:
alles, was nicht exakt zum Schema passt (kein JSON, fehlende Felder,
Rating außerhalb der vier erlaubten Werte), ist ein UpstreamProtocolError.
Der Roh-Output bleibt im Fehler erhalten.
"""

import json
import logging
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from writecheck.models.pydantic import AnalysisResult, QuickFeedback
from writecheck.services.errors import UpstreamProtocolError

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*\n?", re.IGNORECASE)

ModelT = TypeVar("ModelT", bound=BaseModel)


def strip_code_fences(raw_text: str) -> str:
    return _CODE_FENCE.sub("", raw_text).strip()


def extract_json_object(raw_text: str) -> dict[str, Any]:
    """
    Sucht das JSON-Objekt im Text (kann von Markdown umgeben sein).

    Raises:
        UpstreamProtocolError: kein parsebares JSON-Objekt gefunden
    """
    cleaned = strip_code_fences(raw_text)
    start = cleaned.find("{")
    end = cleaned.rfind("}") + 1
    if start == -1 or end <= start:
        logger.error("LLM response contains no JSON object: %r", raw_text)
        raise UpstreamProtocolError("Invalid JSON response from OpenAI", raw=raw_text)

    try:
        data = json.loads(cleaned[start:end])
    except json.JSONDecodeError as e:
        logger.error("Failed to parse LLM response: %r", raw_text)
        raise UpstreamProtocolError("Invalid JSON response from OpenAI", raw=raw_text) from e

    if not isinstance(data, dict):
        raise UpstreamProtocolError("Invalid JSON response from OpenAI", raw=raw_text)
    return data


def _require_list(data: dict[str, Any], key: str, raw_text: str) -> None:
    if not isinstance(data.get(key), list):
        logger.error("LLM response misses %r array: %r", key, raw_text)
        raise UpstreamProtocolError(
            f"Invalid response structure: missing {key} array",
            raw=raw_text,
        )


def _validate(model: type[ModelT], data: dict[str, Any], raw_text: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("LLM response does not match %s schema: %s", model.__name__, e)
        raise UpstreamProtocolError(
            f"Invalid response structure: {e.error_count()} schema violation(s)",
            raw=raw_text,
        ) from e


def parse_analysis_result(raw_text: str) -> AnalysisResult:
    """
    Parst die Kriterien-Antwort.

    Ein unbekanntes Rating (z.B. "Good") wird NICHT auf einen Default gemappt,
    sondern als Protokollfehler gemeldet.
    """
    data = extract_json_object(raw_text)
    _require_list(data, "criteria", raw_text)
    _require_list(data, "summary", raw_text)
    return _validate(AnalysisResult, data, raw_text)


def parse_quick_feedback(raw_text: str) -> QuickFeedback:
    data = extract_json_object(raw_text)
    return _validate(QuickFeedback, data, raw_text)
