from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Rating(str, Enum):
    """
    Geschlossene Bewertungsskala des LLM-Dienstes.
    Kein Default: unbekannte Werte sind ein Protokollfehler.
    """

    EXCEEDING = "Exceeding"
    ACCOMPLISHED = "Accomplished"
    DEVELOPING = "Developing"
    NOT_EVIDENT = "Not Evident"


class CriterionFeedback(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    criterion_number: int = Field(alias="criterionNumber")
    criterion: str
    rating: Rating
    feedback: str


class AnalysisResult(BaseModel):
    """
    Ergebnis eines einzelnen AI-Calls. Wird nie mit früheren Ergebnissen
    zusammengeführt.
    """

    criteria: list[CriterionFeedback]
    summary: list[str]


class QuickFeedback(BaseModel):
    impression: str
    strengths: list[str]
    improvements: list[str]


class DraftRequest(BaseModel):
    """
    Request-Body für /analysis und /quick-check.
    """

    draft: str = ""


class AnalyseRequest(BaseModel):
    """
    Request-Body für den /analyse-Endpoint.
    Inhaltliche Validierung (leer, >15 Kriterien, ...) macht der FeedbackService.
    """

    draft: Any = ""
    criteria: Any = None


class AnalyseResponse(BaseModel):
    success: bool = True
    data: AnalysisResult


class QuickCheckResponse(BaseModel):
    success: bool = True
    data: QuickFeedback


class ReportRequest(BaseModel):
    draft: str
    result: AnalysisResult


class WorkspaceState(BaseModel):
    draft: str = ""
    criteria: list[str] = Field(default_factory=list)
    timestamp: str | None = None


class ThemePreference(BaseModel):
    theme: Literal["light", "dark"] = "light"
