"""
Feedback-Orchestrator: Validierung -> Prompt -> LLM-Call -> Parsing.

Pro Nutzeraktion genau ein Versuch, keine Retries. Der Service hält keinen
veränderlichen Zustand; dass nur ein Request gleichzeitig läuft, stellt die
UI sicher (Button ist während des Calls deaktiviert).
"""

import logging
from typing import Any

from writecheck.core.config import settings
from writecheck.llm.fake_client import FakeLLMClient
from writecheck.llm.llm_client import LLMClient
from writecheck.llm.openai_client import OpenAIClient
from writecheck.models.pydantic import AnalysisResult, QuickFeedback
from writecheck.services.errors import InputValidationError
from writecheck.services.feedback.parsing import parse_analysis_result, parse_quick_feedback
from writecheck.services.feedback.prompts import (
    CRITERIA_SYSTEM_PROMPT,
    QUICK_CHECK_SYSTEM_PROMPT,
    build_criteria_prompt,
    build_quick_feedback_prompt,
)

logger = logging.getLogger(__name__)

MAX_CRITERIA = 15


def validate_draft(draft: Any) -> str:
    if not isinstance(draft, str) or not draft.strip():
        raise InputValidationError(
            "Draft text is required and must be a non-empty string",
            field="draft",
        )
    return draft


def validate_feedback_request(draft: Any, criteria: Any) -> tuple[str, list[str]]:
    """
    Prüft Draft und Kriterien, bevor irgendein Netzwerk-Call passiert.

    Raises:
        InputValidationError: leerer Draft, keine / mehr als 15 Kriterien,
            oder ein Kriterium ist kein nicht-leerer String
    """
    validate_draft(draft)

    if not isinstance(criteria, list) or len(criteria) == 0:
        raise InputValidationError(
            "At least one success criterion is required",
            field="criteria",
        )

    if len(criteria) > MAX_CRITERIA:
        raise InputValidationError(
            f"Maximum {MAX_CRITERIA} success criteria allowed",
            field="criteria",
        )

    for i, criterion in enumerate(criteria, start=1):
        if not isinstance(criterion, str) or not criterion.strip():
            raise InputValidationError(
                f"Criterion {i} must be a non-empty string",
                field="criteria",
            )

    return draft, criteria


def build_llm_client() -> LLMClient:
    # "fake" für Demo/Offline-Betrieb, sonst echte OpenAI-Calls
    if settings.llm_provider == "fake":
        return FakeLLMClient()
    return OpenAIClient(
        model_name=settings.openai_model,
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
    )


class FeedbackService:
    def __init__(self, llm_client: LLMClient | None = None) -> None:
        self._llm_client = llm_client

    @property
    def llm_client(self) -> LLMClient:
        # erst bei Bedarf bauen, damit /analysis etc. ohne LLM-Config laufen
        if self._llm_client is None:
            self._llm_client = build_llm_client()
        return self._llm_client

    def analyse(self, draft: Any, criteria: Any) -> AnalysisResult:
        draft, criteria = validate_feedback_request(draft, criteria)

        prompt = build_criteria_prompt(draft, criteria)
        logger.info("Requesting criteria feedback (%d criteria)", len(criteria))
        raw = self.llm_client.complete(
            prompt,
            system=CRITERIA_SYSTEM_PROMPT,
            max_tokens=settings.openai_max_tokens,
        )
        return parse_analysis_result(raw)

    def quick_check(self, draft: Any) -> QuickFeedback:
        draft = validate_draft(draft)

        raw = self.llm_client.complete(
            build_quick_feedback_prompt(draft),
            system=QUICK_CHECK_SYSTEM_PROMPT,
            max_tokens=settings.quick_check_max_tokens,
        )
        return parse_quick_feedback(raw)
