"""
AI-Feedback zu einem Draft anhand nutzerdefinierter Erfolgskriterien.
"""

from writecheck.services.feedback.feedback_service import (
    MAX_CRITERIA,
    FeedbackService,
    validate_feedback_request,
)
from writecheck.services.feedback.parsing import parse_analysis_result, parse_quick_feedback
from writecheck.services.feedback.report import build_feedback_report

__all__ = [
    "MAX_CRITERIA",
    "FeedbackService",
    "build_feedback_report",
    "parse_analysis_result",
    "parse_quick_feedback",
    "validate_feedback_request",
]
