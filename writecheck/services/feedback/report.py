"""
Plain-Text-Export: Draft-Datei und Feedback-Report.

Der Report ist ein einfaches Template und wird nie wieder eingelesen.
"""

from datetime import date, datetime

from writecheck.models.pydantic import AnalysisResult
from writecheck.services.analysis.analysis_models import Metrics

REPORT_TITLE = "=== STUDENT ENGLISH CHECKER - FEEDBACK REPORT ==="


def draft_filename(day: date) -> str:
    return f"draft_{day.isoformat()}.txt"


def report_filename(day: date) -> str:
    return f"feedback_{day.isoformat()}.txt"


def decode_upload(filename: str, content: bytes) -> str:
    """Nur .txt-Dateien, UTF-8."""
    if not filename.lower().endswith(".txt"):
        raise ValueError("Please upload a .txt file")
    return content.decode("utf-8")


def build_feedback_report(
    draft: str,
    metrics: Metrics,
    result: AnalysisResult,
    generated_at: datetime,
) -> str:
    lines = [
        REPORT_TITLE,
        f"Date: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        "",
        "=== WRITING ANALYTICS ===",
        f"Words: {metrics.word_count}",
        f"Characters: {metrics.char_count}",
        f"Sentences: {metrics.sentence_count}",
        f"Average Sentence Length: {metrics.avg_sentence_length} words",
        f"Reading Time: {metrics.reading_time}",
        "",
        "=== OVERALL SUMMARY ===",
    ]
    lines.extend(f"{i}. {point}" for i, point in enumerate(result.summary, start=1))
    lines += ["", "=== DETAILED CRITERIA FEEDBACK ==="]

    for item in result.criteria:
        lines += [
            "",
            f"{item.criterion_number}. {item.criterion}",
            f"Rating: {item.rating.value}",
            f"Feedback: {item.feedback}",
        ]

    lines += ["", "=== YOUR DRAFT ===", draft]
    return "\n".join(lines) + "\n"
