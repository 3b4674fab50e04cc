"""
Deterministische Text-Analyse für Schüler-Drafts.

Unterstützt:
- Satz-/Wortsegmentierung
- Kennzahlen (Wörter, Zeichen, Sätze, Lesezeit)
- Heuristische Issues (lange Sätze, Wortwiederholung, Passiv, Rechtschreibung)
- Worthäufigkeits-Ranking
"""

from writecheck.services.analysis.analysis_models import (
    AnalysisSnapshot,
    FrequencyReport,
    Issue,
    IssueKind,
    IssueReport,
    Metrics,
    SentenceRow,
    WordFrequency,
)
from writecheck.services.analysis.engine import analyze_draft, build_sentence_breakdown
from writecheck.services.analysis.frequency import STOPWORDS, rank_word_frequency
from writecheck.services.analysis.issues import SENTENCE_DETECTORS, detect_issues
from writecheck.services.analysis.metrics import WORDS_PER_MINUTE, compute_metrics
from writecheck.services.analysis.segmentation import segment_sentences, split_words

__all__ = [
    "AnalysisSnapshot",
    "FrequencyReport",
    "Issue",
    "IssueKind",
    "IssueReport",
    "Metrics",
    "SENTENCE_DETECTORS",
    "STOPWORDS",
    "SentenceRow",
    "WORDS_PER_MINUTE",
    "WordFrequency",
    "analyze_draft",
    "build_sentence_breakdown",
    "compute_metrics",
    "detect_issues",
    "rank_word_frequency",
    "segment_sentences",
    "split_words",
]
