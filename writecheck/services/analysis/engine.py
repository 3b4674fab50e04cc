"""
Einstiegspunkt der Text-Analyse-Engine.

`analyze_draft` wird bei jeder Änderung des Drafts aufgerufen und liefert einen
vollständigen, unveränderlichen AnalysisSnapshot. Die Engine hält keinen
Zustand; gleicher Input ergibt immer denselben Output, Aufrufe dürfen
beliebig parallel laufen.
"""

from writecheck.services.analysis.analysis_models import AnalysisSnapshot, SentenceRow
from writecheck.services.analysis.frequency import rank_word_frequency
from writecheck.services.analysis.issues import LONG_SENTENCE_WORDS, detect_issues
from writecheck.services.analysis.metrics import compute_metrics
from writecheck.services.analysis.segmentation import segment_sentences, split_words, truncate

PREVIEW_CHARS = 80


def build_sentence_breakdown(sentences: list[str]) -> list[SentenceRow]:
    rows = []
    for index, sentence in enumerate(sentences, start=1):
        word_count = len(split_words(sentence))
        rows.append(
            SentenceRow(
                index=index,
                preview=truncate(sentence, PREVIEW_CHARS),
                word_count=word_count,
                is_long=word_count > LONG_SENTENCE_WORDS,
            )
        )
    return rows


def analyze_draft(text: str) -> AnalysisSnapshot:
    sentences = segment_sentences(text)
    return AnalysisSnapshot(
        sentences=tuple(sentences),
        metrics=compute_metrics(text, sentences),
        issues=detect_issues(text, sentences),
        frequency=rank_word_frequency(text),
        breakdown=tuple(build_sentence_breakdown(sentences)),
    )
