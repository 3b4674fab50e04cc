"""
Metrik-Berechnung für einen Draft.
"""

import math

from writecheck.services.analysis.analysis_models import Metrics
from writecheck.services.analysis.segmentation import segment_sentences, split_words

# feste Lesegeschwindigkeit, nicht konfigurierbar
WORDS_PER_MINUTE = 225


def round_half_up(x: float) -> int:
    """Kaufmännisches Runden (Python's round() rundet 2.5 auf 2)."""
    return int(math.floor(x + 0.5))


def compute_metrics(text: str, sentences: list[str] | None = None) -> Metrics:
    """
    Berechnet alle Kennzahlen aus dem Draft.

    Args:
        text: Roher Draft
        sentences: Optional bereits segmentierte Sätze (sonst wird neu segmentiert)

    Returns:
        Metrics; bei leerem / Whitespace-Text sind alle Werte 0
    """
    trimmed = text.strip()
    if not trimmed:
        return Metrics()

    if sentences is None:
        sentences = segment_sentences(trimmed)

    word_count = len(split_words(trimmed))
    sentence_count = len(sentences)

    avg = round_half_up(word_count / sentence_count) if sentence_count > 0 else 0
    longest = max((len(split_words(s)) for s in sentences), default=0)

    minutes = word_count // WORDS_PER_MINUTE
    seconds = round_half_up((word_count % WORDS_PER_MINUTE) / WORDS_PER_MINUTE * 60)

    return Metrics(
        word_count=word_count,
        char_count=len(trimmed),
        sentence_count=sentence_count,
        avg_sentence_length=avg,
        longest_sentence_words=longest,
        reading_time_minutes=minutes,
        reading_time_seconds=seconds,
    )
