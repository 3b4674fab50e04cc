"""
Worthäufigkeits-Ranking.
"""

import re

from writecheck.services.analysis.analysis_models import FrequencyReport, WordFrequency
from writecheck.services.analysis.segmentation import split_words

MIN_WORD_LENGTH = 4
TOP_N = 10

STOPWORDS = frozenset(
    {
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
        "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
        "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
        "or", "an", "will", "my", "one", "all", "would", "there", "their", "was",
        "is", "are", "been", "has", "had", "were", "can", "could", "should", "may",
    }
)

_NON_LETTER = re.compile(r"[^a-z]")


def normalize_word(token: str) -> str:
    return _NON_LETTER.sub("", token.lower())


def significant_words(text: str) -> list[str]:
    """Normalisierte Wörter mit Länge > 3, ohne Stopwords, in Textreihenfolge."""
    words = (normalize_word(t) for t in split_words(text))
    return [w for w in words if len(w) >= MIN_WORD_LENGTH and w not in STOPWORDS]


def rank_word_frequency(text: str, limit: int = TOP_N) -> FrequencyReport:
    """
    Top-`limit` Wörter nach Häufigkeit (absteigend).

    Gleichstand wird über die Reihenfolge des ersten Auftretens aufgelöst
    (dict behält Einfügereihenfolge, sorted() ist stabil).
    """
    if not text.strip():
        return FrequencyReport(entries=(), status="empty")

    counts: dict[str, int] = {}
    for word in significant_words(text):
        counts[word] = counts.get(word, 0) + 1

    if not counts:
        return FrequencyReport(entries=(), status="no_words")

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]
    top = ranked[0][1]
    entries = tuple(
        WordFrequency(word=word, count=count, percentage=count / top * 100.0)
        for word, count in ranked
    )
    return FrequencyReport(entries=entries, status="ok")
