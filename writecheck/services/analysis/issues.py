"""
Heuristische Issue-Erkennung.

Keine echte Grammatikprüfung: alle Detektoren sind Regex-Heuristiken mit
False Positives ("is very aged") und False Negatives (unregelmäßige
Partizipien außerhalb der festen Liste).

Satz-Detektoren sind unabhängige Prädikate (index, sentence) -> Issue | None
und stehen in der geordneten Registry SENTENCE_DETECTORS. Ein neuer Detektor
wird dort eingetragen; Aufrufer bleiben unverändert.
Rechtschreibung wird dokumentweit (nicht pro Satz) geprüft.
"""

import re
from typing import Callable

from writecheck.services.analysis.analysis_models import Issue, IssueKind, IssueReport
from writecheck.services.analysis.segmentation import segment_sentences, split_words, truncate

LONG_SENTENCE_WORDS = 30
EXCERPT_CHARS = 100
MAX_SPELLING_ISSUES = 10

_REPEATED_WORD = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)
# die sechs Standard-Partizipien plus "written" ("The report was written by ...")
IRREGULAR_PARTICIPLES = ("given", "taken", "made", "done", "shown", "seen", "written")

_PASSIVE_PATTERNS = (
    re.compile(r"\b(is|are|was|were|been|being)\s+\w+ed\b", re.IGNORECASE),
    re.compile(
        r"\b(is|are|was|were|been|being)\s+(" + "|".join(IRREGULAR_PARTICIPLES) + r")\b",
        re.IGNORECASE,
    ),
)
_NON_LETTER = re.compile(r"[^a-z]")
_LETTER_RUN = re.compile(r"(.)\1{3,}")

SentenceDetector = Callable[[int, str], Issue | None]


def detect_long_sentence(index: int, sentence: str) -> Issue | None:
    words = sentence.split()
    if len(words) > LONG_SENTENCE_WORDS:
        return Issue(
            kind=IssueKind.LONG_SENTENCE,
            sentence_index=index,
            excerpt=truncate(sentence, EXCERPT_CHARS),
            word_count=len(words),
        )
    return None


def detect_repeated_word(index: int, sentence: str) -> Issue | None:
    if _REPEATED_WORD.search(sentence):
        return Issue(
            kind=IssueKind.REPEATED_WORD,
            sentence_index=index,
            excerpt=truncate(sentence, EXCERPT_CHARS),
        )
    return None


def detect_passive_voice(index: int, sentence: str) -> Issue | None:
    if any(p.search(sentence) for p in _PASSIVE_PATTERNS):
        return Issue(
            kind=IssueKind.PASSIVE_VOICE,
            sentence_index=index,
            excerpt=truncate(sentence, EXCERPT_CHARS),
        )
    return None


SENTENCE_DETECTORS: tuple[tuple[IssueKind, SentenceDetector], ...] = (
    (IssueKind.LONG_SENTENCE, detect_long_sentence),
    (IssueKind.REPEATED_WORD, detect_repeated_word),
    (IssueKind.PASSIVE_VOICE, detect_passive_voice),
)


def find_suspicious_spellings(text: str, limit: int = MAX_SPELLING_ISSUES) -> list[Issue]:
    """Tokens mit 4+ gleichen Buchstaben in Folge (z.B. "sooooo"), max. `limit` Treffer."""
    issues: list[Issue] = []
    for token in split_words(text.lower()):
        word = _NON_LETTER.sub("", token)
        if _LETTER_RUN.search(word):
            issues.append(Issue(kind=IssueKind.SUSPICIOUS_SPELLING, excerpt=word, word=word))
            if len(issues) >= limit:
                break
    return issues


def _empty_by_kind() -> dict[IssueKind, list[Issue]]:
    return {kind: [] for kind in IssueKind}


def detect_issues(text: str, sentences: list[str] | None = None) -> IssueReport:
    """
    Wendet alle Detektoren auf den Draft an.

    Innerhalb jeder Art sind die Issues nach Satzindex (bzw. bei Rechtschreibung
    nach Token-Reihenfolge) sortiert.
    """
    trimmed = text.strip()
    if not trimmed:
        return IssueReport(
            by_kind={kind: () for kind in IssueKind},
            status="empty",
        )

    if sentences is None:
        sentences = segment_sentences(trimmed)

    found = _empty_by_kind()
    for index, sentence in enumerate(sentences, start=1):
        for kind, detector in SENTENCE_DETECTORS:
            issue = detector(index, sentence)
            if issue is not None:
                found[kind].append(issue)

    found[IssueKind.SUSPICIOUS_SPELLING] = find_suspicious_spellings(trimmed)

    by_kind = {kind: tuple(items) for kind, items in found.items()}
    total = sum(len(items) for items in by_kind.values())
    return IssueReport(by_kind=by_kind, status="issues" if total else "clean")
