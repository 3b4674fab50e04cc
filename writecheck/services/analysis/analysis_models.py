"""
Datenmodelle der Text-Analyse-Engine.

Alle Modelle sind unveränderlich (frozen dataclasses) und werden bei jeder
Änderung des Drafts komplett neu berechnet, nie inkrementell angepasst.
Sie enthalten nur Werte, keine UI- oder Persistenz-Details; die Abbildung
auf JSON übernimmt `to_dict()`.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Literal


class IssueKind(str, Enum):
    LONG_SENTENCE = "long_sentence"
    REPEATED_WORD = "repeated_word"
    PASSIVE_VOICE = "passive_voice"
    SUSPICIOUS_SPELLING = "suspicious_spelling"


@dataclass(frozen=True)
class Metrics:
    word_count: int = 0
    char_count: int = 0
    sentence_count: int = 0
    avg_sentence_length: int = 0
    longest_sentence_words: int = 0
    reading_time_minutes: int = 0
    reading_time_seconds: int = 0

    @property
    def reading_time(self) -> str:
        return f"{self.reading_time_minutes}m {self.reading_time_seconds}s"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["reading_time"] = self.reading_time
        return data


@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    excerpt: str
    # 1-basiert; None bei Rechtschreib-Issues (dokumentweit)
    sentence_index: int | None = None
    # nur LONG_SENTENCE
    word_count: int | None = None
    # nur SUSPICIOUS_SPELLING
    word: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


@dataclass(frozen=True)
class IssueReport:
    """
    Issues gruppiert nach Art.

    status:
      - "empty":  kein Text vorhanden ("not enough text")
      - "clean":  Text vorhanden, keine Issues gefunden
      - "issues": mindestens ein Issue
    """

    by_kind: dict[IssueKind, tuple[Issue, ...]]
    status: Literal["empty", "clean", "issues"]

    @property
    def total(self) -> int:
        return sum(len(items) for items in self.by_kind.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "total": self.total,
            "issues": {
                kind.value: [issue.to_dict() for issue in items]
                for kind, items in self.by_kind.items()
            },
        }


@dataclass(frozen=True)
class WordFrequency:
    word: str
    count: int
    # Anteil am häufigsten Wort (0-100), nur für Balkendarstellung
    percentage: float


@dataclass(frozen=True)
class FrequencyReport:
    entries: tuple[WordFrequency, ...]
    status: Literal["empty", "no_words", "ok"]

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "entries": [asdict(e) for e in self.entries],
        }


@dataclass(frozen=True)
class SentenceRow:
    index: int
    preview: str
    word_count: int
    is_long: bool


@dataclass(frozen=True)
class AnalysisSnapshot:
    sentences: tuple[str, ...]
    metrics: Metrics
    issues: IssueReport
    frequency: FrequencyReport
    breakdown: tuple[SentenceRow, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sentences": list(self.sentences),
            "metrics": self.metrics.to_dict(),
            "issues": self.issues.to_dict(),
            "frequency": self.frequency.to_dict(),
            "breakdown": [asdict(row) for row in self.breakdown],
        }
