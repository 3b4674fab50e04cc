"""
Satz- und Wort-Segmentierung.

Bewusst simpel: Sätze werden an jeder Folge von `.`, `!`, `?` getrennt.
Abkürzungen ("Mr. Smith"), Dezimalzahlen oder Zitate werden NICHT gesondert
behandelt; nachgelagerte Schritte müssen gelegentliche Fehlsegmentierung
tolerieren.

Text ohne Satzzeichen ergibt genau einen Satz (den getrimmten Text), sofern
er nicht leer ist.
"""

import re

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")


def segment_sentences(text: str) -> list[str]:
    """Liefert die getrimmten, nicht-leeren Sätze in Originalreihenfolge."""
    fragments = _SENTENCE_BOUNDARY.split(text.strip())
    return [s.strip() for s in fragments if s.strip()]


def split_words(text: str) -> list[str]:
    """Maximale Nicht-Whitespace-Folgen (leere Tokens werden verworfen)."""
    return [w for w in _WHITESPACE.split(text) if w]


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text
