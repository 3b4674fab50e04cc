"""
Key-Value-Persistenz für den Arbeitsstand (Draft + Kriterien) und das Theme.

Ein Schlüssel pro Eintrag in der Tabelle `kv_store`:
- "studentEnglishChecker": {draft, criteria, timestamp} als JSON
- "theme": "light" | "dark"

Die Analyse-Engine greift nie auf dieses Modul zu.
"""

import json
import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.orm import Session

from writecheck.models.pydantic import WorkspaceState

logger = logging.getLogger(__name__)

WORKSPACE_KEY = "studentEnglishChecker"
THEME_KEY = "theme"
DEFAULT_THEME = "light"
THEMES = ("light", "dark")


def init_kv_store(db: Session) -> None:
    db.execute(
        text(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
    )
    db.commit()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_value(db: Session, key: str) -> str | None:
    row = db.execute(
        text("SELECT value FROM kv_store WHERE key = :key LIMIT 1"),
        {"key": key},
    ).first()
    return row[0] if row else None


def set_value(db: Session, key: str, value: str) -> None:
    try:
        db.execute(
            text(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (:key, :value, :updated_at)
                ON CONFLICT (key) DO UPDATE
                SET value = excluded.value, updated_at = excluded.updated_at
                """
            ),
            {"key": key, "value": value, "updated_at": _now_iso()},
        )
        db.commit()
    except Exception:
        db.rollback()
        raise


def delete_value(db: Session, key: str) -> None:
    try:
        db.execute(text("DELETE FROM kv_store WHERE key = :key"), {"key": key})
        db.commit()
    except Exception:
        db.rollback()
        raise


def save_workspace(db: Session, draft: str, criteria: list[str]) -> WorkspaceState:
    """Speichert Draft + Kriterien mit aktuellem Zeitstempel."""
    state = WorkspaceState(draft=draft, criteria=list(criteria), timestamp=_now_iso())
    set_value(db, WORKSPACE_KEY, state.model_dump_json())
    return state


def load_workspace(db: Session) -> WorkspaceState | None:
    """
    Lädt den gespeicherten Arbeitsstand.
    Kaputtes JSON wird geloggt und wie "nichts gespeichert" behandelt.
    """
    raw = get_value(db, WORKSPACE_KEY)
    if raw is None:
        return None
    try:
        return WorkspaceState.model_validate(json.loads(raw))
    except ValueError as e:
        # json.JSONDecodeError und pydantic.ValidationError sind beide ValueError
        logger.error("Error loading saved workspace: %s", e)
        return None


def clear_workspace(db: Session) -> None:
    """Entfernt den Arbeitsstand ("Clear all"), das Theme bleibt erhalten."""
    delete_value(db, WORKSPACE_KEY)


def get_theme(db: Session) -> str:
    theme = get_value(db, THEME_KEY)
    return theme if theme in THEMES else DEFAULT_THEME


def set_theme(db: Session, theme: str) -> str:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme}")
    set_value(db, THEME_KEY, theme)
    return theme
