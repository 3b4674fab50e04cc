"""
Zustand für AI-Requests im Dashboard.

Genau ein Request gleichzeitig: der Button-Callback setzt `busy` und merkt
sich die Aktion; der nächste Skriptlauf zeichnet die Buttons deaktiviert,
führt die Aktion aus und gibt danach wieder frei.
Arbeitet auf jedem MutableMapping (st.session_state oder dict in Tests).
"""

from collections.abc import MutableMapping
from typing import Any, Callable

ANALYSE = "analyse"
QUICK_CHECK = "quick_check"

# Aktion -> session_state-Key für das Ergebnis
RESULT_KEYS = {
    ANALYSE: "feedback",
    QUICK_CHECK: "quick_feedback",
}


def init_request_state(state: MutableMapping[str, Any]) -> None:
    state.setdefault("busy", False)
    state.setdefault("pending_action", None)
    state.setdefault("request_error", None)


def request_action(state: MutableMapping[str, Any], action: str) -> None:
    """on_click-Callback; ein zweiter Klick während busy wird ignoriert."""
    if state.get("busy"):
        return
    state["busy"] = True
    state["pending_action"] = action
    state["request_error"] = None


def take_pending_action(state: MutableMapping[str, Any]) -> str | None:
    action = state.get("pending_action")
    state["pending_action"] = None
    return action


def finish_action(state: MutableMapping[str, Any], action: str, response: dict[str, Any]) -> None:
    """Speichert Ergebnis oder Fehler."""
    if response.get("success"):
        state[RESULT_KEYS[action]] = response["data"]
    elif response.get("code") == "AUTH_ERROR":
        state["request_error"] = f"🔑 {response.get('error')} - check your API key."
    else:
        state["request_error"] = f"❌ {response.get('error')} - please try again."


def run_pending(
    state: MutableMapping[str, Any],
    calls: dict[str, Callable[[], dict[str, Any]]],
) -> bool:
    """
    Führt eine gemerkte Aktion aus.

    Returns:
        True, wenn eine Aktion lief (Aufrufer sollte neu rendern)
    """
    action = take_pending_action(state)
    if action is None:
        return False
    try:
        response = calls[action]()
    finally:
        state["busy"] = False
    finish_action(state, action, response)
    return True


def report_key(draft: str, feedback: dict[str, Any]) -> tuple[str, str]:
    return draft, repr(feedback)


def cached_report(state: MutableMapping[str, Any], draft: str, feedback: dict[str, Any]) -> str | None:
    """Report nur, wenn er für genau diesen Draft + dieses Feedback erzeugt wurde."""
    stored = state.get("report")
    if stored and stored[0] == report_key(draft, feedback):
        return stored[1]
    return None
