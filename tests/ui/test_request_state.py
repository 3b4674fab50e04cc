"""Tests für den Request-Zustand der AI-Buttons (ein Request gleichzeitig)."""

import pytest

from ui.request_state import (
    ANALYSE,
    QUICK_CHECK,
    cached_report,
    init_request_state,
    report_key,
    request_action,
    run_pending,
)


@pytest.fixture
def state():
    s: dict = {"feedback": None, "quick_feedback": None}
    init_request_state(s)
    return s


def test_click_marks_busy_before_the_next_run(state):
    request_action(state, ANALYSE)

    # der folgende Lauf zeichnet die Buttons mit diesem Wert
    assert state["busy"] is True
    assert state["pending_action"] == ANALYSE


def test_second_click_while_busy_is_ignored(state):
    request_action(state, ANALYSE)
    request_action(state, QUICK_CHECK)
    assert state["pending_action"] == ANALYSE


def test_pending_action_runs_once_and_releases(state):
    calls = []

    def analyse():
        calls.append("analyse")
        # während des Requests bleibt busy gesetzt
        assert state["busy"] is True
        return {"success": True, "data": {"criteria": [], "summary": ["ok"]}}

    request_action(state, ANALYSE)
    assert run_pending(state, {ANALYSE: analyse}) is True

    assert calls == ["analyse"]
    assert state["busy"] is False
    assert state["pending_action"] is None
    assert state["feedback"] == {"criteria": [], "summary": ["ok"]}

    # ohne neuen Klick passiert nichts
    assert run_pending(state, {ANALYSE: analyse}) is False
    assert calls == ["analyse"]


def test_auth_error_gets_api_key_hint(state):
    request_action(state, QUICK_CHECK)
    run_pending(
        state,
        {QUICK_CHECK: lambda: {"success": False, "error": "Invalid OpenAI API key", "code": "AUTH_ERROR"}},
    )
    assert "check your API key" in state["request_error"]
    assert state["quick_feedback"] is None
    assert state["busy"] is False


def test_exception_during_request_releases_busy(state):
    def boom():
        raise RuntimeError("network down")

    request_action(state, ANALYSE)
    with pytest.raises(RuntimeError):
        run_pending(state, {ANALYSE: boom})
    assert state["busy"] is False


def test_cached_report_matches_draft_and_feedback():
    feedback = {"criteria": [], "summary": ["a"]}
    state = {"report": (report_key("draft", feedback), "REPORT")}

    assert cached_report(state, "draft", feedback) == "REPORT"
    assert cached_report(state, "draft changed", feedback) is None
    assert cached_report(state, "draft", {"criteria": [], "summary": ["b"]}) is None
    assert cached_report({}, "draft", feedback) is None
