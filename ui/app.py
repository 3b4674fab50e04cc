"""Streamlit Dashboard: Student English Checker."""

from datetime import date
from pathlib import Path
import sys

import streamlit as st

# Add ui directory and project root to path
UI_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(UI_DIR))
sys.path.insert(0, str(UI_DIR.parent))

import api_client
import render
import request_state

from writecheck.services.analysis import analyze_draft
from writecheck.services.feedback import MAX_CRITERIA
from writecheck.services.feedback.report import decode_upload, draft_filename, report_filename

# Page config
st.set_page_config(
    page_title="Student English Checker",
    page_icon="✍️",
    layout="wide",
)

# Session State einmalig aus dem gespeicherten Arbeitsstand füllen
if "initialized" not in st.session_state:
    saved = api_client.load_workspace() or {}
    st.session_state["draft"] = saved.get("draft", "")
    st.session_state["criteria"] = list(saved.get("criteria", []))
    st.session_state["theme"] = api_client.get_theme()
    st.session_state["feedback"] = None
    st.session_state["quick_feedback"] = None
    st.session_state["report"] = None
    request_state.init_request_state(st.session_state)
    st.session_state["initialized"] = True


def persist() -> None:
    api_client.save_workspace(st.session_state["draft"], st.session_state["criteria"])


# Sidebar
with st.sidebar:
    st.title("✍️ Student English Checker")

    st.subheader("API Status")
    api_health = api_client.health_check()
    if api_health.get("available"):
        st.success(f"✅ API: {api_client.API_BASE_URL}")
        if not api_health.get("has_api_key"):
            st.warning("⚠️ OPENAI_API_KEY missing on the server; AI feedback disabled")
    else:
        st.error(f"❌ API: {api_client.API_BASE_URL}")
        st.caption(f"Fehler: {api_health.get('message', 'Unknown')}")

    st.divider()

    dark = st.toggle("Dark theme", value=st.session_state["theme"] == "dark")
    theme = "dark" if dark else "light"
    if theme != st.session_state["theme"]:
        st.session_state["theme"] = theme
        api_client.set_theme(theme)

    uploaded = st.file_uploader("Upload draft (.txt)", type=["txt"])
    if uploaded is not None and st.session_state.get("uploaded_name") != uploaded.name:
        try:
            st.session_state["draft"] = decode_upload(uploaded.name, uploaded.getvalue())
            st.session_state["uploaded_name"] = uploaded.name
            persist()
            st.rerun()
        except (ValueError, UnicodeDecodeError) as e:
            st.error(f"❌ Could not read file: {e}")

    st.download_button(
        "💾 Download draft",
        data=st.session_state["draft"],
        file_name=draft_filename(date.today()),
        mime="text/plain",
        disabled=not st.session_state["draft"].strip(),
    )

    if st.button("🗑️ Clear all"):
        api_client.clear_workspace()
        st.session_state["draft"] = ""
        st.session_state["criteria"] = []
        st.session_state["feedback"] = None
        st.session_state["quick_feedback"] = None
        st.session_state["report"] = None
        st.session_state["request_error"] = None
        st.rerun()


# Draft-Eingabe; jede Änderung löst einen Rerun und damit eine neue Analyse aus
st.text_area("Your draft", key="draft", height=300, on_change=persist)

snapshot = analyze_draft(st.session_state["draft"])
render.render_metrics(snapshot)

tab1, tab2, tab3 = st.tabs(["Issues", "Word Frequency", "Sentences"])
with tab1:
    render.render_issues(snapshot)
with tab2:
    render.render_frequency(snapshot)
with tab3:
    render.render_sentence_table(snapshot)

st.divider()

# Success Criteria
st.header("Success Criteria")
criteria: list[str] = st.session_state["criteria"]

for i, criterion in enumerate(list(criteria)):
    col1, col2 = st.columns([10, 1])
    with col1:
        edited = st.text_input(f"Criterion {i + 1}", value=criterion, key=f"criterion_{i}_{criterion}")
        if edited != criterion:
            criteria[i] = edited
            persist()
    with col2:
        if st.button("✖", key=f"remove_{i}"):
            criteria.pop(i)
            persist()
            st.rerun()

new_criterion = st.text_input("Add a criterion", key="new_criterion")
if st.button("➕ Add", disabled=len(criteria) >= MAX_CRITERIA):
    if new_criterion.strip():
        criteria.append(new_criterion.strip())
        persist()
        st.rerun()
if len(criteria) >= MAX_CRITERIA:
    st.caption(f"Maximum {MAX_CRITERIA} success criteria reached.")


col1, col2 = st.columns(2)
with col1:
    st.button(
        "🤖 Analyse with AI",
        type="primary",
        disabled=st.session_state["busy"] or not criteria,
        on_click=request_state.request_action,
        args=(st.session_state, request_state.ANALYSE),
    )
with col2:
    st.button(
        "⚡ Quick check",
        disabled=st.session_state["busy"],
        on_click=request_state.request_action,
        args=(st.session_state, request_state.QUICK_CHECK),
    )

# Buttons sind in diesem Lauf bereits deaktiviert gezeichnet
if st.session_state["pending_action"] is not None:
    with st.spinner("Waiting for AI feedback..."):
        ran = request_state.run_pending(
            st.session_state,
            {
                request_state.ANALYSE: lambda: api_client.analyse(st.session_state["draft"], criteria),
                request_state.QUICK_CHECK: lambda: api_client.quick_check(st.session_state["draft"]),
            },
        )
    if ran:
        st.rerun()

if st.session_state["request_error"]:
    st.error(st.session_state["request_error"])

if st.session_state["quick_feedback"]:
    st.header("Quick Feedback")
    render.render_quick_feedback(st.session_state["quick_feedback"])

if st.session_state["feedback"]:
    st.header("AI Feedback")
    render.render_feedback(st.session_state["feedback"])

    draft = st.session_state["draft"]
    feedback = st.session_state["feedback"]
    report = request_state.cached_report(st.session_state, draft, feedback)
    if report is None:
        # Report nur auf Anforderung holen, nicht bei jedem Rerun
        if st.button("📄 Prepare feedback report"):
            text = api_client.download_report(draft, feedback)
            if text is None:
                st.error("❌ Could not build the report - please try again.")
            else:
                st.session_state["report"] = (request_state.report_key(draft, feedback), text)
                st.rerun()
    else:
        st.download_button(
            "📄 Download feedback report",
            data=report,
            file_name=report_filename(date.today()),
            mime="text/plain",
        )
