"""Rendering-Funktionen für Analytics, Issues und AI-Feedback."""

from typing import Any

import streamlit as st

from writecheck.services.analysis import AnalysisSnapshot, IssueKind

ISSUE_TITLES = {
    IssueKind.LONG_SENTENCE: "📏 Long Sentences (30+ words)",
    IssueKind.REPEATED_WORD: "🔁 Repeated Words",
    IssueKind.PASSIVE_VOICE: "💤 Possible Passive Voice",
    IssueKind.SUSPICIOUS_SPELLING: "🔤 Possible Spelling Issues",
}

RATING_ICONS = {
    "Exceeding": "🟢",
    "Accomplished": "🔵",
    "Developing": "🟠",
    "Not Evident": "🔴",
}


def issues_headline(snapshot: AnalysisSnapshot) -> str:
    """Kopfzeile der Issue-Liste; unterscheidet "kein Text" von "keine Issues"."""
    report = snapshot.issues
    if report.status == "empty":
        return "Start typing to see feedback..."
    if report.status == "clean":
        return "✅ No major issues detected! Great work!"
    suffix = "" if report.total == 1 else "s"
    return f"Found {report.total} potential issue{suffix}"


def issue_lines(snapshot: AnalysisSnapshot) -> list[tuple[str, list[str]]]:
    """(Titel, Zeilen) pro Issue-Art mit mindestens einem Treffer."""
    groups = []
    for kind, items in snapshot.issues.by_kind.items():
        if not items:
            continue
        lines = []
        for issue in items:
            if kind == IssueKind.SUSPICIOUS_SPELLING:
                lines.append(issue.word or issue.excerpt)
            elif kind == IssueKind.LONG_SENTENCE:
                lines.append(f'Sentence {issue.sentence_index}: {issue.word_count} words - "{issue.excerpt}"')
            else:
                lines.append(f'Sentence {issue.sentence_index}: "{issue.excerpt}"')
        groups.append((ISSUE_TITLES[kind], lines))
    return groups


def frequency_rows(snapshot: AnalysisSnapshot) -> list[dict[str, Any]]:
    return [
        {"Word": e.word, "Count": e.count, "Share": round(e.percentage)}
        for e in snapshot.frequency.entries
    ]


def render_metrics(snapshot: AnalysisSnapshot) -> None:
    m = snapshot.metrics
    cols = st.columns(6)
    cols[0].metric("Words", m.word_count)
    cols[1].metric("Characters", m.char_count)
    cols[2].metric("Sentences", m.sentence_count)
    cols[3].metric("Avg. Sentence", m.avg_sentence_length)
    cols[4].metric("Longest", m.longest_sentence_words)
    cols[5].metric("Reading Time", m.reading_time)


def render_issues(snapshot: AnalysisSnapshot) -> None:
    st.write(issues_headline(snapshot))
    for title, lines in issue_lines(snapshot):
        st.markdown(f"**{title}**")
        for line in lines:
            st.markdown(f"- {line}")


def render_frequency(snapshot: AnalysisSnapshot) -> None:
    status = snapshot.frequency.status
    if status == "empty":
        st.caption("Start typing to see word frequency...")
        return
    if status == "no_words":
        st.caption("No significant words yet.")
        return

    for row in frequency_rows(snapshot):
        st.progress(row["Share"] / 100, text=f"{row['Word']} ({row['Count']})")


def render_sentence_table(snapshot: AnalysisSnapshot) -> None:
    if not snapshot.breakdown:
        st.caption("No sentences yet.")
        return

    import pandas as pd

    table_data = [
        {
            "#": row.index,
            "Sentence Preview": row.preview,
            "Words": row.word_count,
            "Flag": "⚠️ Long" if row.is_long else "",
        }
        for row in snapshot.breakdown
    ]
    st.dataframe(pd.DataFrame(table_data), hide_index=True, use_container_width=True)


def render_feedback(result: dict[str, Any]) -> None:
    """Rendert AnalysisResult (camelCase wie von der API geliefert)."""
    st.subheader("Overall Summary")
    for point in result.get("summary", []):
        st.markdown(f"- {point}")

    st.subheader("Criteria Feedback")
    for item in result.get("criteria", []):
        rating = item.get("rating", "")
        icon = RATING_ICONS.get(rating, "")
        st.markdown(f"**{item.get('criterionNumber')}. {item.get('criterion')}**  {icon} {rating}")
        st.caption(item.get("feedback", ""))


def render_quick_feedback(result: dict[str, Any]) -> None:
    st.write(result.get("impression", ""))
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Strengths**")
        for s in result.get("strengths", []):
            st.markdown(f"- {s}")
    with col2:
        st.markdown("**Areas for improvement**")
        for s in result.get("improvements", []):
            st.markdown(f"- {s}")
