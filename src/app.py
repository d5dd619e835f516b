import logging

import streamlit as st

from textmetric import (
    NOT_AVAILABLE,
    AnalysisStatus,
    SentimentLabel,
    SentimentState,
    TextMetricError,
    analyze,
    report_filename,
    report_frame,
    to_delimited_report,
)
from textmetric.analyzer import code_units
from textmetric.config import get_settings
from textmetric.log import setup_logging
from textmetric.status import on_text_changed, run_classification

st.set_page_config(page_title="TextMetric Pro", layout="wide")

logger = logging.getLogger(__name__)

st.title("📝 TextMetric Pro")
st.write(
    "Paste or type any text below. Statistics update as you type; "
    "sentiment runs when you press **Analyze Text**."
)

try:
    settings = get_settings()
except TextMetricError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()

setup_logging(settings.log_level)

if "sentiment" not in st.session_state:
    st.session_state["sentiment"] = SentimentState.idle()


def clear_text():
    st.session_state["text"] = ""
    st.session_state["sentiment"] = SentimentState.idle()


def stat_card(title: str, value, subtext: str = ""):
    with st.container(border=True):
        st.metric(title, value)
        if subtext:
            st.caption(subtext)


input_col, stats_col = st.columns([2, 1])

with input_col:
    text = st.text_area(
        "Input text",
        height=450,
        key="text",
        placeholder="Paste or type your text here to begin analysis...",
    )
    st.session_state["shared_text"] = text
    stats = analyze(text)
    foot1, foot2, foot3 = st.columns([2, 2, 1])
    foot1.caption(f"{stats.char_count} characters")
    foot2.caption(f"{stats.word_count} words")
    foot3.button("🗑️ Clear", on_click=clear_text, disabled=not text)

st.session_state["sentiment"] = on_text_changed(st.session_state["sentiment"], text)

with stats_col:
    head, export = st.columns([3, 2])
    head.subheader("Real-time Metrics")
    export.download_button(
        "⬇️ Export CSV",
        data=to_delimited_report(stats, settings.csv_delimiter),
        file_name=report_filename(),
        mime="text/csv",
        disabled=not stats.has_words,
    )

    stat_card("Word Count", stats.word_count)
    stat_card("Character Count", stats.char_count)
    stat_card(
        "Character Count (Excluding Spaces)",
        stats.char_count_no_spaces,
        f"Total Characters: {stats.char_count}",
    )
    stat_card("Sentence Count", stats.sentence_count)
    stat_card("Paragraph Count", stats.paragraph_count)
    stat_card(
        "Most Frequent Word",
        stats.most_frequent_word,
        f"{stats.most_frequent_word_count} occurrences"
        if stats.most_frequent_word != NOT_AVAILABLE
        else "",
    )
    stat_card(
        "Longest Word",
        stats.longest_word,
        f"{code_units(stats.longest_word)} chars" if stats.longest_word != NOT_AVAILABLE else "",
    )

    with st.expander("Report preview"):
        st.dataframe(report_frame(stats), hide_index=True, use_container_width=True)

st.subheader("Sentiment Analysis")
state: SentimentState = st.session_state["sentiment"]

label = "Try Again" if state.status is AnalysisStatus.ERROR else "Analyze Text"
if st.button(label, disabled=not text.strip() or state.is_busy, key="analyze_sentiment"):
    st.session_state["sentiment"] = SentimentState.analyzing(text)
    with st.spinner("Analyzing..."):
        state = run_classification(text, delay=settings.sentiment_delay)
    st.session_state["sentiment"] = state
    logger.info("sentiment request finished: %s", state.status.value)

if state.status is AnalysisStatus.ERROR:
    st.error(f"Analysis Failed. {state.error}")
elif state.status is AnalysisStatus.COMPLETED:
    verdict = state.result
    icon = {
        SentimentLabel.POSITIVE: "👍",
        SentimentLabel.NEGATIVE: "👎",
    }.get(verdict.label, "➖")
    st.metric(
        "Sentiment",
        f"{icon} {verdict.label.value}",
        delta=f"{verdict.confidence_percent}% Confidence",
        delta_color="off",
    )
    if verdict.label is SentimentLabel.POSITIVE:
        st.success(verdict.explanation)
    elif verdict.label is SentimentLabel.NEGATIVE:
        st.error(verdict.explanation)
    else:
        st.info(verdict.explanation)
elif state.status is AnalysisStatus.IDLE:
    st.info("Awaiting text input and **Analyze Text** button click.")

st.caption("All analysis runs locally. No text leaves this machine.")
