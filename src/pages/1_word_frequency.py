import altair as alt
import pandas as pd
import streamlit as st

from textmetric import TextMetricError, analyze, top_words
from textmetric.config import get_settings
from textmetric.log import setup_logging

st.title("🔤 Word Frequency")
st.write(
    "The most common words of the text, counted case-insensitively with the "
    "same tokenizer as the main page."
)

try:
    settings = get_settings()
except TextMetricError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()

setup_logging(settings.log_level)

text_input = st.text_area(
    "Enter your text here 👇",
    value=st.session_state.get("shared_text", ""),
    height=250,
)
limit = st.slider("Words to show", 5, 100, min(settings.top_words, 100))

stats = analyze(text_input)
if stats.has_words:
    col1, col2, col3 = st.columns(3)
    col1.metric("Words", stats.word_count)
    col2.metric("Unique words", len(top_words(text_input, limit=stats.word_count)))
    col3.metric("Most frequent", stats.most_frequent_word)

    most_common = pd.DataFrame(top_words(text_input, limit), columns=["word", "count"])

    with st.expander(f"Top {len(most_common)} words", expanded=True):
        st.dataframe(most_common, use_container_width=True)

    st.subheader("Frequency plot")
    chart = (
        alt.Chart(most_common)
        .mark_bar()
        .encode(
            x=alt.X("word", sort="-y"),
            y="count",
            tooltip=["word", "count"],
        )
    )
    st.altair_chart(chart, use_container_width=True)
else:
    st.info("Awaiting text input.")
