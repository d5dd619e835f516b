import pandas as pd
import streamlit as st

from textmetric import TextMetricError
from textmetric.config import get_settings
from textmetric.log import setup_logging
from textmetric.report import statistics_frame

st.title("📊 Batch Report")
st.write("Upload a CSV file and compute text statistics for every row of a text column.")

try:
    settings = get_settings()
except TextMetricError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()

setup_logging(settings.log_level)

uploaded = st.file_uploader("Choose a CSV file", type=["csv"])
if uploaded:
    try:
        df = pd.read_csv(uploaded)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        st.error(f"Could not read CSV: {e}")
        st.stop()

    text_cols = [c for c in df.columns if pd.api.types.is_string_dtype(df[c])]
    if not text_cols:
        st.info("No text columns found.")
        st.stop()

    col = st.selectbox("Text column", text_cols)
    stats_df = statistics_frame(df[col], index=df.index)
    result = pd.concat([df[[col]], stats_df], axis=1)

    st.subheader("Per-row statistics")
    rows = len(result)
    if rows > 5:
        rows = st.slider("Rows to display", 5, min(100, len(result)), min(10, len(result)))
    st.dataframe(result.head(rows), use_container_width=True)

    st.subheader("Summary statistics")
    numeric = stats_df.select_dtypes("number")
    st.dataframe(numeric.describe().T, use_container_width=True)

    st.download_button(
        "⬇️ Download statistics",
        data=result.to_csv(index=False, sep=settings.csv_delimiter),
        file_name="text_analysis_batch.csv",
        mime="text/csv",
    )
else:
    st.info("Awaiting CSV upload.")
