"""Text statistics and offline sentiment for the TextMetric Streamlit app."""

from .analyzer import analyze, top_words
from .errors import ConfigError, SentimentAnalysisError, TextMetricError
from .models import NOT_AVAILABLE, SentimentLabel, SentimentVerdict, TextStatistics
from .report import report_filename, report_frame, report_rows, to_delimited_report
from .sentiment import classify
from .status import AnalysisStatus, SentimentState

__all__ = [
    "NOT_AVAILABLE",
    "AnalysisStatus",
    "ConfigError",
    "SentimentAnalysisError",
    "SentimentLabel",
    "SentimentState",
    "SentimentVerdict",
    "TextMetricError",
    "TextStatistics",
    "analyze",
    "classify",
    "report_filename",
    "report_frame",
    "report_rows",
    "to_delimited_report",
    "top_words",
]
