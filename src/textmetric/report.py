"""CSV export of a TextStatistics record.

Values are written as-is without quoting. Every value is a number or a single
token, and tokens never contain the default "," delimiter.
"""

from dataclasses import asdict, fields
from datetime import date
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

from .analyzer import analyze
from .models import TextStatistics

HEADER = ("Metric", "Value")

Row = Tuple[str, Union[int, str]]


def report_rows(stats: TextStatistics) -> List[Row]:
    return [
        ("Word Count", stats.word_count),
        ("Character Count (Total)", stats.char_count),
        ("Character Count (No Spaces)", stats.char_count_no_spaces),
        ("Sentence Count", stats.sentence_count),
        ("Paragraph Count", stats.paragraph_count),
        (
            "Most Frequent Word",
            f"{stats.most_frequent_word} ({stats.most_frequent_word_count})",
        ),
        ("Longest Word", stats.longest_word),
    ]


def to_delimited_report(stats: TextStatistics, delimiter: str = ",") -> str:
    if not delimiter or "\n" in delimiter or "\r" in delimiter:
        raise ValueError(f"invalid delimiter {delimiter!r}")
    lines = [delimiter.join(HEADER)]
    lines.extend(
        delimiter.join([metric, str(value)]) for metric, value in report_rows(stats)
    )
    return "\n".join(lines)


def report_frame(stats: TextStatistics) -> pd.DataFrame:
    """Report rows as a two-column frame; values are strings so the column has one dtype."""
    return pd.DataFrame(
        [(metric, str(value)) for metric, value in report_rows(stats)],
        columns=list(HEADER),
    )


def report_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"text_analysis_{day.isoformat()}.csv"


def statistics_frame(texts: Iterable[str], index=None) -> pd.DataFrame:
    """One row of TextStatistics fields per text; missing values count as empty text."""
    records = [asdict(analyze(text if isinstance(text, str) else "")) for text in texts]
    columns = [field.name for field in fields(TextStatistics)]
    return pd.DataFrame(records, columns=columns, index=index)
