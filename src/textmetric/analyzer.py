"""Word, sentence and paragraph statistics for a block of text.

Everything here is synchronous and side-effect free so the Streamlit page can
call it on every rerun, i.e. on every edit of the text area.
"""

import logging
import re
from collections import Counter
from typing import Dict, List, Tuple

from .models import NOT_AVAILABLE, TextStatistics

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n+")
# Naive on purpose: "e.g. this" and "3. 5" are counted as sentence breaks.
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+(?:\s|\Z)")
_WORD_RE = re.compile(r"\b[\w-]+\b")


def code_units(text: str) -> int:
    """Length in UTF-16 code units, the way a browser counts characters."""
    return len(text.encode("utf-16-le")) // 2


def tokenize(text: str) -> List[str]:
    """Words in original casing; hyphenated words and numbers count as one word."""
    return _WORD_RE.findall(text)


def _count_segments(pattern: re.Pattern, text: str) -> int:
    return sum(1 for segment in pattern.split(text) if segment.strip())


def analyze(text: str) -> TextStatistics:
    if not text:
        return TextStatistics.empty()

    words = tokenize(text)

    frequencies: Dict[str, int] = {}
    max_freq = 0
    most_frequent = ""
    longest = ""
    for word in words:
        if len(word) > len(longest):
            longest = word

        key = word.lower()
        count = frequencies.get(key, 0) + 1
        frequencies[key] = count
        # strict ">" keeps the first word that reached the top count
        if count > max_freq:
            max_freq = count
            most_frequent = key

    stats = TextStatistics(
        word_count=len(words),
        char_count=code_units(text),
        char_count_no_spaces=code_units(_WHITESPACE_RE.sub("", text)),
        sentence_count=_count_segments(_SENTENCE_SPLIT_RE, text),
        paragraph_count=_count_segments(_PARAGRAPH_SPLIT_RE, text),
        most_frequent_word=most_frequent or NOT_AVAILABLE,
        most_frequent_word_count=max_freq,
        longest_word=longest or NOT_AVAILABLE,
    )
    logger.debug(
        "analyzed %d chars: %d words, %d sentences, %d paragraphs",
        stats.char_count,
        stats.word_count,
        stats.sentence_count,
        stats.paragraph_count,
    )
    return stats


def top_words(text: str, limit: int = 20) -> List[Tuple[str, int]]:
    """Most common lowercase words, highest count first, ties in order of appearance."""
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    word_counts = Counter(word.lower() for word in tokenize(text))
    return word_counts.most_common(limit)
