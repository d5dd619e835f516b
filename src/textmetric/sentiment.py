"""Offline bag-of-words sentiment.

Counts words from two fixed keyword lists. There is no negation handling and
no context: "not good" is one positive word.
"""

import asyncio
import logging
import math
import re
from typing import Iterable, Optional, Tuple

from .config import get_settings
from .errors import SentimentAnalysisError
from .models import SentimentLabel, SentimentVerdict

logger = logging.getLogger(__name__)

POSITIVE_WORDS = frozenset(
    [
        "good", "great", "excellent", "amazing", "wonderful", "best", "love",
        "like", "happy", "joy", "success", "win", "fast", "efficient", "easy",
        "clean", "popular", "valuable", "powerful", "smooth", "smart", "cool",
        "benefit", "improve", "beautiful", "perfect", "nice", "awesome",
        "innovative", "secure", "stable", "fun",
    ]
)

NEGATIVE_WORDS = frozenset(
    [
        "bad", "terrible", "awful", "worst", "hate", "dislike", "sad", "angry",
        "fail", "lose", "slow", "poor", "error", "bug", "difficult", "hard",
        "ugly", "wrong", "broken", "risk", "danger", "threat", "annoy",
        "boring", "confusing", "weak", "pain", "trouble", "useless", "dirty",
        "fake", "stupid",
    ]
)

NEUTRAL_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.99

_TOKEN_RE = re.compile(r"\b\w+\b")


def score_tokens(words: Iterable[str]) -> Tuple[int, int]:
    """Return (positive, negative) keyword counts for already-lowercased words."""
    pos_count = 0
    neg_count = 0
    for word in words:
        if word in POSITIVE_WORDS:
            pos_count += 1
        elif word in NEGATIVE_WORDS:
            neg_count += 1
    return pos_count, neg_count


def verdict_from_counts(pos_count: int, neg_count: int) -> SentimentVerdict:
    score = pos_count - neg_count
    if score > 0:
        label = SentimentLabel.POSITIVE
    elif score < 0:
        label = SentimentLabel.NEGATIVE
    else:
        label = SentimentLabel.NEUTRAL

    total = pos_count + neg_count
    if total == 0:
        confidence = NEUTRAL_CONFIDENCE
    else:
        confidence = min(0.5 + (abs(score) / total) * 0.5, MAX_CONFIDENCE)

    return SentimentVerdict(
        label=label,
        confidence=confidence,
        explanation=f"Found {pos_count} positive words and {neg_count} negative words.",
        positive_count=pos_count,
        negative_count=neg_count,
    )


async def classify(text: str, delay: Optional[float] = None) -> SentimentVerdict:
    """Classify ``text`` as Positive, Negative or Neutral.

    ``delay`` is a pause in seconds before the result is returned so the UI
    has something to show a spinner for. ``None`` uses the configured
    ``TEXTMETRIC_SENTIMENT_DELAY``; tests pass ``0``.
    """
    if delay is None:
        delay = get_settings().sentiment_delay
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(f"delay must be a finite non-negative number, got {delay}")

    await asyncio.sleep(delay)

    try:
        pos_count, neg_count = score_tokens(_TOKEN_RE.findall(text.lower()))
        verdict = verdict_from_counts(pos_count, neg_count)
    except Exception as e:
        logger.exception("sentiment classification failed")
        raise SentimentAnalysisError(f"Could not process text locally: {e}") from e

    logger.debug(
        "sentiment %s (%.2f): %d positive, %d negative",
        verdict.label.value,
        verdict.confidence,
        pos_count,
        neg_count,
    )
    return verdict
