import asyncio

import pytest

from textmetric import SentimentAnalysisError, SentimentLabel, classify
from textmetric import sentiment
from textmetric.sentiment import NEGATIVE_WORDS, POSITIVE_WORDS, score_tokens


def _classify(text):
    return asyncio.run(classify(text, delay=0))


def test_positive_sentiment():
    result = _classify("This is a wonderful and amazing feature that I love.")
    assert result.label is SentimentLabel.POSITIVE
    assert result.confidence > 0.5
    assert "positive words" in result.explanation


def test_negative_sentiment():
    result = _classify("This is terrible, bad, and a complete failure.")
    assert result.label is SentimentLabel.NEGATIVE
    assert "negative words" in result.explanation
    assert result.negative_count == 2


def test_neutral_without_keywords():
    result = _classify("The book is on the table.")
    assert result.label is SentimentLabel.NEUTRAL
    assert result.confidence == 0.5
    assert result.explanation == "Found 0 positive words and 0 negative words."


def test_mixed_sentiment_net_positive():
    result = _classify("The concept was good, implementation was bad, but overall excellent.")
    assert result.label is SentimentLabel.POSITIVE
    assert result.confidence == pytest.approx(0.5 + (1 / 3) * 0.5)
    assert (result.positive_count, result.negative_count) == (2, 1)


def test_balanced_keywords_are_neutral():
    result = _classify("good food, bad service")
    assert result.label is SentimentLabel.NEUTRAL
    assert result.confidence == 0.5


def test_confidence_is_capped():
    result = _classify("Great great great!")
    assert result.confidence == 0.99


def test_matching_is_case_insensitive():
    assert _classify("GOOD").label is SentimentLabel.POSITIVE


def test_label_is_plain_string_value():
    assert _classify("awful").label == "Negative"


def test_keyword_sets_do_not_overlap():
    assert not POSITIVE_WORDS & NEGATIVE_WORDS


def test_score_tokens():
    assert score_tokens(["love", "the", "bug", "fix", "fun"]) == (2, 1)


@pytest.mark.parametrize("delay", [-1, float("inf"), float("nan")])
def test_invalid_delay_rejected(delay):
    with pytest.raises(ValueError):
        asyncio.run(classify("good", delay=delay))


def test_configured_delay_is_used(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setenv("TEXTMETRIC_SENTIMENT_DELAY", "1.5")
    monkeypatch.setattr(sentiment.asyncio, "sleep", fake_sleep)
    asyncio.run(classify("good"))
    asyncio.run(classify("good", delay=0.25))
    assert delays == [1.5, 0.25]


def test_internal_failure_raises_sentiment_error(monkeypatch):
    def boom(words):
        raise RuntimeError("lexicon unavailable")

    monkeypatch.setattr(sentiment, "score_tokens", boom)
    with pytest.raises(SentimentAnalysisError, match="lexicon unavailable"):
        _classify("good")
