class TextMetricError(Exception):
    """Base class for errors raised by textmetric."""


class ConfigError(TextMetricError):
    """An environment variable holds a value that cannot be used."""

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"{name}={value!r}: {reason}")


class SentimentAnalysisError(TextMetricError):
    """Sentiment classification failed for a reason other than the input text."""
