from dataclasses import dataclass
from enum import Enum

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class TextStatistics:
    word_count: int
    char_count: int
    char_count_no_spaces: int
    sentence_count: int
    paragraph_count: int
    most_frequent_word: str
    most_frequent_word_count: int
    longest_word: str

    @classmethod
    def empty(cls) -> "TextStatistics":
        """Statistics of a text with no characters at all."""
        return cls(
            word_count=0,
            char_count=0,
            char_count_no_spaces=0,
            sentence_count=0,
            paragraph_count=0,
            most_frequent_word=NOT_AVAILABLE,
            most_frequent_word_count=0,
            longest_word=NOT_AVAILABLE,
        )

    @property
    def has_words(self) -> bool:
        return self.word_count > 0


class SentimentLabel(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class SentimentVerdict:
    label: SentimentLabel
    confidence: float  # 0.5 - 0.99
    explanation: str
    positive_count: int = 0
    negative_count: int = 0

    @property
    def confidence_percent(self) -> int:
        return round(self.confidence * 100)
