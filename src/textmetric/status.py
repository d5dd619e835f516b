"""State of the sentiment request shown by the UI.

    IDLE -> ANALYZING -> COMPLETED
                      -> ERROR

COMPLETED and ERROR fall back to IDLE once the text they were computed for
changes. A state always carries exactly the payload its status implies.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from .errors import SentimentAnalysisError
from .models import SentimentVerdict
from .sentiment import classify

logger = logging.getLogger(__name__)

Classifier = Callable[..., Awaitable[SentimentVerdict]]


class AnalysisStatus(str, Enum):
    IDLE = "IDLE"
    ANALYZING = "ANALYZING"
    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


@dataclass(frozen=True)
class SentimentState:
    status: AnalysisStatus = AnalysisStatus.IDLE
    source_text: Optional[str] = None
    result: Optional[SentimentVerdict] = None
    error: Optional[str] = None

    def __post_init__(self):
        completed = self.status is AnalysisStatus.COMPLETED
        failed = self.status is AnalysisStatus.ERROR
        if completed != (self.result is not None):
            raise ValueError(f"{self.status.value} state must carry a result only when completed")
        if failed != (self.error is not None):
            raise ValueError(f"{self.status.value} state must carry an error only when failed")
        if self.status is AnalysisStatus.IDLE and self.source_text is not None:
            raise ValueError("IDLE state has no source text")
        if self.status is not AnalysisStatus.IDLE and self.source_text is None:
            raise ValueError(f"{self.status.value} state needs the analyzed text")

    @classmethod
    def idle(cls) -> "SentimentState":
        return cls()

    @classmethod
    def analyzing(cls, text: str) -> "SentimentState":
        return cls(AnalysisStatus.ANALYZING, source_text=text)

    @classmethod
    def completed(cls, text: str, verdict: SentimentVerdict) -> "SentimentState":
        return cls(AnalysisStatus.COMPLETED, source_text=text, result=verdict)

    @classmethod
    def failed(cls, text: str, message: str) -> "SentimentState":
        return cls(AnalysisStatus.ERROR, source_text=text, error=message)

    @property
    def is_busy(self) -> bool:
        return self.status is AnalysisStatus.ANALYZING


def on_text_changed(state: SentimentState, text: str) -> SentimentState:
    """Drop a finished verdict once the text it describes has been edited."""
    if state.status in (AnalysisStatus.COMPLETED, AnalysisStatus.ERROR) and state.source_text != text:
        return SentimentState.idle()
    return state


def run_classification(
    text: str,
    classifier: Classifier = classify,
    delay: Optional[float] = None,
) -> SentimentState:
    """Run one classification to completion and return the resulting state.

    Only ``SentimentAnalysisError`` becomes an ERROR state; anything else is a
    programming error and propagates.
    """
    try:
        verdict = asyncio.run(classifier(text, delay=delay))
    except SentimentAnalysisError as e:
        logger.warning("sentiment analysis failed: %s", e)
        return SentimentState.failed(text, str(e))
    return SentimentState.completed(text, verdict)
