"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

DEFAULT_SENTIMENT_DELAY = 0.8
DEFAULT_CSV_DELIMITER = ","
DEFAULT_TOP_WORDS = 20
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    sentiment_delay: float = DEFAULT_SENTIMENT_DELAY
    csv_delimiter: str = DEFAULT_CSV_DELIMITER
    top_words: int = DEFAULT_TOP_WORDS
    log_level: str = DEFAULT_LOG_LEVEL


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(name, raw, "expected a number of seconds") from None
    if not math.isfinite(value):
        raise ConfigError(name, raw, "must be a finite number")
    if value < 0:
        raise ConfigError(name, raw, "must not be negative")
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(name, raw, "expected an integer") from None
    if value < 1:
        raise ConfigError(name, raw, "must be at least 1")
    return value


def get_settings() -> Settings:
    """Read settings on every call so a changed environment takes effect on rerun."""
    delimiter = os.getenv("TEXTMETRIC_CSV_DELIMITER") or DEFAULT_CSV_DELIMITER
    if len(delimiter) != 1 or delimiter in "\r\n":
        raise ConfigError(
            "TEXTMETRIC_CSV_DELIMITER", delimiter, "must be a single character"
        )
    log_level = os.getenv("TEXTMETRIC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError("TEXTMETRIC_LOG_LEVEL", log_level, "unknown logging level")
    return Settings(
        sentiment_delay=_float_env("TEXTMETRIC_SENTIMENT_DELAY", DEFAULT_SENTIMENT_DELAY),
        csv_delimiter=delimiter,
        top_words=_int_env("TEXTMETRIC_TOP_WORDS", DEFAULT_TOP_WORDS),
        log_level=log_level,
    )
