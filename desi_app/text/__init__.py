"""Text parsing and normalization routines."""

from .chat import ChatParseError, classify_sentiment, count_words, parse_chat_line
from .titles import normalize_title, title_case_word

__all__ = [
    "ChatParseError",
    "classify_sentiment",
    "count_words",
    "parse_chat_line",
    "normalize_title",
    "title_case_word",
]
