"""
WhatsApp export line parser.

Exported chats have one message per line in the form::

    DD/MM/YYYY, HH:MM - Sender Name: Message text here

Fields are cut out by position rather than by a regular expression, so odd
date or time text is passed through untouched as long as the three
delimiters are present.
"""

from typing import Any, Optional

from ..config.defaults import SentimentParams
from ..errors import MalformedDataError
from ..models.summaries import ChatMessage

DATE_DELIMITER = ", "
TIME_DELIMITER = " - "
SENDER_DELIMITER = ": "

FUNNY = "funny"
LOVE = "love"
NEUTRAL = "neutral"


class ChatParseError(MalformedDataError):
    """Raised when a chat line is missing one of its delimiters."""
    pass


def count_words(text: str) -> int:
    """Count whitespace-delimited, non-empty tokens."""
    return len(text.split())


def classify_sentiment(text: str, params: Optional[SentimentParams] = None) -> str:
    """
    Classify a message as 'funny', 'love' or 'neutral'.

    Funny markers are checked first, so a message carrying both kinds of
    marker is funny.

    Args:
        text: Message text
        params: Marker sets (defaults if None)

    Returns:
        Sentiment label
    """
    params = params or SentimentParams()
    folded = text.casefold()

    if any(marker in folded for marker in params.funny_markers):
        return FUNNY
    if any(marker in folded for marker in params.love_markers):
        return LOVE
    return NEUTRAL


def parse_chat_line(line: Any, params: Optional[SentimentParams] = None) -> ChatMessage:
    """
    Parse one exported chat line into its fields.

    Args:
        line: Raw exported line
        params: Sentiment marker sets (defaults if None)

    Returns:
        Parsed ChatMessage

    Raises:
        ChatParseError: If the line is not a string or a delimiter is missing
    """
    if not isinstance(line, str):
        raise ChatParseError(f"Chat line must be a string, got {type(line).__name__}",
                             expected_format="string", field="line")

    comma_idx = line.find(DATE_DELIMITER)
    dash_idx = line.find(TIME_DELIMITER)
    if comma_idx == -1 or dash_idx == -1:
        raise ChatParseError("Chat line is missing the date or time delimiter",
                             raw_data=line[:100],
                             expected_format="DD/MM/YYYY, HH:MM - Sender: Message",
                             field="line")

    # Sender names may not contain ": " but message text may
    colon_idx = line.find(SENDER_DELIMITER, dash_idx)
    if colon_idx == -1:
        raise ChatParseError("Chat line is missing the sender delimiter",
                             raw_data=line[:100],
                             expected_format="DD/MM/YYYY, HH:MM - Sender: Message",
                             field="line")

    text = line[colon_idx + len(SENDER_DELIMITER):].strip()

    return ChatMessage(
        date=line[:comma_idx],
        time=line[comma_idx + len(DATE_DELIMITER):dash_idx],
        sender=line[dash_idx + len(TIME_DELIMITER):colon_idx],
        text=text,
        word_count=count_words(text),
        sentiment=classify_sentiment(text, params),
    )
