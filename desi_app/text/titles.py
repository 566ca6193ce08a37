"""Bollywood movie title normalization."""

from typing import Optional

from ..config.defaults import TitleParams


def title_case_word(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


def normalize_title(title: str, params: Optional[TitleParams] = None) -> str:
    """
    Collapse whitespace and title-case a movie title.

    Short connector words ("ka", "ki", "the", "of", ...) stay lowercase except
    when they open the title.

    Args:
        title: Raw title text
        params: Lowercase word list (defaults if None)

    Returns:
        Normalized title, empty for blank input
    """
    params = params or TitleParams()

    words = []
    for position, word in enumerate(title.split()):
        lowered = word.lower()
        if position > 0 and lowered in params.lowercase_words:
            words.append(lowered)
        else:
            words.append(title_case_word(word))

    return " ".join(words)
