"""Small string searches and word splitting used by the image reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def find_substring(text: str, find: str, limit: int) -> int:
    """Return the offset of find in text, or -1.

    The search gives up at once when find is longer than limit; it stops
    at the end of text or at the first NUL character.
    """
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > limit:
        return -1
    return _until_nul(text).find(find)


def find_unquoted(text: str, find: str, limit: int) -> int:
    """Like find_substring, but ignores matches inside double quotes."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > limit:
        return -1
    text = _until_nul(text)
    last_start = len(text) - len(find)
    quoted = False
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text into words separated by runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(_until_nul(text)) if word]