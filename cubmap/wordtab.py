"""Substring search and word splitting used when reading XPM text."""

from __future__ import annotations

import re

_WORD_SEPARATOR = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("the searched text must not be empty")


def find(text: str, needle: str, length: int) -> int:
    """Return the index of the first occurrence of needle in text, or -1.

    Nothing is found when the needle is longer than ``length``.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but ignore matches inside double-quoted runs."""
    _check_needle(needle)
    if len(needle) > length:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]