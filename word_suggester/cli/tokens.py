# tokens.py
# Validation of raw "word[:popularity]" tokens before they reach the engine.

from __future__ import annotations

import re
import string
from typing import Iterable, Iterator, Tuple

from word_suggester.core.errors import InvalidWord

MAX_WORD_LENGTH = 99

_LETTERS = frozenset(string.ascii_letters)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_valid_word(text: str) -> bool:
    """Non-empty and ASCII letters only."""
    return bool(text) and all(ch in _LETTERS for ch in text)


def validate_word(text: str, max_length: int = MAX_WORD_LENGTH) -> str:
    if not text:
        raise InvalidWord("empty word")
    if len(text) > max_length:
        raise InvalidWord(f"word longer than {max_length} characters: {text[:20]!r}...")
    if not is_valid_word(text):
        raise InvalidWord(f"only letters allowed: {text!r}")
    return text


def _leading_int(text: str) -> int:
    # atoi-like: leading sign/digits, anything else counts as 0
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else 0


def parse_entry(token: str, max_length: int = MAX_WORD_LENGTH) -> Tuple[str, int]:
    """
    Parse "word" or "word:popularity" into (word, popularity).
    "apple:5" -> ("apple", 5), "apple" -> ("apple", 0), "apple:x" -> ("apple", 0)
    """
    word, sep, rest = token.partition(":")
    popularity = _leading_int(rest) if sep else 0
    validate_word(word, max_length)
    if popularity < 0:
        raise InvalidWord(f"negative popularity for {word!r}: {popularity}")
    return word, popularity


def split_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Whitespace-separated tokens across all lines."""
    for line in lines:
        yield from line.split()
