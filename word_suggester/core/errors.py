# errors.py
# Exceptions shared by the word store, the matcher and the CLI boundary.


class WordSuggesterError(Exception):
    """Base class for everything raised by word_suggester."""


class InvalidWord(WordSuggesterError, ValueError):
    """A raw token was empty, too long, non-alphabetic or had a bad popularity.

    Raised by the input boundary only, the core assumes clean words.
    """


class NotFound(WordSuggesterError, LookupError):
    """No stored word starts with the requested prefix.

    Not really a failure: callers use it as the signal to try spell correction.
    """

    def __init__(self, prefix: str) -> None:
        super().__init__(f"no stored word starts with {prefix!r}")
        self.prefix = prefix


class ResourceExhausted(WordSuggesterError, MemoryError):
    """Node or working-row allocation failed. Fatal."""
