"""
word_suggester

In-memory word suggestions: prefix lookups ranked by popularity with an
edit-distance "did you mean" fallback.
"""

from word_suggester.core import (
    InvalidWord,
    NotFound,
    ResourceExhausted,
    Suggestion,
    SuggestionEngine,
    SuggestionResult,
)

__all__ = [
    "InvalidWord",
    "NotFound",
    "ResourceExhausted",
    "Suggestion",
    "SuggestionEngine",
    "SuggestionResult",
]

__version__ = "0.1.0"
